"""Move subcommand - move one item in a layout file"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from . import add_grid_arguments, add_layout_arguments, build_engine, configure_logging, emit_layout, load_layout

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add move subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for move subcommand
    """
    parser = subparsers.add_parser(
        'move',
        help='Move an item and resolve collisions'
    )
    add_layout_arguments(parser)
    parser.add_argument('--id', required=True, dest='item_id', help='Id of the item to move')
    parser.add_argument('--x', type=int, required=True, help='Target column')
    parser.add_argument('--y', type=int, required=True, help='Target row')
    parser.add_argument('--prevent-collision', action='store_true',
                        help='Reject the move instead of displacing other items')
    add_grid_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> int:
    """
    Execute move subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        Exit status: 0 when moved or unchanged, 1 when not found, 2 when disallowed
    """
    configure_logging(args)
    engine = build_engine(args, prevent_collision=args.prevent_collision)
    layout = load_layout(args.input)

    result = engine.move(engine.compact(layout), args.item_id, args.x, args.y)
    logger.info(f"Move {args.item_id} -> ({args.x},{args.y}): {result.status}")

    if result.status == 'not_found':
        logger.error(f"Item not found: {args.item_id}")
        return 1
    emit_layout(result.layout, args.output)
    return 2 if result.status == 'disallowed' else 0
