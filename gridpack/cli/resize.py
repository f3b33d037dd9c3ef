"""Resize subcommand - resize one item in a layout file"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from . import add_grid_arguments, add_layout_arguments, build_engine, configure_logging, emit_layout, load_layout

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    parser = subparsers.add_parser(
        'resize',
        help='Resize an item and resolve collisions'
    )
    add_layout_arguments(parser)
    parser.add_argument('--id', required=True, dest='item_id', help='Id of the item to resize')
    parser.add_argument('--w', type=int, required=True, help='Target width in cells')
    parser.add_argument('--h', type=int, required=True, help='Target height in cells')
    parser.add_argument('--prevent-collision', action='store_true',
                        help='Shrink to the free space instead of displacing other items')
    add_grid_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> int:
    """Execute resize subcommand; exit status as for move"""
    configure_logging(args)
    engine = build_engine(args, prevent_collision=args.prevent_collision)
    layout = load_layout(args.input)

    result = engine.resize(engine.compact(layout), args.item_id, args.w, args.h)
    logger.info(f"Resize {args.item_id} -> {args.w}x{args.h}: {result.status}")

    if result.status == 'not_found':
        logger.error(f"Item not found: {args.item_id}")
        return 1
    if result.item is not None and (result.item.w, result.item.h) != (args.w, args.h):
        logger.info(f"Size clamped to {result.item.w}x{result.item.h}")
    emit_layout(result.layout, args.output)
    return 2 if result.status == 'disallowed' else 0
