"""Sync subcommand - reconcile a layout file with a list of item ids"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from . import add_grid_arguments, add_layout_arguments, build_engine, configure_logging, emit_layout, load_layout

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add sync subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for sync subcommand
    """
    parser = subparsers.add_parser(
        'sync',
        help='Add missing items and drop unmanaged ones'
    )
    add_layout_arguments(parser)
    parser.add_argument('--ids', required=True,
                        help='Comma-separated ids of the items that should be on the grid')
    add_grid_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute sync subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)
    engine = build_engine(args)
    layout = load_layout(args.input)

    managed_ids = [item_id.strip() for item_id in args.ids.split(',') if item_id.strip()]
    logger.info(f"Managed ids: {len(managed_ids)}")

    emit_layout(engine.synchronize(layout, managed_ids), args.output)
