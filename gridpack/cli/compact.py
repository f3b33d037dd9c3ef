"""Compact subcommand - pack a layout file"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from . import add_grid_arguments, add_layout_arguments, build_engine, configure_logging, emit_layout, load_layout
from ..layout import has_overlaps

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add compact subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for compact subcommand
    """
    parser = subparsers.add_parser(
        'compact',
        help='Pack a layout along an axis'
    )
    add_layout_arguments(parser)
    add_grid_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute compact subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)
    logger.info("=== GridPack: Compact ===")

    engine = build_engine(args)
    layout = load_layout(args.input)
    logger.info(f"Axis: {engine.axis}, columns: {engine.grid.cols}")

    compacted = engine.compact(layout)
    if engine.axis != 'none' and has_overlaps([item for item in compacted if not item.static]):
        logger.warning("Compacted layout still has overlapping items (row ceiling too low?)")

    emit_layout(compacted, args.output)
