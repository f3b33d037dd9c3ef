"""Locate subcommand - map a pixel offset onto the grid"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import json
import logging

from . import add_grid_arguments, configure_logging
from ..config import EngineConfig
from ..layout import LayoutEngine, LayoutItem

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    parser = subparsers.add_parser(
        'locate',
        help='Convert a pixel offset to a grid cell'
    )
    parser.add_argument('--top', type=float, required=True, help='Offset from the container top (px)')
    parser.add_argument('--left', type=float, required=True, help='Offset from the container left (px)')
    parser.add_argument('--w', type=int, default=1, help='Item width in cells (default: 1)')
    parser.add_argument('--h', type=int, default=1, help='Item height in cells (default: 1)')
    parser.add_argument('--width', type=float, default=1200, help='Container width (px), default: 1200')
    parser.add_argument('--row-height', type=float, default=150, help='Row height (px), default: 150')
    parser.add_argument('--margin', nargs=2, type=int, default=[10, 10],
                        help='Horizontal and vertical margin (px), default: 10 10')
    parser.add_argument('--padding', nargs=2, type=int, default=None,
                        help='Horizontal and vertical container padding (px), default: same as margin')
    add_grid_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute locate subcommand

    Prints the cell and the cell's own pixel box as JSON.
    """
    configure_logging(args)
    config = EngineConfig()
    config.grid.cols = args.cols
    config.grid.max_rows = args.max_rows
    config.grid.container_width = args.width
    config.grid.row_height = args.row_height
    config.grid.margin = tuple(args.margin)
    config.grid.container_padding = tuple(args.padding) if args.padding else None
    engine = LayoutEngine(config)

    cell = engine.pixel_to_cell(args.top, args.left, args.w, args.h)
    box = engine.cell_to_pixel(LayoutItem(id='located', x=cell.x, y=cell.y, w=args.w, h=args.h))
    logger.debug(f"Column width: {engine.params.column_width:.2f} px")

    print(json.dumps({'cell': cell.to_dict(), 'box': box.to_dict()}))
