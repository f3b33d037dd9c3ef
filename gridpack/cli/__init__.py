"""
Command-line subcommands for GridPack

Helpers shared by the subcommand modules: common grid options, logging
setup and layout loading.
"""

from __future__ import annotations
from typing import List, Optional
from argparse import ArgumentParser, Namespace
from pathlib import Path
import json
import logging

from ..config import EngineConfig
from ..data import EXAMPLE_LAYOUT
from ..io import read_layout, write_layout
from ..layout import LayoutEngine, LayoutItem

logger = logging.getLogger(__name__)


def add_grid_arguments(parser: ArgumentParser) -> None:
    """Options shared by every subcommand"""
    parser.add_argument('--cols', type=int, default=12,
                        help='Number of grid columns (default: 12)')
    parser.add_argument('--max-rows', type=int, default=None,
                        help='Row ceiling (default: unbounded)')
    parser.add_argument('--axis', choices=['vertical', 'horizontal', 'none'], default='vertical',
                        help='Compaction axis (default: vertical)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def add_layout_arguments(parser: ArgumentParser) -> None:
    """Input/output options for subcommands that transform a layout file"""
    parser.add_argument('--input', required=True,
                        help="Layout file (.json or .tsv); 'default' uses the bundled example")
    parser.add_argument('--output',
                        help='Output layout file (default: print JSON to stdout)')


def configure_logging(args: Namespace) -> None:
    """Configure logging as early as possible for a subcommand"""
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )


def build_engine(args: Namespace, prevent_collision: bool = False) -> LayoutEngine:
    """LayoutEngine configured from command-line options"""
    config = EngineConfig()
    config.grid.cols = args.cols
    config.grid.max_rows = args.max_rows
    config.interaction.compact_type = args.axis
    config.interaction.prevent_collision = prevent_collision
    return LayoutEngine(config)


def load_layout(path: str) -> List[LayoutItem]:
    """
    Load the --input layout

    Raises:
        FileNotFoundError: Input file does not exist
    """
    if path == 'default':
        logger.info("Using bundled example layout")
        path = EXAMPLE_LAYOUT
    if not Path(path).exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return read_layout(path)


def emit_layout(layout: List[LayoutItem], output: Optional[str]) -> None:
    """Write the layout to --output, or print it as JSON"""
    if output:
        write_layout(layout, output)
        logger.info(f"Output: {output}")
        return
    print(json.dumps([item.to_dict() for item in layout], indent=2))
