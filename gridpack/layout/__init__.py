"""
Layout Module for GridPack
Grid packing and collision-resolution engine

Public API:
    - LayoutEngine: Config-bound facade over the functions below
    - LayoutItem: One grid-resident rectangle
    - Placeholder: Transient drag/resize target
    - MoveResult: Outcome of a move or resize request
    - compact: Pack a layout along an axis
    - collisions: Items overlapping a candidate rectangle
    - resolve_move / resolve_resize: Interactive request resolution
    - pixel_to_cell / cell_to_pixel: Coordinate mapping
    - synchronize: Reconcile a layout with managed item ids
"""

from .types import LayoutItem, Placeholder, MoveResult, GridCell, PixelBox
from .collisions import (
    overlaps,
    collisions,
    first_collision,
    has_overlaps,
    bottom,
    get_item,
    layouts_equal,
    can_drag,
    can_resize,
)
from .compactor import compact, resolve_axis, sort_layout, VERTICAL, HORIZONTAL, NONE
from .resolver import resolve_move, resolve_resize
from .coordinates import (
    PositionParams,
    column_width,
    pixel_to_cell,
    cell_to_pixel,
    pixel_size_to_cells,
    container_height,
)
from .synchronizer import synchronize
from .engine import LayoutEngine

__all__ = [
    'LayoutEngine',
    'LayoutItem',
    'Placeholder',
    'MoveResult',
    'GridCell',
    'PixelBox',
    'overlaps',
    'collisions',
    'first_collision',
    'has_overlaps',
    'bottom',
    'get_item',
    'layouts_equal',
    'can_drag',
    'can_resize',
    'compact',
    'resolve_axis',
    'sort_layout',
    'VERTICAL',
    'HORIZONTAL',
    'NONE',
    'resolve_move',
    'resolve_resize',
    'PositionParams',
    'column_width',
    'pixel_to_cell',
    'cell_to_pixel',
    'pixel_size_to_cells',
    'container_height',
    'synchronize',
]
