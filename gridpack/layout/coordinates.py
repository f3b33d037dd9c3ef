"""
Pixel <-> grid coordinate conversion

Column width is derived from the container width:

    col_width = (width - 2 * pad_x - (cols - 1) * margin_x) / cols

A cell at column x starts at (col_width + margin_x) * x + pad_x pixels.
Rounding is half-up so a dragged item snaps to the cell nearest its
top-left corner.
"""
from __future__ import annotations
from dataclasses import dataclass
from math import floor
from typing import Optional, Sequence, Tuple

from .types import LayoutItem, GridCell, PixelBox
from .collisions import bottom
from ..types import Margin


def _round(value: float) -> int:
    """Round half up (Python's round() is half-to-even)"""
    return int(floor(value + 0.5))


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(min(value, upper), lower)


@dataclass(frozen=True)
class PositionParams:
    """
    Geometry needed to map between pixels and grid cells

    Attributes:
        cols: Number of grid columns
        row_height: Height of one row (px)
        margin: (horizontal, vertical) gap between items (px)
        container_padding: (horizontal, vertical) padding inside the
            container (px); defaults to the margin
        container_width: Container width (px)
        max_rows: Optional row ceiling
    """
    cols: int
    row_height: float
    margin: Margin = (10, 10)
    container_padding: Optional[Margin] = None
    container_width: float = 1200
    max_rows: Optional[int] = None

    @property
    def padding(self) -> Margin:
        """Effective container padding"""
        return self.container_padding if self.container_padding is not None else self.margin

    @property
    def column_width(self) -> float:
        return column_width(self)


def column_width(params: PositionParams) -> float:
    """Width of a single column (px)"""
    margin_x = params.margin[0]
    pad_x = params.padding[0]
    return (params.container_width - 2 * pad_x - (params.cols - 1) * margin_x) / params.cols


def _span(cells: int, unit: float, margin: float) -> int:
    """Pixel length of a run of cells, including the margins between them"""
    return _round(unit * cells + max(0, cells - 1) * margin)


def cell_to_pixel(params: PositionParams, item: LayoutItem) -> PixelBox:
    """
    Pixel box of a grid item

    Args:
        params: Container geometry
        item: Any object with x, y, w, h in grid cells

    Returns:
        PixelBox(top, left, width, height)
    """
    col_w = column_width(params)
    margin_x, margin_y = params.margin
    pad_x, pad_y = params.padding
    return PixelBox(
        top=_round((params.row_height + margin_y) * item.y + pad_y),
        left=_round((col_w + margin_x) * item.x + pad_x),
        width=_span(item.w, col_w, margin_x),
        height=_span(item.h, params.row_height, margin_y),
    )


def pixel_to_cell(params: PositionParams, top: float, left: float, w: int, h: int) -> GridCell:
    """
    Nearest grid cell for a pixel offset

    Args:
        params: Container geometry
        top: Offset from the container's top edge (px)
        left: Offset from the container's left edge (px)
        w: Width of the item being placed (cells)
        h: Height of the item being placed (cells)

    Returns:
        GridCell clamped so the item fits inside the grid
    """
    col_w = column_width(params)
    margin_x, margin_y = params.margin
    pad_x, pad_y = params.padding

    x = _round((left - pad_x) / (col_w + margin_x))
    y = _round((top - pad_y) / (params.row_height + margin_y))

    x = _clamp(x, 0, max(params.cols - w, 0))
    if params.max_rows is not None:
        y = _clamp(y, 0, max(params.max_rows - h, 0))
    else:
        y = max(y, 0)
    return GridCell(x=x, y=y)


def pixel_size_to_cells(
    params: PositionParams,
    width: float,
    height: float,
    x: int,
    y: int
) -> Tuple[int, int]:
    """
    Grid size (w, h) for a pixel size during a resize gesture

    Args:
        params: Container geometry
        width: Item width (px)
        height: Item height (px)
        x: Item column, limits the width to the remaining columns
        y: Item row, limits the height under a row ceiling

    Returns:
        (w, h) with both at least 1
    """
    col_w = column_width(params)
    margin_x, margin_y = params.margin

    w = _round((width + margin_x) / (col_w + margin_x))
    h = _round((height + margin_y) / (params.row_height + margin_y))

    w = _clamp(w, 1, max(params.cols - x, 1))
    if params.max_rows is not None:
        h = _clamp(h, 1, max(params.max_rows - y, 1))
    else:
        h = max(h, 1)
    return w, h


def container_height(params: PositionParams, layout: Sequence[LayoutItem], min_height: float = 0) -> int:
    """
    Pixel height needed to show every row of a layout

    Args:
        params: Container geometry
        layout: Items to fit
        min_height: Lower bound (px); 0 disables it

    Returns:
        Height in pixels
    """
    rows = bottom(layout)
    pad_y = params.padding[1]
    margin_y = params.margin[1]
    height = rows * params.row_height + max(rows - 1, 0) * margin_y + pad_y * 2
    if min_height and height < min_height:
        height = min_height
    return _round(height)
