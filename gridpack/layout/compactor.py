"""
Compactor for GridPack
Packs movable items toward the top (vertical) or left (horizontal) edge

Algorithm:
1. Bounds-correct every item against the column count
2. Seed the obstacle set with all static items
3. Visit movable items in stable (y, x) order ((x, y) for horizontal)
4. Slide each item toward the edge one step at a time until blocked,
   then push it past anything it still overlaps
5. Add the placed item to the obstacles and write it back into its
   original slot so caller iteration order is kept
"""
from __future__ import annotations
from typing import List, Optional, Sequence
import logging

from .types import LayoutItem
from .collisions import first_collision, bottom, collisions
from ..types import CompactAxis

logger = logging.getLogger(__name__)

VERTICAL: CompactAxis = 'vertical'
HORIZONTAL: CompactAxis = 'horizontal'
NONE: CompactAxis = 'none'

_AXES = (VERTICAL, HORIZONTAL, NONE)


def resolve_axis(axis: Optional[str]) -> CompactAxis:
    """
    Normalize a compaction axis

    None is accepted as 'none'.

    Raises:
        ValueError: Unknown axis name
    """
    if axis is None:
        return NONE
    normalized = str(axis).strip().lower()
    if normalized not in _AXES:
        raise ValueError(f"Invalid compaction axis: {axis}. Use 'vertical', 'horizontal' or 'none'")
    return normalized  # type: ignore[return-value]


def _packing_key(axis: CompactAxis):
    if axis == HORIZONTAL:
        return lambda item: (item.x, item.y)
    return lambda item: (item.y, item.x)


def sort_layout(layout: Sequence[LayoutItem], axis: Optional[str]) -> List[LayoutItem]:
    """
    Items in packing order

    Row-major for vertical (and none), column-major for horizontal.
    Python's sort is stable, so ties keep array order.
    """
    return sorted(layout, key=_packing_key(resolve_axis(axis)))


def correct_bounds(layout: Sequence[LayoutItem], cols: int) -> List[LayoutItem]:
    """Clamp every item into the grid (see LayoutItem.normalized)"""
    return [item.normalized(cols) for item in layout]


def _compact_item_vertical(
    obstacles: List[LayoutItem],
    item: LayoutItem,
    max_rows: Optional[int]
) -> LayoutItem:
    # Nothing above bottom(obstacles) can block, so start there
    y = min(bottom(obstacles), item.y)
    candidate = item.moved_to(item.x, y)
    while candidate.y > 0 and first_collision(obstacles, candidate.moved_to(candidate.x, candidate.y - 1)) is None:
        candidate = candidate.moved_to(candidate.x, candidate.y - 1)

    hit = first_collision(obstacles, candidate)
    while hit is not None:
        candidate = candidate.moved_to(candidate.x, hit.y + hit.h)
        hit = first_collision(obstacles, candidate)

    return _clamp_to_ceiling(obstacles, candidate, max_rows)


def _compact_item_horizontal(
    obstacles: List[LayoutItem],
    item: LayoutItem,
    cols: int,
    max_rows: Optional[int]
) -> LayoutItem:
    candidate = item
    while True:
        while candidate.x > 0 and first_collision(obstacles, candidate.moved_to(candidate.x - 1, candidate.y)) is None:
            candidate = candidate.moved_to(candidate.x - 1, candidate.y)

        hit = first_collision(obstacles, candidate)
        if hit is None:
            break
        x = hit.x + hit.w
        if x + candidate.w > cols:
            # Row is full: wrap onto the next row and slide left again
            candidate = candidate.moved_to(cols - candidate.w, candidate.y + 1)
        else:
            candidate = candidate.moved_to(x, candidate.y)

    return _clamp_to_ceiling(obstacles, candidate, max_rows)


def _clamp_to_ceiling(
    obstacles: List[LayoutItem],
    item: LayoutItem,
    max_rows: Optional[int]
) -> LayoutItem:
    if max_rows is None or item.y + item.h <= max_rows:
        return item
    clamped = item.moved_to(item.x, max(max_rows - item.h, 0))
    if collisions(obstacles, clamped):
        logger.warning(f"Item {item.id} does not fit under max_rows={max_rows}; "
                       f"clamped to row {clamped.y} with overlap")
    return clamped


def compact(
    layout: Sequence[LayoutItem],
    axis: Optional[str],
    cols: int,
    max_rows: Optional[int] = None
) -> List[LayoutItem]:
    """
    Pack a layout along an axis

    Args:
        layout: Items to pack (not modified)
        axis: 'vertical', 'horizontal' or 'none'/None
        cols: Number of grid columns
        max_rows: Optional row ceiling

    Returns:
        New layout in the same order as the input
    """
    axis = resolve_axis(axis)
    if axis == NONE:
        return list(layout)

    items = correct_bounds(layout, cols)
    obstacles: List[LayoutItem] = [item for item in items if item.static]
    out: List[LayoutItem] = list(items)
    key = _packing_key(axis)

    for index in sorted(range(len(items)), key=lambda i: key(items[i])):
        item = items[index]
        if item.static:
            continue
        if axis == VERTICAL:
            placed = _compact_item_vertical(obstacles, item, max_rows)
        else:
            placed = _compact_item_horizontal(obstacles, item, cols, max_rows)

        if placed is not item and (placed.x, placed.y) != (item.x, item.y):
            logger.debug(f"Compacted {item.id}: ({item.x},{item.y}) -> ({placed.x},{placed.y})")
        obstacles.append(placed)
        out[index] = placed

    return out
