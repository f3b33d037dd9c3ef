"""
Collision detection for grid layouts

Two rectangles collide when they overlap strictly on both axes.
Touching edges do not count.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence
import logging

import numpy as np

from .types import LayoutItem
from ..exceptions import DuplicateIdError

logger = logging.getLogger(__name__)


def overlaps(a: LayoutItem, b: LayoutItem) -> bool:
    """Strict overlap test on both axes (symmetric)"""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def _geometry_matrix(layout: Sequence[LayoutItem]) -> np.ndarray:
    """Rows of (x, y, w, h) for vectorised overlap tests"""
    return np.array([(item.x, item.y, item.w, item.h) for item in layout], dtype=np.int64).reshape(-1, 4)


def collision_mask(layout: Sequence[LayoutItem], candidate: LayoutItem) -> np.ndarray:
    """
    Boolean mask of items in layout that collide with candidate

    The candidate's own id never collides with itself.
    """
    if not layout:
        return np.zeros(0, dtype=bool)

    geo = _geometry_matrix(layout)
    x, y, w, h = geo[:, 0], geo[:, 1], geo[:, 2], geo[:, 3]
    mask = (
        (candidate.x < x + w) & (candidate.x + candidate.w > x)
        & (candidate.y < y + h) & (candidate.y + candidate.h > y)
    )
    same_id = np.fromiter((item.id == candidate.id for item in layout), dtype=bool, count=len(layout))
    return mask & ~same_id


def collisions(layout: Sequence[LayoutItem], candidate: LayoutItem) -> List[LayoutItem]:
    """
    All items colliding with a candidate rectangle

    Args:
        layout: Items to test against
        candidate: Rectangle to test; an item with the same id is skipped

    Returns:
        Colliding items in layout order
    """
    mask = collision_mask(layout, candidate)
    return [item for item, hit in zip(layout, mask) if hit]


def first_collision(layout: Sequence[LayoutItem], candidate: LayoutItem) -> Optional[LayoutItem]:
    """First colliding item in layout order, or None"""
    for item in layout:
        if item.id != candidate.id and overlaps(item, candidate):
            return item
    return None


def has_overlaps(layout: Sequence[LayoutItem], include_static: bool = False) -> bool:
    """Whether any two items overlap (static/static pairs skipped unless include_static)"""
    for index, item in enumerate(layout):
        for other in layout[index + 1:]:
            if item.static and other.static and not include_static:
                continue
            if overlaps(item, other):
                return True
    return False


def bottom(layout: Iterable[LayoutItem]) -> int:
    """One past the lowest occupied row (0 for an empty layout)"""
    return max((item.y + item.h for item in layout), default=0)


def get_item(layout: Sequence[LayoutItem], item_id: str) -> Optional[LayoutItem]:
    """Item with the given id, or None"""
    for item in layout:
        if item.id == item_id:
            return item
    return None


def find_duplicates(ids: Iterable[str]) -> List[str]:
    seen: Dict[str, int] = {}
    for item_id in ids:
        seen[item_id] = seen.get(item_id, 0) + 1
    return [item_id for item_id, count in seen.items() if count > 1]


def validate_unique_ids(layout: Sequence[LayoutItem], source: str = "layout") -> None:
    """
    Raise DuplicateIdError if any id repeats

    Args:
        layout: Items to check
        source: Label used in the error message
    """
    duplicates = find_duplicates(item.id for item in layout)
    if duplicates:
        logger.error(f"Duplicate ids in {source}: {duplicates}")
        raise DuplicateIdError(duplicates, source)


def layouts_equal(a: Sequence[LayoutItem], b: Sequence[LayoutItem]) -> bool:
    """
    Structural layout equality

    Same set of ids with identical x, y, w, h and static flag.
    Order is ignored.
    """
    if len(a) != len(b):
        return False
    geometry_a = {item.id: item.geometry() for item in a}
    geometry_b = {item.id: item.geometry() for item in b}
    return geometry_a == geometry_b


def can_drag(item: LayoutItem, default: bool = True) -> bool:
    """Item override if set, otherwise the ambient default unless the item is static"""
    if item.is_draggable is not None:
        return item.is_draggable
    return default and not item.static


def can_resize(item: LayoutItem, default: bool = True) -> bool:
    """Item override if set, otherwise the ambient default unless the item is static"""
    if item.is_resizable is not None:
        return item.is_resizable
    return default and not item.static
