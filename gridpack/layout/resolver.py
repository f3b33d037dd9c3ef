"""
Move and resize resolution for GridPack

Turns an interactive request (item id plus target position or size) into a
new, overlap-free layout:

1. Look up and clamp the request against the grid
2. Reject it outright when collision prevention is on and the target is taken
3. Otherwise place the item, displace anything it lands on along the
   compaction axis (cascading), and re-compact

Requests for unknown ids and static items never raise; the outcome is
reported through MoveResult.status.
"""
from __future__ import annotations
from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple
import logging

from .types import LayoutItem, MoveResult, Placeholder
from .collisions import collisions, get_item
from .compactor import compact, resolve_axis, sort_layout, HORIZONTAL

logger = logging.getLogger(__name__)


def clamp_position(
    item: LayoutItem,
    x: int,
    y: int,
    cols: int,
    max_rows: Optional[int] = None
) -> Tuple[int, int]:
    """Clamp a target corner so the item stays inside the grid"""
    w = min(max(item.w, 1), cols)
    x = min(max(int(x), 0), cols - w)
    y = max(int(y), 0)
    if max_rows is not None:
        y = min(y, max(max_rows - item.h, 0))
    return x, y


def clamp_size(
    item: LayoutItem,
    w: int,
    h: int,
    cols: int,
    max_rows: Optional[int] = None
) -> Tuple[int, int]:
    """
    Clamp a target size to the item's min/max bounds and the grid

    The grid edge and row ceiling win over min_w/min_h so the item never
    leaves the grid.
    """
    min_w = max(item.min_w or 1, 1)
    room_w = max(cols - item.x, 1)
    max_w = room_w
    if item.max_w is not None:
        max_w = min(max_w, item.max_w)
    min_h = max(item.min_h or 1, 1)
    max_h = item.max_h
    if max_rows is not None:
        max_h = max_rows - item.y if max_h is None else min(max_h, max_rows - item.y)

    w = min(max(min(int(w), max_w), min_w), room_w)
    h = int(h)
    if max_h is not None:
        h = min(h, max_h)
    h = max(h, min_h)
    if max_rows is not None:
        h = min(h, max(max_rows - item.y, 1))
    return w, h


def _displace(collider: LayoutItem, mover: LayoutItem, axis: str, cols: int) -> LayoutItem:
    """Position for collider after being pushed out of mover's way"""
    if axis == HORIZONTAL:
        x = mover.x + mover.w
        if x + collider.w <= cols:
            return collider.moved_to(x, collider.y)
    return collider.moved_to(collider.x, mover.y + mover.h)


def cascade(
    layout: Sequence[LayoutItem],
    item_id: str,
    axis: Optional[str],
    cols: int,
    max_steps: Optional[int] = None
) -> List[LayoutItem]:
    """
    Push every item overlapping item_id out of its way, transitively

    Displaced items may in turn displace others. When the moving item sits
    on a static item, the moving item itself is pushed past it instead.
    Bounded by max_steps, len(layout)**2 + len(layout) by default.

    Args:
        layout: Layout with item_id already at its new rectangle
        item_id: Id of the item that claimed its space
        axis: Compaction axis; 'none' displaces vertically
        cols: Number of grid columns
        max_steps: Step limit; a warning is logged when it is hit

    Returns:
        New layout in the same order
    """
    axis = resolve_axis(axis)
    slots: Dict[str, int] = {item.id: index for index, item in enumerate(layout)}
    current: List[LayoutItem] = list(layout)
    queue = deque([item_id])
    if max_steps is None:
        max_steps = len(current) ** 2 + len(current)
    steps = 0

    while queue:
        steps += 1
        if steps > max_steps:
            logger.warning(f"Cascade for {item_id} stopped after {max_steps} steps")
            break

        mover = current[slots[queue.popleft()]]
        for collider in sort_layout(collisions(current, mover), axis):
            # The mover may have been pushed by an earlier static collider
            mover = current[slots[mover.id]]
            if collider.static:
                if mover.static:
                    continue
                pushed = _displace(mover, collider, axis, cols)
                logger.debug(f"{mover.id} pushed past static {collider.id} to ({pushed.x},{pushed.y})")
                current[slots[mover.id]] = pushed
                queue.append(mover.id)
                break
            pushed = _displace(collider, mover, axis, cols)
            logger.debug(f"{collider.id} displaced by {mover.id} to ({pushed.x},{pushed.y})")
            current[slots[collider.id]] = pushed
            queue.append(collider.id)

    return current


def _replace_item(layout: Sequence[LayoutItem], updated: LayoutItem) -> List[LayoutItem]:
    return [updated if item.id == updated.id else item for item in layout]


def _final_item(layout: Sequence[LayoutItem], item_id: str) -> Optional[LayoutItem]:
    return get_item(layout, item_id)


def resolve_move(
    layout: Sequence[LayoutItem],
    item_id: str,
    x: int,
    y: int,
    *,
    is_user_action: bool = False,
    prevent_collision: bool = False,
    axis: Optional[str] = 'vertical',
    cols: int = 12,
    max_rows: Optional[int] = None,
    resolve_collisions: bool = True
) -> MoveResult:
    """
    Move an item toward (x, y)

    Args:
        layout: Current layout (not modified)
        item_id: Id of the item to move
        x: Target column
        y: Target row
        is_user_action: Whether the request comes directly from the user;
            carried on the result, never changes geometry
        prevent_collision: Reject the move if the target is occupied
        axis: Compaction axis applied after the move
        cols: Number of grid columns
        max_rows: Optional row ceiling
        resolve_collisions: False gives the uncorrected placement
            (no displacement, no compaction)

    Returns:
        MoveResult with the new layout and an outcome status
    """
    source = list(layout)
    item = get_item(source, item_id)
    if item is None:
        logger.debug(f"Move ignored, item not found: {item_id}")
        return MoveResult(layout=source, status='not_found', is_user_action=is_user_action)

    if item.static:
        logger.debug(f"Move ignored, item is static: {item_id}")
        return MoveResult(layout=source, status='disallowed', item=item, is_user_action=is_user_action)

    x, y = clamp_position(item, x, y, cols, max_rows)
    if (x, y) == (item.x, item.y):
        return MoveResult(layout=source, status='unchanged', item=item,
                          placeholder=Placeholder.for_item(item), is_user_action=is_user_action)

    target = item.moved_to(x, y)
    if prevent_collision:
        blocking = collisions(source, target)
        if blocking:
            logger.debug(f"Move of {item_id} to ({x},{y}) blocked by {[b.id for b in blocking]}")
            return MoveResult(layout=source, status='disallowed', item=item,
                              placeholder=Placeholder.for_item(item), is_user_action=is_user_action,
                              details={'blocked_by': [b.id for b in blocking]})

    moved = _replace_item(source, target)
    if resolve_collisions:
        moved = cascade(moved, item_id, axis, cols)
        moved = compact(moved, axis, cols, max_rows)

    final = _final_item(moved, item_id)
    logger.debug(f"Moved {item_id}: ({item.x},{item.y}) -> ({final.x},{final.y})")
    return MoveResult(layout=moved, status='moved', item=final,
                      placeholder=Placeholder.for_item(final), is_user_action=is_user_action)


def _fit_size(
    layout: Sequence[LayoutItem],
    item: LayoutItem,
    w: int,
    h: int
) -> Optional[Tuple[int, int]]:
    """
    Largest size no bigger than (w, h) that avoids every collision

    Candidates clamp to the nearest near edge of all colliding neighbours,
    on the width axis, the height axis, or both.
    """
    requested = item.resized_to(w, h)
    blocking = collisions(layout, requested)
    if not blocking:
        return w, h

    right_edges = [other.x for other in blocking if other.x > item.x]
    lower_edges = [other.y for other in blocking if other.y > item.y]
    clamped_w = min(right_edges) - item.x if right_edges else w
    clamped_h = min(lower_edges) - item.y if lower_edges else h

    min_w = max(item.min_w or 1, 1)
    min_h = max(item.min_h or 1, 1)
    candidates = [(clamped_w, h), (w, clamped_h), (clamped_w, clamped_h)]
    fitting = [
        (cw, ch) for cw, ch in candidates
        if cw >= min_w and ch >= min_h and (cw, ch) != (w, h)
        and not collisions(layout, item.resized_to(cw, ch))
    ]
    if not fitting:
        return None
    # Largest area wins; ties prefer the earlier candidate
    return max(fitting, key=lambda size: size[0] * size[1])


def resolve_resize(
    layout: Sequence[LayoutItem],
    item_id: str,
    w: int,
    h: int,
    *,
    prevent_collision: bool = False,
    axis: Optional[str] = 'vertical',
    cols: int = 12,
    max_rows: Optional[int] = None
) -> MoveResult:
    """
    Resize an item toward (w, h)

    Args:
        layout: Current layout (not modified)
        item_id: Id of the item to resize
        w: Target width in cells
        h: Target height in cells
        prevent_collision: Shrink the request to the free space instead of
            displacing neighbours; reject if no size fits
        axis: Compaction axis applied after the resize
        cols: Number of grid columns
        max_rows: Optional row ceiling

    Returns:
        MoveResult with status 'resized', 'unchanged', 'not_found' or 'disallowed'
    """
    source = list(layout)
    item = get_item(source, item_id)
    if item is None:
        logger.debug(f"Resize ignored, item not found: {item_id}")
        return MoveResult(layout=source, status='not_found')

    if item.static:
        logger.debug(f"Resize ignored, item is static: {item_id}")
        return MoveResult(layout=source, status='disallowed', item=item)

    w, h = clamp_size(item, w, h, cols, max_rows)
    if prevent_collision:
        fitted = _fit_size(source, item, w, h)
        if fitted is None:
            logger.debug(f"Resize of {item_id} to {w}x{h} has no collision-free fit")
            return MoveResult(layout=source, status='disallowed', item=item,
                              placeholder=Placeholder.for_item(item, static=True))
        w, h = fitted

    if (w, h) == (item.w, item.h):
        return MoveResult(layout=source, status='unchanged', item=item,
                          placeholder=Placeholder.for_item(item, static=True))

    resized = _replace_item(source, item.resized_to(w, h))
    if not prevent_collision:
        resized = cascade(resized, item_id, axis, cols)
    resized = compact(resized, axis, cols, max_rows)

    final = _final_item(resized, item_id)
    logger.debug(f"Resized {item_id}: {item.w}x{item.h} -> {final.w}x{final.h}")
    return MoveResult(layout=resized, status='resized', item=final,
                      placeholder=Placeholder.for_item(final, static=True))
