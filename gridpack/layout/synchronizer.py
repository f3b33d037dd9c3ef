"""
Layout synchronization

Reconciles a layout with the set of item ids the caller currently manages:
new ids get a default placement at the bottom of the stack, ids that are no
longer managed are dropped, and the merged result is compacted.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union
import logging

from .types import LayoutItem
from .collisions import bottom, find_duplicates, validate_unique_ids
from .compactor import compact
from ..exceptions import DuplicateIdError

logger = logging.getLogger(__name__)

Declared = Union[LayoutItem, Mapping[str, Any]]


def _default_item(item_id: str, y: int, declared: Optional[Declared]) -> LayoutItem:
    """Fresh item for an id with no layout entry"""
    if declared is None:
        return LayoutItem(id=item_id, x=0, y=y, w=1, h=1)

    if isinstance(declared, LayoutItem):
        return replace(declared, id=item_id)

    data = dict(declared)
    data['i'] = item_id
    data.pop('id', None)
    # Position keys that were not declared fall back to the default placement
    if data.get('x') is None:
        data['x'] = 0
    if data.get('y') is None:
        data['y'] = y
    return LayoutItem.from_dict(data)


def synchronize(
    layout: Sequence[LayoutItem],
    managed_ids: Iterable[str],
    cols: int,
    axis: Optional[str] = 'vertical',
    *,
    declared: Optional[Mapping[str, Declared]] = None,
    max_rows: Optional[int] = None
) -> List[LayoutItem]:
    """
    Reconcile a layout with the managed item ids

    Args:
        layout: Current layout (not modified)
        managed_ids: Ids of the items that should be on the grid, in
            display order
        cols: Number of grid columns
        axis: Compaction axis applied to the merged result
        declared: Optional preferred geometry per id, used only for ids
            with no layout entry
        max_rows: Optional row ceiling

    Returns:
        Compacted layout ordered like managed_ids

    Raises:
        DuplicateIdError: The layout or managed_ids repeat an id
    """
    ids = [str(item_id) for item_id in managed_ids]
    duplicates = find_duplicates(ids)
    if duplicates:
        logger.error(f"Duplicate ids in managed ids: {duplicates}")
        raise DuplicateIdError(duplicates, "managed ids")
    validate_unique_ids(layout, "layout")

    existing = {item.id: item for item in layout}
    declared = declared or {}
    result: List[LayoutItem] = []
    added = []

    for item_id in ids:
        if item_id in existing:
            result.append(existing[item_id].normalized(cols))

    # New items stack below everything that was kept or added before them
    for item_id in ids:
        if item_id in existing:
            continue
        item = _default_item(item_id, bottom(result), declared.get(item_id)).normalized(cols)
        added.append(item_id)
        result.append(item)

    order = {item_id: index for index, item_id in enumerate(ids)}
    result.sort(key=lambda item: order[item.id])

    removed = [item.id for item in layout if item.id not in order]
    if added or removed:
        logger.info(f"Synchronized layout: {len(added)} added, {len(removed)} removed")
    if removed:
        logger.debug(f"Removed ids: {removed}")

    return compact(result, axis, cols, max_rows)
