"""
Layout types for GridPack
Data structures shared by the packing and collision engine

All types are immutable (frozen) for safety and testability.
Operations return fresh values instead of mutating their inputs.
"""
from dataclasses import dataclass, field, replace
from typing import List, Dict, Optional, Any, Mapping

import pandas as pd

from ..types import MoveStatus, LayoutItemDict, PixelBoxDict, GridCellDict

# camelCase exchange key -> dataclass field
_EXCHANGE_KEYS = {
    'minW': 'min_w',
    'maxW': 'max_w',
    'minH': 'min_h',
    'maxH': 'max_h',
    'isDraggable': 'is_draggable',
    'isResizable': 'is_resizable',
}


def _is_missing(value: Any) -> bool:
    """None, NaN or pandas NA (empty cells in tabular sources)"""
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def _optional_int(value: Any) -> Optional[int]:
    if _is_missing(value):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _optional_bool(value: Any) -> Optional[bool]:
    if _is_missing(value):
        return None
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ('', 'none', 'nan'):
            return None
        return lowered in ('1', 'true', 'yes')
    return bool(value)


@dataclass(frozen=True)
class LayoutItem:
    """
    One grid-resident rectangle

    Attributes:
        id: Identifier of the rendered item this entry positions
        x: Column of the top-left corner
        y: Row of the top-left corner
        w: Width in grid cells
        h: Height in grid cells
        min_w: Lower bound for interactive resize width
        max_w: Upper bound for interactive resize width
        min_h: Lower bound for interactive resize height
        max_h: Upper bound for interactive resize height
        static: Pinned item; never moved by compaction or displacement
        is_draggable: Per-item override of the ambient drag policy
        is_resizable: Per-item override of the ambient resize policy
    """
    id: str
    x: int
    y: int
    w: int = 1
    h: int = 1
    min_w: Optional[int] = None
    max_w: Optional[int] = None
    min_h: Optional[int] = None
    max_h: Optional[int] = None
    static: bool = False
    is_draggable: Optional[bool] = None
    is_resizable: Optional[bool] = None

    @property
    def right(self) -> int:
        """Column just past the right edge"""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """Row just past the bottom edge"""
        return self.y + self.h

    @property
    def area(self) -> int:
        return self.w * self.h

    def moved_to(self, x: int, y: int) -> 'LayoutItem':
        """Copy of this item at a new position"""
        return replace(self, x=x, y=y)

    def resized_to(self, w: int, h: int) -> 'LayoutItem':
        """Copy of this item with a new size"""
        return replace(self, w=w, h=h)

    def normalized(self, cols: int) -> 'LayoutItem':
        """
        Clamp invalid geometry into the grid

        Negative coordinates go to 0, sizes below 1 go to 1, widths are
        capped at the column count and items overflowing the right edge
        are shifted left.
        """
        w = min(max(int(self.w), 1), cols)
        h = max(int(self.h), 1)
        x = max(int(self.x), 0)
        y = max(int(self.y), 0)
        if x + w > cols:
            x = cols - w
        if (x, y, w, h) == (self.x, self.y, self.w, self.h):
            return self
        return replace(self, x=x, y=y, w=w, h=h)

    def geometry(self) -> tuple:
        """(x, y, w, h, static) tuple used for structural comparison"""
        return (self.x, self.y, self.w, self.h, self.static)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LayoutItem':
        """
        Build an item from its exchange form

        Accepts camelCase keys ('i', 'minW', 'isDraggable', ...) as well as
        the dataclass field names.

        Args:
            data: Mapping with at least an id and x, y, w, h

        Returns:
            LayoutItem
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _EXCHANGE_KEYS.get(key, key)
            if name == 'i':
                name = 'id'
            values[name] = value

        if values.get('id') is None:
            raise ValueError(f"Layout item without an id: {dict(data)}")

        return cls(
            id=str(values['id']),
            x=_optional_int(values.get('x')) or 0,
            y=_optional_int(values.get('y')) or 0,
            w=_optional_int(values.get('w')) or 1,
            h=_optional_int(values.get('h')) or 1,
            min_w=_optional_int(values.get('min_w')),
            max_w=_optional_int(values.get('max_w')),
            min_h=_optional_int(values.get('min_h')),
            max_h=_optional_int(values.get('max_h')),
            static=bool(_optional_bool(values.get('static'))),
            is_draggable=_optional_bool(values.get('is_draggable')),
            is_resizable=_optional_bool(values.get('is_resizable')),
        )

    def to_dict(self) -> LayoutItemDict:
        """Exchange form with camelCase keys; unset optional fields are omitted"""
        data: Dict[str, Any] = {
            'i': self.id,
            'x': self.x,
            'y': self.y,
            'w': self.w,
            'h': self.h,
        }
        for key, name in _EXCHANGE_KEYS.items():
            value = getattr(self, name)
            if value is not None:
                data[key] = value
        if self.static:
            data['static'] = True
        return data  # type: ignore[return-value]


@dataclass(frozen=True)
class Placeholder:
    """
    Transient target rectangle of an in-progress drag or resize

    Never part of the persisted layout.

    Attributes:
        id: Id of the item being dragged or resized
        x, y, w, h: Target rectangle in grid cells
        static: Display marker; set for resize placeholders
        placeholder: Always True, distinguishes it from real items
    """
    id: str
    x: int
    y: int
    w: int
    h: int
    static: bool = False
    placeholder: bool = True

    @classmethod
    def for_item(cls, item: LayoutItem, static: bool = False) -> 'Placeholder':
        return cls(id=item.id, x=item.x, y=item.y, w=item.w, h=item.h, static=static)


@dataclass(frozen=True)
class GridCell:
    """Grid coordinates of a top-left corner"""
    x: int
    y: int

    def to_dict(self) -> GridCellDict:
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class PixelBox:
    """Pixel rectangle of an item inside its container"""
    top: int
    left: int
    width: int
    height: int

    def to_dict(self) -> PixelBoxDict:
        return {'top': self.top, 'left': self.left, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a move or resize request

    Attributes:
        layout: Resulting layout (the input layout when nothing changed)
        status: 'moved', 'resized', 'unchanged', 'not_found' or 'disallowed'
        item: Final state of the requested item, None if not found
        placeholder: Rectangle to render for the in-progress interaction
        is_user_action: Whether the request came directly from the user
    """
    layout: List[LayoutItem]
    status: MoveStatus
    item: Optional[LayoutItem] = None
    placeholder: Optional[Placeholder] = None
    is_user_action: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        """Whether the requested item existed"""
        return self.status != 'not_found'

    @property
    def allowed(self) -> bool:
        """False when the request was rejected"""
        return self.status not in ('not_found', 'disallowed')

    @property
    def changed(self) -> bool:
        return self.status in ('moved', 'resized')
