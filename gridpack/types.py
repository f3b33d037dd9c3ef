"""
Type definitions for GridPack

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Union, Optional, Tuple
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

CompactAxis = Literal['vertical', 'horizontal', 'none']
"""Axis along which items are packed ('none' disables packing)"""

MoveStatus = Literal['moved', 'resized', 'unchanged', 'not_found', 'disallowed']
"""Outcome of a move or resize request"""

EventKind = Literal[
    'drag_start', 'drag', 'drag_stop',
    'resize_start', 'resize', 'resize_stop',
    'drop', 'layout_change',
]
"""Kind of notification emitted by the interaction controller"""

Margin = Tuple[int, int]
"""(horizontal, vertical) pair in pixels"""


# Structured data types

class LayoutItemDict(TypedDict, total=False):
    """
    Exchange form of a single layout item

    Keys follow the camelCase names used by dashboard front-ends.
    Only i, x, y, w, h are required in practice.
    """
    i: str
    x: int
    y: int
    w: int
    h: int
    minW: Optional[int]
    maxW: Optional[int]
    minH: Optional[int]
    maxH: Optional[int]
    static: bool
    isDraggable: Optional[bool]
    isResizable: Optional[bool]


class PixelBoxDict(TypedDict):
    """Pixel rectangle for a grid item"""
    top: int
    left: int
    width: int
    height: int


class GridCellDict(TypedDict):
    """Grid cell coordinates"""
    x: int
    y: int
