"""I/O utilities for GridPack"""

from .readers import LayoutReader, read_layout, frame_to_layout
from .writers import LayoutWriter, write_layout, layout_to_frame

__all__ = [
    'LayoutReader', 'read_layout', 'frame_to_layout',
    'LayoutWriter', 'write_layout', 'layout_to_frame',
]
