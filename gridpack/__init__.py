"""GridPack: Grid packing and collision resolution for dashboard layouts"""

from .config import GridConfig, InteractionConfig, EngineConfig
from .exceptions import GridLayoutError, DuplicateIdError
from .layout import (
    LayoutEngine,
    LayoutItem,
    MoveResult,
    compact,
    collisions,
    resolve_move,
    resolve_resize,
    pixel_to_cell,
    cell_to_pixel,
    synchronize,
)
from .controller import GridController, LayoutEvent

__version__ = "0.1.0"
__all__ = [
    "GridConfig", "InteractionConfig", "EngineConfig",
    "GridLayoutError", "DuplicateIdError",
    "LayoutEngine", "LayoutItem", "MoveResult",
    "compact", "collisions", "resolve_move", "resolve_resize",
    "pixel_to_cell", "cell_to_pixel", "synchronize",
    "GridController", "LayoutEvent",
]
