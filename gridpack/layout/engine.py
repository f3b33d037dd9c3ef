"""
Layout Engine for GridPack
Binds an EngineConfig to the pure layout functions

The engine holds configuration only. Layouts go in and come out as values;
nothing is cached between calls.
"""
from __future__ import annotations
from typing import Iterable, List, Mapping, Optional, Sequence, TYPE_CHECKING
import logging

from .types import LayoutItem, MoveResult, GridCell, PixelBox
from .collisions import collisions
from .compactor import compact
from .coordinates import cell_to_pixel, pixel_to_cell, pixel_size_to_cells, container_height
from .resolver import resolve_move, resolve_resize
from .synchronizer import synchronize, Declared

if TYPE_CHECKING:
    from ..config import EngineConfig

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Grid packing and collision engine

    Algorithm:
    1. synchronize() merges the caller's item ids into the layout
    2. move()/resize() apply one interactive request, displacing or
       rejecting as configured
    3. compact() packs items along the configured axis
    4. pixel/cell helpers map gestures onto the grid
    """

    def __init__(self, config: Optional['EngineConfig'] = None):
        """
        Initialize layout engine

        Args:
            config: Engine configuration; defaults to EngineConfig()
        """
        if config is None:
            from ..config import EngineConfig
            config = EngineConfig()
        self.config = config.validate()
        self.grid = config.grid
        self.interaction = config.interaction
        self.params = self.grid.position_params()

        logger.debug(f"LayoutEngine initialized: {self.grid.cols} cols, "
                     f"compaction={self.interaction.axis}")

    @property
    def axis(self) -> str:
        return self.interaction.axis

    def compact(self, layout: Sequence[LayoutItem]) -> List[LayoutItem]:
        """Pack a layout along the configured axis"""
        return compact(layout, self.axis, self.grid.cols, self.grid.max_rows)

    def collisions(self, layout: Sequence[LayoutItem], candidate: LayoutItem) -> List[LayoutItem]:
        return collisions(layout, candidate)

    def synchronize(
        self,
        layout: Sequence[LayoutItem],
        managed_ids: Iterable[str],
        declared: Optional[Mapping[str, Declared]] = None
    ) -> List[LayoutItem]:
        """Reconcile a layout with the managed ids and compact it"""
        return synchronize(layout, managed_ids, self.grid.cols, self.axis,
                           declared=declared, max_rows=self.grid.max_rows)

    def move(
        self,
        layout: Sequence[LayoutItem],
        item_id: str,
        x: int,
        y: int,
        is_user_action: bool = True,
        resolve_collisions: bool = True
    ) -> MoveResult:
        """Move an item using the configured collision policy"""
        return resolve_move(
            layout, item_id, x, y,
            is_user_action=is_user_action,
            prevent_collision=self.interaction.prevent_collision,
            axis=self.axis,
            cols=self.grid.cols,
            max_rows=self.grid.max_rows,
            resolve_collisions=resolve_collisions,
        )

    def resize(self, layout: Sequence[LayoutItem], item_id: str, w: int, h: int) -> MoveResult:
        """Resize an item using the configured collision policy"""
        return resolve_resize(
            layout, item_id, w, h,
            prevent_collision=self.interaction.prevent_collision,
            axis=self.axis,
            cols=self.grid.cols,
            max_rows=self.grid.max_rows,
        )

    def pixel_to_cell(self, top: float, left: float, w: int = 1, h: int = 1) -> GridCell:
        return pixel_to_cell(self.params, top, left, w, h)

    def cell_to_pixel(self, item: LayoutItem) -> PixelBox:
        return cell_to_pixel(self.params, item)

    def pixel_size_to_cells(self, width: float, height: float, x: int, y: int):
        return pixel_size_to_cells(self.params, width, height, x, y)

    def container_height(self, layout: Sequence[LayoutItem]) -> int:
        """Pixel height of the container for a layout"""
        return container_height(self.params, layout, self.grid.min_height)
