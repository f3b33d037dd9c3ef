"""
GridPack Configuration
Plain parameter bundles consumed by the layout engine and controller
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .layout.coordinates import PositionParams
from .layout.compactor import resolve_axis


@dataclass
class GridConfig:
    """
    Grid geometry

    Column count, row height and spacing of the container.
    """

    # ============================================================
    # GRID
    # ============================================================
    cols: int = 12
    """Number of columns"""

    row_height: float = 150
    """Height of a single row (px)"""

    max_rows: Optional[int] = None
    """Row ceiling; None for unbounded vertical growth"""

    # ============================================================
    # SPACING
    # ============================================================
    margin: Tuple[int, int] = (10, 10)
    """(horizontal, vertical) gap between items (px)"""

    container_padding: Optional[Tuple[int, int]] = None
    """(horizontal, vertical) padding inside the container (px); None uses the margin"""

    # ============================================================
    # CONTAINER
    # ============================================================
    container_width: float = 1200
    """Container width (px)"""

    min_height: float = 0
    """Minimum container height (px); 0 disables it"""

    def position_params(self) -> PositionParams:
        """Geometry bundle for the coordinate mapper"""
        return PositionParams(
            cols=self.cols,
            row_height=self.row_height,
            margin=tuple(self.margin),
            container_padding=tuple(self.container_padding) if self.container_padding is not None else None,
            container_width=self.container_width,
            max_rows=self.max_rows,
        )

    def validate(self) -> None:
        """
        Raises:
            ValueError: Any geometry value out of range
        """
        if self.cols < 1:
            raise ValueError(f"cols must be at least 1, got {self.cols}")
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive, got {self.row_height}")
        if self.max_rows is not None and self.max_rows < 1:
            raise ValueError(f"max_rows must be at least 1 or None, got {self.max_rows}")
        if self.container_width <= 0:
            raise ValueError(f"container_width must be positive, got {self.container_width}")
        if len(self.margin) != 2 or min(self.margin) < 0:
            raise ValueError(f"margin must be a non-negative (x, y) pair, got {self.margin}")


@dataclass
class DroppingItemConfig:
    """Item inserted while something is dragged in from outside the grid"""

    id: str = "__dropping-elem__"
    """Id of the temporary dropping item"""

    w: int = 1
    """Width in cells"""

    h: int = 1
    """Height in cells"""


@dataclass
class InteractionConfig:
    """
    Interaction policy

    How drag and resize requests are resolved.
    """

    # ============================================================
    # PACKING
    # ============================================================
    compact_type: Optional[str] = 'vertical'
    """Compaction axis: 'vertical', 'horizontal' or None for free placement"""

    prevent_collision: bool = False
    """Reject moves onto occupied cells instead of displacing items"""

    collision_delay_ms: int = 0
    """Delay before the corrective collision pass (ms); 0 resolves immediately"""

    # ============================================================
    # POLICY DEFAULTS
    # ============================================================
    is_draggable: bool = True
    """Default drag policy for items without an override"""

    is_resizable: bool = True
    """Default resize policy for items without an override"""

    dropping_item: DroppingItemConfig = field(default_factory=DroppingItemConfig)
    """Item used while dragging in from outside the grid"""

    def validate(self) -> None:
        """
        Raises:
            ValueError: Unknown axis or negative delay
        """
        resolve_axis(self.compact_type)
        if self.collision_delay_ms < 0:
            raise ValueError(f"collision_delay_ms must be >= 0, got {self.collision_delay_ms}")

    @property
    def axis(self) -> str:
        return resolve_axis(self.compact_type)


@dataclass
class EngineConfig:
    """
    Complete engine configuration
    """

    # ============================================================
    # SUB-CONFIGURATIONS
    # ============================================================
    grid: GridConfig = field(default_factory=GridConfig)
    """Grid geometry"""

    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    """Interaction policy"""

    def validate(self) -> 'EngineConfig':
        self.grid.validate()
        self.interaction.validate()
        return self

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def dashboard(cls) -> 'EngineConfig':
        """
        Classic dashboard grid

        - 12 columns, 150px rows
        - Vertical compaction, items displace each other

        Example:
            >>> config = EngineConfig.dashboard()
            >>> engine = LayoutEngine(config)
        """
        return cls()

    @classmethod
    def freeform(cls) -> 'EngineConfig':
        """
        Free placement without packing

        - No compaction
        - Moves onto occupied cells are rejected
        """
        config = cls()
        config.interaction.compact_type = None
        config.interaction.prevent_collision = True
        return config

    @classmethod
    def horizontal(cls) -> 'EngineConfig':
        """
        Items pack toward the left edge

        - Horizontal compaction
        - Short rows for toolbar-like strips
        """
        config = cls()
        config.interaction.compact_type = 'horizontal'
        config.grid.row_height = 60
        return config

    @classmethod
    def strict(cls) -> 'EngineConfig':
        """
        Bounded grid with deferred collision handling

        - 8 rows maximum
        - 150ms delay before the corrective collision pass
        """
        config = cls()
        config.grid.max_rows = 8
        config.interaction.collision_delay_ms = 150
        return config
