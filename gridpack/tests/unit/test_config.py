"""
Unit tests for configuration and the LayoutEngine facade
"""
import pytest

from gridpack.config import EngineConfig, GridConfig, InteractionConfig
from gridpack.layout import LayoutEngine, LayoutItem


@pytest.mark.unit
class TestConfig:

    def test_defaults(self):
        config = EngineConfig().validate()
        assert config.grid.cols == 12
        assert config.interaction.axis == 'vertical'
        assert config.interaction.dropping_item.id == '__dropping-elem__'

    def test_presets(self):
        assert EngineConfig.dashboard().interaction.axis == 'vertical'
        freeform = EngineConfig.freeform()
        assert freeform.interaction.axis == 'none'
        assert freeform.interaction.prevent_collision
        assert EngineConfig.horizontal().interaction.axis == 'horizontal'
        strict = EngineConfig.strict()
        assert strict.grid.max_rows == 8
        assert strict.interaction.collision_delay_ms == 150

    def test_position_params(self):
        grid = GridConfig(cols=6, margin=(4, 8), container_padding=(0, 0))
        params = grid.position_params()
        assert params.cols == 6
        assert params.margin == (4, 8)
        assert params.padding == (0, 0)

    @pytest.mark.parametrize('field, value', [
        ('cols', 0),
        ('row_height', 0),
        ('max_rows', 0),
        ('container_width', -1),
        ('margin', (-1, 0)),
    ])
    def test_invalid_grid(self, field, value):
        grid = GridConfig()
        setattr(grid, field, value)
        with pytest.raises(ValueError):
            grid.validate()

    def test_invalid_interaction(self):
        with pytest.raises(ValueError):
            InteractionConfig(compact_type='diagonal').validate()
        with pytest.raises(ValueError):
            InteractionConfig(collision_delay_ms=-5).validate()

    def test_engine_validates_config(self):
        config = EngineConfig()
        config.grid.cols = 0
        with pytest.raises(ValueError):
            LayoutEngine(config)


@pytest.mark.unit
class TestLayoutEngine:

    def test_uses_configured_axis(self):
        engine = LayoutEngine(EngineConfig.horizontal())
        layout = [LayoutItem(id='a', x=5, y=0, w=2, h=1)]
        assert engine.compact(layout)[0].x == 0

    def test_freeform_rejects_collisions(self):
        engine = LayoutEngine(EngineConfig.freeform())
        layout = [LayoutItem(id='a', x=0, y=0, w=2, h=2), LayoutItem(id='b', x=4, y=4, w=2, h=2)]
        result = engine.move(layout, 'a', 3, 3)
        assert result.status == 'disallowed'
        assert engine.move(layout, 'a', 0, 6).item.y == 6

    def test_row_ceiling(self):
        engine = LayoutEngine(EngineConfig.strict())
        result = engine.move([LayoutItem(id='a', x=0, y=0, w=1, h=2)], 'a', 0, 20)
        assert result.status == 'moved'
        assert result.item.y == 0
        assert engine.pixel_to_cell(10000, 10, 1, 2).y == 6

    def test_coordinate_helpers(self):
        engine = LayoutEngine()
        box = engine.cell_to_pixel(LayoutItem(id='a', x=1, y=1))
        cell = engine.pixel_to_cell(box.top, box.left)
        assert (cell.x, cell.y) == (1, 1)
        assert engine.pixel_size_to_cells(box.width, box.height, 1, 1) == (1, 1)
        assert engine.container_height([]) == 20

    def test_default_is_user_action(self):
        result = LayoutEngine().move([LayoutItem(id='a', x=0, y=0)], 'a', 3, 0)
        assert result.is_user_action
