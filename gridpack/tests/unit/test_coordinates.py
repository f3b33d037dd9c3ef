"""
Unit tests for pixel <-> cell conversion

Default geometry: 1200px container, 12 columns, 10px margins and padding,
giving a column width of 1070 / 12 px.
"""
import pytest

from gridpack.layout import LayoutItem, PositionParams, cell_to_pixel, pixel_to_cell, pixel_size_to_cells, container_height, column_width


@pytest.fixture
def params():
    return PositionParams(cols=12, row_height=150, margin=(10, 10), container_width=1200)


@pytest.fixture
def unit_params():
    """10px cells with no margins, so half-cell offsets land exactly on .5"""
    return PositionParams(cols=12, row_height=10, margin=(0, 0), container_padding=(0, 0), container_width=120)


@pytest.mark.unit
class TestColumnWidth:

    def test_default_geometry(self, params):
        assert column_width(params) == pytest.approx(1070 / 12)
        assert params.column_width == column_width(params)

    def test_padding_defaults_to_margin(self, params):
        assert params.padding == (10, 10)
        explicit = PositionParams(cols=12, row_height=150, container_padding=(0, 5))
        assert explicit.padding == (0, 5)


@pytest.mark.unit
class TestCellToPixel:

    def test_origin_cell(self, params):
        box = cell_to_pixel(params, LayoutItem(id='a', x=0, y=0, w=1, h=1))
        assert (box.top, box.left, box.width, box.height) == (10, 10, 89, 150)

    def test_multi_cell_item(self, params):
        """Width and height include the margins between spanned cells"""
        box = cell_to_pixel(params, LayoutItem(id='a', x=1, y=1, w=2, h=2))
        assert (box.top, box.left, box.width, box.height) == (170, 109, 188, 310)

    def test_to_dict(self, params):
        box = cell_to_pixel(params, LayoutItem(id='a', x=0, y=0))
        assert box.to_dict() == {'top': 10, 'left': 10, 'width': 89, 'height': 150}


@pytest.mark.unit
class TestPixelToCell:

    def test_exact_cell(self, params):
        cell = pixel_to_cell(params, 170, 109, 1, 1)
        assert (cell.x, cell.y) == (1, 1)

    def test_round_trip(self, params):
        """Every cell maps to its own pixel box and back"""
        for x in range(12):
            for y in range(6):
                box = cell_to_pixel(params, LayoutItem(id='a', x=x, y=y))
                cell = pixel_to_cell(params, box.top, box.left, 1, 1)
                assert (cell.x, cell.y) == (x, y)

    def test_half_rounds_up(self, unit_params):
        """2.5 cells rounds to 3, 0.5 rows rounds to 1"""
        cell = pixel_to_cell(unit_params, 5, 25, 1, 1)
        assert (cell.x, cell.y) == (3, 1)

    def test_below_half_rounds_down(self, unit_params):
        cell = pixel_to_cell(unit_params, 4, 24, 1, 1)
        assert (cell.x, cell.y) == (2, 0)

    def test_clamped_to_grid(self, params):
        cell = pixel_to_cell(params, -500, 5000, 3, 1)
        assert (cell.x, cell.y) == (9, 0)
        assert pixel_to_cell(params, 10, -40, 1, 1).x == 0

    def test_clamped_to_ceiling(self):
        bounded = PositionParams(cols=12, row_height=150, max_rows=4)
        assert pixel_to_cell(bounded, 5000, 10, 1, 2).y == 2


@pytest.mark.unit
class TestSizesAndHeight:

    def test_pixel_size_to_cells(self, params):
        assert pixel_size_to_cells(params, 188, 150, 0, 0) == (2, 1)

    def test_pixel_size_clamped(self, params):
        assert pixel_size_to_cells(params, 5000, 1, 10, 0) == (2, 1)
        bounded = PositionParams(cols=12, row_height=150, max_rows=4)
        assert pixel_size_to_cells(bounded, 89, 5000, 0, 1) == (1, 3)

    def test_container_height(self, params):
        layout = [LayoutItem(id='a', x=0, y=0, w=1, h=3)]
        assert container_height(params, layout) == 3 * 150 + 2 * 10 + 2 * 10

    def test_container_height_minimum(self, params):
        assert container_height(params, [], min_height=300) == 300
        assert container_height(params, []) == 20
