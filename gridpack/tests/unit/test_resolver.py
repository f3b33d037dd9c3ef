"""
Unit tests for move and resize resolution
"""
import logging

import pytest

from gridpack.layout import LayoutItem, resolve_move, resolve_resize, has_overlaps
from gridpack.layout.resolver import cascade, clamp_position, clamp_size


def item(item_id, x, y, w=1, h=1, **kwargs):
    return LayoutItem(id=item_id, x=x, y=y, w=w, h=h, **kwargs)


@pytest.mark.unit
class TestResolveMove:
    """Tests for resolve_move"""

    def test_prevent_collision_rejects(self):
        """Move onto an occupied cell leaves the item where it was"""
        layout = [item('a', 0, 0, 2, 2), item('b', 2, 0, 2, 2, static=True)]
        result = resolve_move(layout, 'a', 2, 0, prevent_collision=True)
        assert result.status == 'disallowed'
        assert (result.layout[0].x, result.layout[0].y) == (0, 0)
        assert result.details['blocked_by'] == ['b']
        assert result.layout == layout

    def test_collider_displaced(self, row_layout, geometry):
        """Dropping c onto a pushes a down, b stays put"""
        result = resolve_move(row_layout, 'c', 0, 0)
        assert result.status == 'moved'
        assert geometry(result.layout) == {
            'a': (0, 2, 2, 2),
            'b': (2, 0, 2, 2),
            'c': (0, 0, 2, 2),
        }
        assert [entry.id for entry in result.layout] == ['a', 'b', 'c']
        assert not has_overlaps(result.layout)

    def test_mover_pushed_past_static(self):
        layout = [item('a', 0, 0, 2, 2), item('b', 2, 0, 2, 2, static=True)]
        result = resolve_move(layout, 'a', 2, 0)
        assert result.status == 'moved'
        assert (result.item.x, result.item.y) == (2, 2)
        assert (result.layout[1].x, result.layout[1].y) == (2, 0)

    def test_unknown_id(self, row_layout):
        result = resolve_move(row_layout, 'missing', 0, 0)
        assert result.status == 'not_found'
        assert not result.found
        assert result.layout == row_layout

    def test_static_item_disallowed(self):
        layout = [item('pin', 0, 0, static=True)]
        result = resolve_move(layout, 'pin', 3, 0)
        assert result.status == 'disallowed'
        assert not result.allowed

    def test_same_position_unchanged(self, row_layout):
        result = resolve_move(row_layout, 'b', 2, 0)
        assert result.status == 'unchanged'
        assert not result.changed

    def test_target_clamped_to_grid(self, row_layout):
        result = resolve_move(row_layout, 'a', 20, -3)
        assert (result.item.x, result.item.y) == (10, 0)

    def test_user_action_flag_carried(self, row_layout):
        assert resolve_move(row_layout, 'a', 8, 0, is_user_action=True).is_user_action
        assert not resolve_move(row_layout, 'a', 8, 0).is_user_action

    def test_placeholder_at_final_position(self, stacked_layout):
        """Placeholder follows the compacted position, not the raw target"""
        result = resolve_move(stacked_layout, 'b', 4, 9)
        assert (result.item.x, result.item.y) == (4, 0)
        assert (result.placeholder.x, result.placeholder.y) == (4, 0)
        assert result.placeholder.placeholder
        assert not result.placeholder.static

    def test_uncorrected_pass_keeps_overlap(self, row_layout):
        result = resolve_move(row_layout, 'c', 0, 0, resolve_collisions=False)
        assert result.status == 'moved'
        assert has_overlaps(result.layout)
        assert (result.item.x, result.item.y) == (0, 0)

    def test_horizontal_axis_pushes_right(self, geometry):
        layout = [item('a', 0, 0, 2, 1), item('b', 2, 0, 2, 1)]
        result = resolve_move(layout, 'b', 0, 0, axis='horizontal')
        assert geometry(result.layout) == {'a': (2, 0, 2, 1), 'b': (0, 0, 2, 1)}


@pytest.mark.unit
class TestCascade:
    """Tests for transitive displacement"""

    def test_chain_of_displacements(self, geometry):
        """Each displaced item displaces the one below it"""
        layout = [item('a', 0, 0, 2, 2), item('b', 0, 1, 2, 2), item('c', 0, 2, 2, 2)]
        result = cascade(layout, 'a', 'vertical', 12)
        assert geometry(result) == {
            'a': (0, 0, 2, 2),
            'b': (0, 2, 2, 2),
            'c': (0, 4, 2, 2),
        }

    def test_no_collisions_is_identity(self, row_layout):
        assert cascade(row_layout, 'a', 'vertical', 12) == row_layout

    def test_step_limit_warns(self, caplog, geometry):
        layout = [item('a', 0, 0, 2, 2), item('b', 0, 1, 2, 2), item('c', 0, 2, 2, 2)]
        with caplog.at_level(logging.WARNING, logger='gridpack.layout.resolver'):
            result = cascade(layout, 'a', 'vertical', 12, max_steps=1)
        assert 'stopped after 1 steps' in caplog.text
        assert geometry(result)['b'] == (0, 2, 2, 2)
        assert geometry(result)['c'] == (0, 2, 2, 2)


@pytest.mark.unit
class TestResolveResize:
    """Tests for resolve_resize"""

    def test_neighbour_displaced(self, row_layout, geometry):
        result = resolve_resize(row_layout, 'a', 4, 2)
        assert result.status == 'resized'
        assert geometry(result.layout) == {
            'a': (0, 0, 4, 2),
            'b': (2, 2, 2, 2),
            'c': (4, 0, 2, 2),
        }

    def test_placeholder_is_static(self, row_layout):
        result = resolve_resize(row_layout, 'c', 3, 3)
        assert result.placeholder.static
        assert (result.placeholder.w, result.placeholder.h) == (3, 3)

    def test_size_clamped_to_bounds(self):
        layout = [item('a', 0, 0, 2, 2, min_w=2, max_w=3, max_h=4)]
        result = resolve_resize(layout, 'a', 10, 10)
        assert (result.item.w, result.item.h) == (3, 4)
        result = resolve_resize(layout, 'a', 1, 0)
        assert (result.item.w, result.item.h) == (2, 1)

    def test_prevent_collision_shrinks_to_free_space(self, row_layout):
        result = resolve_resize(row_layout, 'a', 3, 3, prevent_collision=True)
        assert result.status == 'resized'
        assert (result.item.w, result.item.h) == (2, 3)
        assert not has_overlaps(result.layout)

    def test_prevent_collision_prefers_larger_area(self):
        layout = [item('a', 0, 0), item('b', 1, 1)]
        result = resolve_resize(layout, 'a', 2, 2, prevent_collision=True, axis='none')
        assert (result.item.w, result.item.h) == (1, 2)
        assert result.layout[1] == layout[1]

    def test_prevent_collision_keeps_current_size(self):
        """Only collision-free size is the one the item already has"""
        layout = [item('a', 0, 0, 2, 1, min_w=2), item('b', 1, 1)]
        result = resolve_resize(layout, 'a', 2, 2, prevent_collision=True)
        assert result.status == 'unchanged'
        assert result.layout == layout

    def test_prevent_collision_without_fit(self):
        """Every collision-free size is below the minimum height"""
        layout = [item('a', 0, 0, 1, 2, min_h=3), item('b', 0, 2, 3, 1)]
        result = resolve_resize(layout, 'a', 1, 3, prevent_collision=True)
        assert result.status == 'disallowed'
        assert result.layout == layout
        assert result.placeholder.static

    def test_static_item_disallowed(self):
        result = resolve_resize([item('pin', 0, 0, static=True)], 'pin', 3, 3)
        assert result.status == 'disallowed'

    def test_unknown_id(self, row_layout):
        assert resolve_resize(row_layout, 'missing', 3, 3).status == 'not_found'


@pytest.mark.unit
class TestClamping:
    """Tests for request clamping"""

    def test_clamp_position(self):
        entry = item('a', 0, 0, 3, 2)
        assert clamp_position(entry, 11, 4, 12) == (9, 4)
        assert clamp_position(entry, -1, -1, 12) == (0, 0)
        assert clamp_position(entry, 0, 10, 12, max_rows=5) == (0, 3)

    def test_clamp_size_to_remaining_columns(self):
        assert clamp_size(item('a', 8, 0, 2, 2), 10, 2, 12) == (4, 2)

    def test_clamp_size_to_ceiling(self):
        assert clamp_size(item('a', 0, 3, 2, 2), 2, 10, 12, max_rows=6) == (2, 3)

    def test_minimum_width_never_crosses_grid_edge(self):
        """Remaining columns win over min_w"""
        assert clamp_size(item('a', 10, 0, 2, 1, min_w=4), 3, 1, 12) == (2, 1)

    def test_minimum_height_never_crosses_ceiling(self):
        assert clamp_size(item('a', 0, 4, 1, 2, min_h=4), 1, 3, 12, max_rows=6) == (1, 2)

    def test_resize_near_edge_keeps_position(self):
        layout = [item('a', 10, 0, 2, 1, min_w=4)]
        for axis in ('none', 'vertical'):
            result = resolve_resize(layout, 'a', 3, 1, axis=axis, cols=12)
            assert (result.item.x, result.item.w) == (10, 2)
            assert result.item.right <= 12
