import pytest

from nightfall.layout import (
    Alignment,
    Const,
    HorizontalAlignment,
    MatchParent,
    Max,
    Min,
    ParentResized,
    Percent,
    SizeVec2,
    VerticalAlignment,
    aligned_position,
    apply_offset,
    grid_cells,
    window_resize,
)
from nightfall.vec import Vec2, Vec3


def test_const_ignores_parent():
    assert Const(-50.0).calculate(1234.0) == -50.0


def test_percent_scales_parent():
    assert Percent(0.5).calculate(200.0) == 100.0


def test_match_parent():
    assert MatchParent().calculate(640.0) == 640.0


def test_min_is_lower_bound():
    constraint = Min(300.0, MatchParent())
    assert constraint.calculate(100.0) == 300.0
    assert constraint.calculate(500.0) == 500.0


def test_max_is_upper_bound():
    constraint = Max(300.0, MatchParent())
    assert constraint.calculate(100.0) == 100.0
    assert constraint.calculate(500.0) == 300.0


def test_nested_constraints():
    constraint = Max(400.0, Min(100.0, Percent(0.5)))
    assert constraint.calculate(100.0) == 100.0
    assert constraint.calculate(1000.0) == 400.0


def test_size_vec2_defaults_to_parent():
    parent = Vec2(320.0, 240.0)
    assert SizeVec2().calculate(parent) == parent


def test_size_vec2_per_axis():
    size = SizeVec2(Const(-50.0), Const(50.0))
    assert size.calculate(Vec2(800.0, 600.0)) == Vec2(-50.0, 50.0)


def test_alignment_vertical_axes():
    assert Alignment.TOP_LEFT.vertical() is VerticalAlignment.TOP
    assert Alignment.TOP_CENTER.vertical() is VerticalAlignment.TOP
    assert Alignment.TOP_RIGHT.vertical() is VerticalAlignment.TOP
    assert Alignment.MIDDLE_LEFT.vertical() is VerticalAlignment.MIDDLE
    assert Alignment.MIDDLE_CENTER.vertical() is VerticalAlignment.MIDDLE
    assert Alignment.MIDDLE_RIGHT.vertical() is VerticalAlignment.MIDDLE
    assert Alignment.BOTTOM_LEFT.vertical() is VerticalAlignment.BOTTOM
    assert Alignment.BOTTOM_CENTER.vertical() is VerticalAlignment.BOTTOM
    assert Alignment.BOTTOM_RIGHT.vertical() is VerticalAlignment.BOTTOM


def test_alignment_horizontal_axes():
    assert Alignment.TOP_LEFT.horizontal() is HorizontalAlignment.LEFT
    assert Alignment.MIDDLE_LEFT.horizontal() is HorizontalAlignment.LEFT
    assert Alignment.BOTTOM_LEFT.horizontal() is HorizontalAlignment.LEFT
    assert Alignment.TOP_CENTER.horizontal() is HorizontalAlignment.CENTER
    assert Alignment.MIDDLE_CENTER.horizontal() is HorizontalAlignment.CENTER
    assert Alignment.BOTTOM_CENTER.horizontal() is HorizontalAlignment.CENTER
    assert Alignment.TOP_RIGHT.horizontal() is HorizontalAlignment.RIGHT
    assert Alignment.MIDDLE_RIGHT.horizontal() is HorizontalAlignment.RIGHT
    assert Alignment.BOTTOM_RIGHT.horizontal() is HorizontalAlignment.RIGHT


def test_window_resize_centres_origin():
    resize = window_resize(800.0, 600.0)
    assert resize.size == Vec2(800.0, 600.0)
    assert resize.offset == -(resize.size / 2.0)


def test_middle_center_in_window_is_origin():
    pos = aligned_position(Alignment.MIDDLE_CENTER, Vec2(10.0, 10.0), window_resize(800.0, 600.0), 7.0)
    assert pos == Vec3(0.0, 0.0, 7.0)


def test_top_right_touches_parent_corner():
    resize = window_resize(800.0, 600.0)
    size = Vec2(100.0, 50.0)
    pos = aligned_position(Alignment.TOP_RIGHT, size, resize, 0.0)
    assert pos.x + size.x / 2.0 == resize.offset.x + resize.size.x
    assert pos.y + size.y / 2.0 == resize.offset.y + resize.size.y


def test_bottom_left_touches_parent_corner():
    resize = ParentResized(size=Vec2(200.0, 100.0), offset=Vec2(10.0, 20.0))
    size = Vec2(40.0, 30.0)
    pos = aligned_position(Alignment.BOTTOM_LEFT, size, resize, 3.0)
    assert pos.x - size.x / 2.0 == resize.offset.x
    assert pos.y - size.y / 2.0 == resize.offset.y
    assert pos.z == 3.0


def test_grid_cells_count_and_size():
    size = Vec2(300.0, 200.0)
    cells = grid_cells(3, 2, size, 5)
    assert len(cells) == 5
    assert all(cell.size == Vec2(size.x / 3, size.y / 2) for cell in cells)


def test_grid_first_cell_is_top_left():
    size = Vec2(300.0, 200.0)
    first = grid_cells(3, 2, size, 6)[0]
    assert first.offset.x == -size.x / 2.0
    assert first.offset.y + first.size.y == size.y / 2.0


def test_grid_last_cell_is_bottom_right():
    size = Vec2(300.0, 200.0)
    last = grid_cells(3, 2, size, 6)[-1]
    assert last.offset.x + last.size.x == size.x / 2.0
    assert last.offset.y == -size.y / 2.0


def test_grid_fills_rows_left_to_right():
    cells = grid_cells(3, 2, Vec2(300.0, 200.0), 4)
    assert cells[0].offset.y == cells[2].offset.y
    assert cells[0].offset.x < cells[1].offset.x < cells[2].offset.x
    assert cells[3].offset.x == cells[0].offset.x
    assert cells[3].offset.y < cells[0].offset.y


def test_grid_with_no_children():
    assert grid_cells(2, 2, Vec2(10.0, 10.0), 0) == []


@pytest.mark.parametrize("columns,rows", [(0, 2), (2, 0), (-1, 1)])
def test_grid_rejects_bad_dimensions(columns, rows):
    with pytest.raises(ValueError):
        grid_cells(columns, rows, Vec2(10.0, 10.0), 1)


def test_grid_rejects_negative_children():
    with pytest.raises(ValueError):
        grid_cells(2, 2, Vec2(10.0, 10.0), -1)


def test_apply_offset_keeps_z():
    pos = apply_offset(Vec3(1.0, 2.0, 9.0), SizeVec2(Const(-50.0), Const(50.0)), Vec2(800.0, 600.0))
    assert pos == Vec3(-49.0, 52.0, 9.0)


def test_apply_offset_relative_to_parent():
    parent = Vec2(400.0, 200.0)
    pos = apply_offset(Vec3(0.0, 0.0, 0.0), SizeVec2(Percent(0.5), Percent(0.5)), parent)
    assert pos.truncate() == parent / 2.0