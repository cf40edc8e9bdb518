"""Size constraints and the layout rules for aligned, gridded and offset UI elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from nightfall.vec import Vec2, Vec3


@dataclass(frozen=True)
class Const:
    """A fixed size, whatever the parent's."""

    value: float

    def calculate(self, parent_val: float) -> float:
        return self.value


@dataclass(frozen=True)
class Percent:
    """A fraction of the parent's size; 1.0 is the whole parent."""

    fraction: float

    def calculate(self, parent_val: float) -> float:
        return self.fraction * parent_val


@dataclass(frozen=True)
class Min:
    """The inner constraint, but never less than ``value``."""

    value: float
    inner: SizeConstraint

    def calculate(self, parent_val: float) -> float:
        return max(self.value, self.inner.calculate(parent_val))


@dataclass(frozen=True)
class Max:
    """The inner constraint, but never more than ``value``."""

    value: float
    inner: SizeConstraint

    def calculate(self, parent_val: float) -> float:
        return min(self.value, self.inner.calculate(parent_val))


@dataclass(frozen=True)
class MatchParent:
    """Exactly the parent's size."""

    def calculate(self, parent_val: float) -> float:
        return parent_val


SizeConstraint = Union[Const, Percent, Min, Max, MatchParent]


@dataclass(frozen=True)
class SizeVec2:
    """A pair of size constraints, one per axis; both match the parent by default."""

    x: SizeConstraint = field(default_factory=MatchParent)
    y: SizeConstraint = field(default_factory=MatchParent)

    def calculate(self, parent_size: Vec2) -> Vec2:
        return Vec2(self.x.calculate(parent_size.x), self.y.calculate(parent_size.y))


@dataclass(frozen=True)
class ParentResized:
    """The area a parent hands to a child: its size and its lower-left corner."""

    size: Vec2
    offset: Vec2


class VerticalAlignment(Enum):
    TOP = auto()
    MIDDLE = auto()
    BOTTOM = auto()


class HorizontalAlignment(Enum):
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class Alignment(Enum):
    """Where an element sits inside the area its parent gives it."""

    TOP_LEFT = auto()
    TOP_CENTER = auto()
    TOP_RIGHT = auto()
    MIDDLE_LEFT = auto()
    MIDDLE_CENTER = auto()
    MIDDLE_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_CENTER = auto()
    BOTTOM_RIGHT = auto()

    def vertical(self) -> VerticalAlignment:
        return _AXES[self][0]

    def horizontal(self) -> HorizontalAlignment:
        return _AXES[self][1]


_AXES = {
    Alignment.TOP_LEFT: (VerticalAlignment.TOP, HorizontalAlignment.LEFT),
    Alignment.TOP_CENTER: (VerticalAlignment.TOP, HorizontalAlignment.CENTER),
    Alignment.TOP_RIGHT: (VerticalAlignment.TOP, HorizontalAlignment.RIGHT),
    Alignment.MIDDLE_LEFT: (VerticalAlignment.MIDDLE, HorizontalAlignment.LEFT),
    Alignment.MIDDLE_CENTER: (VerticalAlignment.MIDDLE, HorizontalAlignment.CENTER),
    Alignment.MIDDLE_RIGHT: (VerticalAlignment.MIDDLE, HorizontalAlignment.RIGHT),
    Alignment.BOTTOM_LEFT: (VerticalAlignment.BOTTOM, HorizontalAlignment.LEFT),
    Alignment.BOTTOM_CENTER: (VerticalAlignment.BOTTOM, HorizontalAlignment.CENTER),
    Alignment.BOTTOM_RIGHT: (VerticalAlignment.BOTTOM, HorizontalAlignment.RIGHT),
}


def aligned_position(alignment: Alignment, size: Vec2, resize: ParentResized, z: float) -> Vec3:
    """The centre of an element of ``size`` aligned inside the parent's area."""
    horizontal = alignment.horizontal()
    if horizontal is HorizontalAlignment.LEFT:
        x = size.x / 2.0
    elif horizontal is HorizontalAlignment.CENTER:
        x = resize.size.x / 2.0
    else:
        x = resize.size.x - size.x / 2.0

    vertical = alignment.vertical()
    if vertical is VerticalAlignment.TOP:
        y = resize.size.y - size.y / 2.0
    elif vertical is VerticalAlignment.MIDDLE:
        y = resize.size.y / 2.0
    else:
        y = size.y / 2.0

    return Vec3(x + resize.offset.x, y + resize.offset.y, z)


def grid_cells(columns: int, rows: int, size: Vec2, child_count: int) -> list[ParentResized]:
    """The areas a grid of ``size`` gives its children, filled row by row from the top."""
    if columns <= 0 or rows <= 0:
        raise ValueError(f"grid must have positive dimensions, got {columns}x{rows}")
    if child_count < 0:
        raise ValueError(f"child count must be non-negative, got {child_count}")

    cell = Vec2(size.x / columns, size.y / rows)
    half = size / 2.0
    cells = []
    for index in range(child_count):
        row, column = divmod(index, columns)
        y_pos = (rows - 1) - row
        offset = Vec2(column * cell.x, y_pos * cell.y) - half
        cells.append(ParentResized(size=cell, offset=offset))
    return cells


def apply_offset(position: Vec3, amount: SizeVec2, parent_size: Vec2) -> Vec3:
    """Shift a laid-out position by an amount sized against the parent; z is kept."""
    return (position.truncate() + amount.calculate(parent_size)).with_z(position.z)


def window_resize(width: float, height: float) -> ParentResized:
    """The area a window of the given size gives to root elements, centred on the origin."""
    return ParentResized(size=Vec2(width, height), offset=Vec2(width / -2.0, height / -2.0))