"""Selection groups: a row of choices navigated by mouse or keyboard."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionEvent:
    """What one input step did: which child lost or gained hover, and which was chosen."""

    unhovered: int | None = None
    hovered: int | None = None
    selected: int | None = None

    @property
    def changed(self) -> bool:
        return self.unhovered is not None or self.hovered is not None or self.selected is not None


@dataclass
class SelectionGroup:
    """A group of ``child_count`` choices, one of which is hovered at a time."""

    child_count: int
    is_horizontal: bool = False
    is_focused: bool = False
    hovered_index: int = 0

    def __post_init__(self) -> None:
        if self.child_count < 0:
            raise ValueError(f"child count must be non-negative, got {self.child_count}")
        if self.child_count and not 0 <= self.hovered_index < self.child_count:
            raise IndexError(f"hovered index {self.hovered_index} out of range")

    def _check(self, index: int) -> None:
        if not 0 <= index < self.child_count:
            raise IndexError(f"child index {index} out of range for {self.child_count} children")

    def hover(self, index: int, clicked: bool) -> SelectionEvent:
        """The cursor is over child ``index``; ``clicked`` if the left button was just pressed."""
        self._check(index)
        self._check(self.hovered_index)
        unhovered = hovered = selected = None
        if self.hovered_index != index:
            unhovered = self.hovered_index
            self.hovered_index = index
            hovered = index
        if clicked:
            selected = self.hovered_index
        return SelectionEvent(unhovered, hovered, selected)

    def handle_keys(self, left: bool, right: bool, confirm: bool) -> SelectionEvent:
        """Keyboard navigation; ignored unless the group is focused."""
        if not self.is_focused:
            return SelectionEvent()
        unhovered = hovered = selected = None

        if self.is_horizontal:
            if left and self.hovered_index > 0:
                self._check(self.hovered_index)
                unhovered = self.hovered_index
                self.hovered_index -= 1
                hovered = self.hovered_index
            elif right:
                self._check(self.hovered_index)
                if self.hovered_index < self.child_count - 1:
                    unhovered = self.hovered_index
                    self.hovered_index += 1
                    hovered = self.hovered_index

        if confirm:
            self._check(self.hovered_index)
            selected = self.hovered_index
        return SelectionEvent(unhovered, hovered, selected)