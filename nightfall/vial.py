"""The bloodthirsty vial: heals the player after enough kills."""

from __future__ import annotations

from nightfall.timer import Timer, TimerMode

INITIAL_LIMIT = 100
FILL_FRAMES = 22
HEAL_FRAME_A = 22
HEAL_FRAME_B = 23
ANIMATION_PERIOD = 1.0 / 8.0


class Vial:
    """Counts kills towards a heal; each heal doubles the kills needed.

    ``frame`` is the sprite frame to show: a fill level, or a flashing
    sequence for a short while after each heal.
    """

    def __init__(self, limit: int = INITIAL_LIMIT) -> None:
        if limit <= 0:
            raise ValueError(f"kill limit must be positive, got {limit}")
        self.count = 0
        self.limit = limit
        self.animation_timer = Timer(ANIMATION_PERIOD, TimerMode.REPEATING)
        self.animation_count = 0
        self.frame = 0

    def record_kills(self, kills: int) -> bool:
        """Count ``kills`` enemy deaths and return whether a heal was earned."""
        if kills < 0:
            raise ValueError(f"kill count must be non-negative, got {kills}")
        healed = False
        for _ in range(kills):
            self.count += 1
            if self.count >= self.limit:
                self.count = 0
                self.limit *= 2
                healed = True
        return healed

    def update(self, delta: float, kills: int) -> bool:
        """Advance by ``delta`` seconds with ``kills`` new kills; return whether to heal."""
        self.animation_timer.tick(delta)
        healed = self.record_kills(kills)

        if healed:
            self.animation_count = 1
            self.frame = HEAL_FRAME_A
            self.animation_timer.reset()

        step = self.animation_timer.just_finished()
        if self.animation_count == 4:
            if step:
                self.animation_count = 0
        elif self.animation_count in (1, 3):
            if step:
                self.frame = HEAL_FRAME_B
                self.animation_count += 1
        elif self.animation_count == 2:
            if step:
                self.frame = HEAL_FRAME_A
                self.animation_count += 1
        elif self.count == 0:
            self.frame = 0
        else:
            self.frame = int(self.count / self.limit * FILL_FRAMES + 1.0)
        return healed