"""The thorns ability: a damaging ring that periodically surrounds the player."""

from __future__ import annotations

from enum import Enum

from nightfall.timer import Timer, TimerMode

THORNS_DURATION = 3.0
THORNS_COOLDOWN = 15.0
THORNS_TRANSITION = 1.0
THORNS_DAMAGE = 50
THORNS_RADIUS = 55.0


class ThornsPhase(Enum):
    """The animation phases of a ring of thorns that is present."""

    SPAWNING = "spawning"
    PRESENT = "present"
    DESPAWNING = "despawning"

    def frames(self) -> int:
        return _PHASE_FRAMES[self]

    def frame_duration(self) -> float:
        """Seconds each frame is shown."""
        return 1.0 / 4.0


_PHASE_FRAMES = {
    ThornsPhase.SPAWNING: 4,
    ThornsPhase.PRESENT: 2,
    ThornsPhase.DESPAWNING: 4,
}


class ThornsCycle:
    """Spawns, holds and removes the thorns, then waits out the cooldown.

    ``phase`` is ``None`` while no thorns are present. The first update
    spawns them straight away.
    """

    def __init__(self) -> None:
        self.timer = Timer(0.0, TimerMode.ONCE)
        self.phase: ThornsPhase | None = None

    def _restart(self, duration: float) -> None:
        self.timer.set_duration(duration)
        self.timer.reset()

    def update(self, delta: float) -> ThornsPhase | None:
        """Advance by ``delta`` seconds and return the phase the thorns are in."""
        self.timer.tick(delta)
        if not self.timer.just_finished():
            return self.phase

        if self.phase is None:
            self._restart(THORNS_TRANSITION)
            self.phase = ThornsPhase.SPAWNING
        elif self.phase is ThornsPhase.SPAWNING:
            self._restart(THORNS_DURATION)
            self.phase = ThornsPhase.PRESENT
        elif self.phase is ThornsPhase.PRESENT:
            self._restart(THORNS_TRANSITION)
            self.phase = ThornsPhase.DESPAWNING
        else:
            self._restart(THORNS_COOLDOWN)
            self.phase = None
        return self.phase