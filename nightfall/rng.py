"""Seeded random number generators derived from a per-run global seed."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

SEED_WORDS: tuple[str, ...] = (
    "dawn",
    "sun",
    "moon",
    "blade",
    "ring",
    "lantern",
    "beast",
    "shade",
    "hood",
    "powder",
    "doom",
    "gaze",
    "end",
    "flame",
)

PLAYBACK_RATE_MIN = 0.9
PLAYBACK_RATE_MAX = 1.1


def choose_global_seed(chooser: Callable[[Sequence[str]], str] | None = None) -> str:
    """Pick the run's global seed word, by default from the system's entropy source."""
    pick = chooser if chooser is not None else random.SystemRandom().choice
    return str(pick(SEED_WORDS))


def make_rng(global_seed: str, derivative_seed: str) -> random.Random:
    """A deterministic generator seeded by the two seeds joined together."""
    return random.Random(global_seed + derivative_seed)


def pitch_rng(global_seed: str) -> random.Random:
    """The generator used to vary sound-effect pitch."""
    return make_rng(global_seed, "pitch")


def random_playback_rate(rng: random.Random) -> float:
    """A playback rate in the half-open range [0.9, 1.1)."""
    rate = PLAYBACK_RATE_MIN + rng.random() * (PLAYBACK_RATE_MAX - PLAYBACK_RATE_MIN)
    return min(rate, PLAYBACK_RATE_MAX - 1e-12)