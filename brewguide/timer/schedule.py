"""Fixed pour-over schedule for BrewGuide.

Six steps, each keyed by the elapsed second at which it becomes active.
The water amounts in the instructions depend on the chosen bean preset::

    steps = build_steps(Preset.BEANS_20G)
    active_step_index(45, steps)   # -> 1 (first drawdown)
    format_time(185)               # -> "3:05"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ── constants ─────────────────────────────────────────────────────────────

TOTAL_DURATION = 210  # 3:30, brew ends here
NO_ACTIVE_STEP = -1


# ── presets ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class WaterTargets:
    """Cumulative pour targets in grams of water."""

    bloom: int
    first_pour: int
    second_pour: int
    final_pour: int

    @property
    def total(self) -> int:
        return self.final_pour

    @property
    def pours(self) -> tuple[int, int, int, int]:
        return (self.bloom, self.first_pour, self.second_pour, self.final_pour)


class Preset(Enum):
    """Bean mass in grams."""

    BEANS_15G = 15
    BEANS_20G = 20

    @property
    def grams(self) -> int:
        return self.value

    @property
    def water(self) -> WaterTargets:
        return _WATER_TARGETS[self]

    @property
    def label(self) -> str:
        return f"{self.value}g"


_WATER_TARGETS: dict[Preset, WaterTargets] = {
    Preset.BEANS_15G: WaterTargets(bloom=35, first_pour=90, second_pour=150, final_pour=225),
    Preset.BEANS_20G: WaterTargets(bloom=45, first_pour=120, second_pour=200, final_pour=300),
}

DEFAULT_PRESET = Preset.BEANS_20G


# ── steps ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Step:
    number: int
    offset_seconds: int
    title: str
    description: str
    action_label: str


def build_steps(preset: Preset) -> tuple[Step, ...]:
    """Return the six-step schedule with *preset*'s water amounts filled in."""
    w = preset.water
    return (
        Step(
            1, 0, "Bloom",
            f"Valve closed: pour ~90°C water up to {w.bloom}g, "
            "just enough to soak the grounds (immersion).",
            "Pour",
        ),
        Step(
            2, 40, "First drawdown",
            f"Open the valve and immediately pour up to {w.first_pour}g (percolation).",
            "Open → Pour",
        ),
        Step(
            3, 90, "Second drawdown",
            f"Pour up to {w.second_pour}g (percolation).",
            "Pour",
        ),
        Step(
            4, 130, "Cool down",
            "Close the valve, let the water cool to 70-80°C, "
            f"then pour up to {w.final_pour}g (immersion).",
            "Close → Pour",
        ),
        Step(
            5, 165, "Final drawdown",
            "Open the valve and let it drain.",
            "Open",
        ),
        Step(
            6, TOTAL_DURATION, "Done",
            "Brew complete! Enjoy your coffee.",
            "Done",
        ),
    )


# ── lookups ───────────────────────────────────────────────────────────────


def active_step_index(elapsed_seconds: int, steps: tuple[Step, ...]) -> int:
    """Index of the latest step whose offset has been reached.

    At an exact boundary the later step wins.  Returns ``NO_ACTIVE_STEP``
    when *elapsed_seconds* is before the first offset.
    """
    for i in range(len(steps) - 1, -1, -1):
        if steps[i].offset_seconds <= elapsed_seconds:
            return i
    return NO_ACTIVE_STEP


def format_time(seconds: int) -> str:
    """``185`` -> ``"3:05"``."""
    m, s = divmod(max(0, seconds), 60)
    return f"{m}:{s:02d}"
