"""Timer package."""

from .clock import ClockDriver, TICK_INTERVAL_MS
from .engine import BrewTimer, BrewState, BrewSnapshot
from .schedule import (
    DEFAULT_PRESET,
    NO_ACTIVE_STEP,
    TOTAL_DURATION,
    Preset,
    Step,
    WaterTargets,
    active_step_index,
    build_steps,
    format_time,
)

__all__ = [
    "BrewTimer",
    "BrewState",
    "BrewSnapshot",
    "ClockDriver",
    "TICK_INTERVAL_MS",
    "DEFAULT_PRESET",
    "NO_ACTIVE_STEP",
    "TOTAL_DURATION",
    "Preset",
    "Step",
    "WaterTargets",
    "active_step_index",
    "build_steps",
    "format_time",
]
