"""Brew timer state machine for BrewGuide.

States
------
IDLE        Nothing started yet (elapsed 0).  Preset can be changed.
RUNNING     Clock counting up, one second per tick.
PAUSED      Clock frozen, elapsed time kept.
COMPLETED   Elapsed reached 3:30.  Stays here until reset.

Transitions
-----------
IDLE → RUNNING              (start)
PAUSED → RUNNING            (start)
RUNNING → PAUSED            (pause)
RUNNING → COMPLETED         (elapsed reaches TOTAL_DURATION)
Any → IDLE                  (reset)

The state is never stored.  It is derived from ``elapsed_seconds``,
``running`` and ``started`` every time it is read, and so is the active
step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from ..power.wake_lock import WakeLock, default_wake_lock
from .clock import ClockDriver
from .schedule import (
    DEFAULT_PRESET,
    TOTAL_DURATION,
    Preset,
    Step,
    active_step_index,
    build_steps,
)

logger = logging.getLogger(__name__)


# ── enums / snapshot ──────────────────────────────────────────────────────


class BrewState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass(frozen=True)
class BrewSnapshot:
    """Everything the display needs to redraw."""

    elapsed_seconds: int
    running: bool
    started: bool
    active_step_index: int
    preset: Preset
    state: BrewState

    @property
    def steps_completed(self) -> int:
        return max(0, self.active_step_index)


# ── engine ────────────────────────────────────────────────────────────────


class BrewTimer(QObject):
    """Qt-based pour-over timer.

    Signals
    -------
    tick(elapsed_seconds: int)
        Emitted after every processed tick and on reset.
    state_changed(new_state: BrewState)
        Emitted on every transition.
    step_changed(index: int)
        Emitted when the active step index changes.
    preset_changed(preset: Preset)
        Emitted when a new preset is accepted.
    brew_completed()
        Emitted once when elapsed reaches ``TOTAL_DURATION``.
    snapshot_changed(snapshot: BrewSnapshot)
        Emitted after every mutation, last.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    step_changed = pyqtSignal(int)
    preset_changed = pyqtSignal(object)
    brew_completed = pyqtSignal()
    snapshot_changed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        preset: Preset = DEFAULT_PRESET,
        wake_lock: WakeLock | None = None,
        keep_awake: bool = True,
    ) -> None:
        super().__init__(parent)

        self._preset: Preset = preset
        self._steps: tuple[Step, ...] = build_steps(preset)

        self._elapsed: int = 0
        self._running: bool = False
        self._started: bool = False

        self._clock = ClockDriver(
            self,
            wake_lock=wake_lock if wake_lock is not None else default_wake_lock(),
            keep_awake=keep_awake,
        )
        self._clock.ticked.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed

    @property
    def running(self) -> bool:
        return self._running

    @property
    def started(self) -> bool:
        return self._started

    @property
    def state(self) -> BrewState:
        if self._running:
            return BrewState.RUNNING
        if self._elapsed >= TOTAL_DURATION:
            return BrewState.COMPLETED
        if self._started:
            return BrewState.PAUSED
        return BrewState.IDLE

    @property
    def preset(self) -> Preset:
        return self._preset

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def active_step_index(self) -> int:
        return active_step_index(self._elapsed, self._steps)

    @property
    def active_step(self) -> Step | None:
        idx = self.active_step_index
        return self._steps[idx] if idx >= 0 else None

    @property
    def remaining_seconds(self) -> int:
        return TOTAL_DURATION - self._elapsed

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the brew."""
        return max(0.0, min(1.0, self._elapsed / TOTAL_DURATION))

    @property
    def clock(self) -> ClockDriver:
        return self._clock

    def snapshot(self) -> BrewSnapshot:
        return BrewSnapshot(
            elapsed_seconds=self._elapsed,
            running=self._running,
            started=self._started,
            active_step_index=self.active_step_index,
            preset=self._preset,
            state=self.state,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start from IDLE or resume from PAUSED.  No-op otherwise."""
        if self.state not in (BrewState.IDLE, BrewState.PAUSED):
            return
        self._running = True
        self._started = True
        self._clock.start()
        logger.debug("Brew running from %ss", self._elapsed)
        self._emit_state()

    def pause(self) -> None:
        if not self._running:
            return
        self._running = False
        self._clock.stop()
        logger.debug("Brew paused at %ss", self._elapsed)
        self._emit_state()

    def reset(self) -> None:
        """Back to IDLE from anywhere.  Stops ticking and frees the wake lock."""
        self._clock.stop()
        old_step = self.active_step_index
        self._running = False
        self._started = False
        self._elapsed = 0
        logger.debug("Brew reset")
        self.tick.emit(self._elapsed)
        if self.active_step_index != old_step:
            self.step_changed.emit(self.active_step_index)
        self._emit_state()

    def set_preset(self, amount: Preset | int) -> None:
        """Choose the bean amount.  Ignored once the brew has started."""
        preset = amount if isinstance(amount, Preset) else Preset(int(amount))
        if self._started:
            logger.debug("Preset change to %s ignored: brew already started", preset.label)
            return
        if preset == self._preset:
            return
        self._preset = preset
        self._steps = build_steps(preset)
        self.preset_changed.emit(preset)
        self.snapshot_changed.emit(self.snapshot())

    def shutdown(self) -> None:
        """Tear the session down: stop ticking, release the wake lock."""
        self._clock.stop()
        self._running = False

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if not self._running:
            return
        old_step = self.active_step_index
        self._elapsed = min(self._elapsed + 1, TOTAL_DURATION)
        finished = self._elapsed >= TOTAL_DURATION
        if finished:
            self._running = False
            self._clock.stop()

        self.tick.emit(self._elapsed)
        new_step = self.active_step_index
        if new_step != old_step:
            self.step_changed.emit(new_step)

        if finished:
            logger.info("Brew complete (%s)", self._preset.label)
            self.state_changed.emit(BrewState.COMPLETED)
            self.brew_completed.emit()
        self.snapshot_changed.emit(self.snapshot())

    def _emit_state(self) -> None:
        self.state_changed.emit(self.state)
        self.snapshot_changed.emit(self.snapshot())
