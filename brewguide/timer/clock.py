"""One-second tick source for the brew timer.

The driver owns a single ``QTimer`` and, while ticking, the wake-lock
handle.  ``start()`` always cancels the previous interval first, so
there is never more than one tick source per driver.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..power.wake_lock import WakeLock, WakeLockError, NullWakeLock

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class ClockDriver(QObject):
    """Emits ``ticked`` once per second between ``start()`` and ``stop()``."""

    ticked = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        wake_lock: WakeLock | None = None,
        keep_awake: bool = True,
    ) -> None:
        super().__init__(parent)
        self._wake_lock: WakeLock = wake_lock or NullWakeLock()
        self._keep_awake = keep_awake
        self._lock_handle: object | None = None

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self.ticked)

    # ── properties ────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def holds_wake_lock(self) -> bool:
        return self._lock_handle is not None

    @property
    def keep_awake(self) -> bool:
        return self._keep_awake

    @keep_awake.setter
    def keep_awake(self, value: bool) -> None:
        self._keep_awake = value
        if not value:
            self._release_wake_lock()
        elif self.is_active:
            self._acquire_wake_lock()

    # ── controls ──────────────────────────────────────────────────────

    def start(self) -> None:
        self.stop()
        self._qt_timer.start()
        if self._keep_awake:
            self._acquire_wake_lock()

    def stop(self) -> None:
        """Stop ticking and drop the wake lock.  Safe to call repeatedly."""
        self._qt_timer.stop()
        self._release_wake_lock()

    # ── wake lock ─────────────────────────────────────────────────────

    def _acquire_wake_lock(self) -> None:
        if self._lock_handle is not None:
            return
        try:
            self._lock_handle = self._wake_lock.acquire()
        except WakeLockError as exc:
            logger.warning("Wake lock unavailable, screen may sleep: %s", exc)

    def _release_wake_lock(self) -> None:
        handle, self._lock_handle = self._lock_handle, None
        if handle is not None:
            self._wake_lock.release(handle)
