"""Host power management."""

from .wake_lock import (
    WakeLock,
    WakeLockError,
    CommandWakeLock,
    NullWakeLock,
    default_wake_lock,
)

__all__ = [
    "WakeLock",
    "WakeLockError",
    "CommandWakeLock",
    "NullWakeLock",
    "default_wake_lock",
]
