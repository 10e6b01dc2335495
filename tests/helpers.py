"""Shared test helpers for BrewGuide."""

from brewguide.power.wake_lock import WakeLock, WakeLockError
from brewguide.timer.engine import BrewTimer


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeWakeLock(WakeLock):
    """Records acquire/release calls; can be told to fail."""

    name = "fake"

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.acquired: list[int] = []
        self.released: list[int] = []
        self._next = 1

    @property
    def available(self) -> bool:
        return not self.fail

    @property
    def held(self) -> int:
        return len(self.acquired) - len(self.released)

    def acquire(self) -> int:
        if self.fail:
            raise WakeLockError("no wake lock for you")
        handle = self._next
        self._next += 1
        self.acquired.append(handle)
        return handle

    def release(self, handle: int) -> None:
        self.released.append(handle)


def run_ticks(timer: BrewTimer, n: int) -> None:
    """Deliver *n* clock ticks without waiting for real time."""
    for _ in range(n):
        timer._on_tick()
