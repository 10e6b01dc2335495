"""Keep-the-screen-awake capability of the host platform.

A wake lock is held for as long as a small helper process lives:

- macOS:  ``caffeinate -d -i -w <our pid>``
- Linux:  ``systemd-inhibit --what=idle ... sleep infinity``

Hosts without either helper get a ``NullWakeLock`` whose ``acquire()``
always fails.  Callers treat failures as best-effort: catch
``WakeLockError``, log it, carry on.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)

RELEASE_TIMEOUT = 2.0  # seconds to wait for the helper before killing it


class WakeLockError(RuntimeError):
    """The display could not be kept awake."""


class WakeLock:
    """Interface for a host wake-lock capability."""

    name = "none"

    @property
    def available(self) -> bool:
        return False

    def acquire(self) -> object:
        """Acquire the lock and return an opaque handle."""
        raise NotImplementedError

    def release(self, handle: object) -> None:
        raise NotImplementedError


class NullWakeLock(WakeLock):
    """Host has no way to keep the display awake."""

    def acquire(self) -> object:
        raise WakeLockError("wake lock not supported on this platform")

    def release(self, handle: object) -> None:
        pass


class CommandWakeLock(WakeLock):
    """Wake lock backed by a long-running helper command."""

    def __init__(self, argv: list[str], name: str | None = None) -> None:
        self._argv = list(argv)
        self.name = name or os.path.basename(argv[0])

    @property
    def available(self) -> bool:
        return shutil.which(self._argv[0]) is not None

    @property
    def argv(self) -> list[str]:
        return list(self._argv)

    def acquire(self) -> subprocess.Popen:
        if not self.available:
            raise WakeLockError(f"{self._argv[0]} not found")
        try:
            proc = subprocess.Popen(
                self._argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise WakeLockError(f"could not start {self.name}: {exc}") from exc
        logger.info("Wake lock acquired via %s (pid %s)", self.name, proc.pid)
        return proc

    def release(self, handle: subprocess.Popen) -> None:
        if handle.poll() is not None:
            return
        try:
            handle.terminate()
            try:
                handle.wait(timeout=RELEASE_TIMEOUT)
            except subprocess.TimeoutExpired:
                handle.kill()
                handle.wait()
        except OSError as exc:
            logger.warning("Releasing wake lock (%s) failed: %s", self.name, exc)
            return
        logger.info("Wake lock released (%s)", self.name)


def default_wake_lock() -> WakeLock:
    """Pick the best wake lock for the running platform."""
    if sys.platform == "darwin":
        lock = CommandWakeLock(
            ["caffeinate", "-d", "-i", "-w", str(os.getpid())],
        )
    elif sys.platform.startswith("linux"):
        lock = CommandWakeLock(
            [
                "systemd-inhibit",
                "--what=idle",
                "--who=BrewGuide",
                "--why=Brewing coffee",
                "--mode=block",
                "sleep", "infinity",
            ],
        )
    else:
        return NullWakeLock()

    if not lock.available:
        logger.info("No wake-lock helper on this host; screen may sleep")
        return NullWakeLock()
    return lock
