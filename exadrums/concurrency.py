"""Busy-waiting lock and real-time thread priority helpers."""

from __future__ import annotations

import os
import threading
from typing import Optional

from .misc import clamp

# Minimum number of CPUs needed before thread priorities are changed.
MIN_THREADS = 3


class SpinLock:
    """Lock that busy-waits instead of sleeping while it is held elsewhere."""

    def __init__(self) -> None:
        self._flag = threading.Lock()

    def acquire(self) -> None:
        """Spin until the lock is taken."""
        while not self._flag.acquire(blocking=False):
            pass

    def release(self) -> None:
        """Release the lock; releasing a free lock does nothing."""
        if self._flag.locked():
            self._flag.release()

    def __enter__(self) -> "SpinLock":
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()


def scaled_priority(percent: int, max_priority: int) -> int:
    """Scale a 0-100 percentage (clamped) to a scheduler priority."""
    return (clamp(percent, 0, 100) * max_priority) // 100


def set_thread_priority(native_id: int, percent: int, policy: Optional[int] = None) -> bool:
    """Give a thread a relative real-time priority.

    Nothing is done on machines with fewer than three CPUs or without a
    scheduling interface. Returns whether the priority was applied.
    """
    if not hasattr(os, "sched_setscheduler"):
        return False
    if (os.cpu_count() or 1) < MIN_THREADS:
        return False
    if policy is None:
        policy = os.SCHED_FIFO
    priority = scaled_priority(percent, os.sched_get_priority_max(os.SCHED_FIFO))
    try:
        os.sched_setscheduler(native_id, policy, os.sched_param(priority))
    except OSError:
        return False
    return True