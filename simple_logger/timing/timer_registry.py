"""
Named stopwatch registry

Timers are passive: they store a start reading and report the elapsed
time when stopped. They never expire.
"""

import threading
import time
from typing import Callable, Dict, List, Optional


class TimerRegistry:
    """
    Track running timers by name.

    Example:
        timers = TimerRegistry()
        timers.start("load")
        ...
        elapsed = timers.stop("load")
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        """
        Initialize timer registry.

        Args:
            clock: High-resolution clock returning seconds as float
        """
        self._clock = clock
        self._starts: Dict[str, float] = {}
        self._lock = threading.Lock()

    def start(self, name: str) -> Optional[float]:
        """
        Start a timer.

        Returns:
            The start reading, or None if a timer with that name is already
            running (its start reading is left untouched)
        """
        with self._lock:
            if name in self._starts:
                return None
            self._starts[name] = self._clock()
            return self._starts[name]

    def stop(self, name: str) -> Optional[float]:
        """
        Stop a timer and forget it.

        Returns:
            Elapsed seconds, or None if no timer with that name is running
        """
        with self._lock:
            start = self._starts.pop(name, None)
            if start is None:
                return None
            return self._clock() - start

    def is_running(self, name: str) -> bool:
        with self._lock:
            return name in self._starts

    def names(self) -> List[str]:
        """Names of running timers, in start order."""
        with self._lock:
            return list(self._starts)

    def clear(self) -> None:
        with self._lock:
            self._starts.clear()

    def __len__(self) -> int:
        return len(self._starts)
