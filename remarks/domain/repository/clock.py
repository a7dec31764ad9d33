"""Clock interface."""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of wall-clock time in integer epoch milliseconds."""

    @abstractmethod
    def now_ms(self) -> int:
        pass

    def __call__(self) -> int:
        return self.now_ms()


class SystemClock(Clock):
    """Clock backed by the system time."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)
