"""Persisted submission gate state interface."""

from abc import ABC, abstractmethod


class GateStateStore(ABC):
    """Durable single-value storage for the last submission timestamp.

    The value must survive process restarts so the rate limit holds across
    reloads. Storage failures may surface as ``OSError``.
    """

    @abstractmethod
    def load(self) -> int | None:
        """Return the persisted timestamp in epoch milliseconds, if any."""
        pass

    @abstractmethod
    def save(self, timestamp_ms: int) -> None:
        """Persist the timestamp of the latest successful submission."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget the persisted timestamp."""
        pass
