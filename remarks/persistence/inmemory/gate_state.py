"""In-memory submission gate state for testing."""

from remarks.domain.repository import GateStateStore


class InMemoryGateStateStore(GateStateStore):
    """Keeps the timestamp in memory; survives only as long as the instance."""

    def __init__(self, timestamp_ms: int | None = None) -> None:
        self.timestamp_ms = timestamp_ms

    def load(self) -> int | None:
        return self.timestamp_ms

    def save(self, timestamp_ms: int) -> None:
        self.timestamp_ms = timestamp_ms

    def clear(self) -> None:
        self.timestamp_ms = None
