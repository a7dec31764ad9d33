"""Mock providers for testing."""

from .clock import FakeClock, MockClockProvider
from .gate_state import MockGateStateProvider
from .store import MockStoreProvider
from .container import build_test_container

__all__ = [
    "FakeClock",
    "MockClockProvider",
    "MockGateStateProvider",
    "MockStoreProvider",
    "build_test_container",
]
