"""Infrastructure providers."""

# Import bases
from .clock import ClockProvider
from .gate_state import GateStateProvider
from .store import StoreProvider

# Import implementations (needed for __subclasses__())
from .clock import ProdClockProvider  # noqa: F401
from .gate_state import ProdGateStateProvider  # noqa: F401
from .store import ProdStoreProvider  # noqa: F401

__all__ = [
    "ClockProvider",
    "GateStateProvider",
    "ProdClockProvider",
    "ProdGateStateProvider",
    "ProdStoreProvider",
    "StoreProvider",
]
