"""Port interfaces for the comment core.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter and persistence layers.
"""

from remarks.domain.repository.clock import Clock, SystemClock
from remarks.domain.repository.comment import CommentStore
from remarks.domain.repository.gate_state import GateStateStore

__all__ = [
    "Clock",
    "CommentStore",
    "GateStateStore",
    "SystemClock",
]
