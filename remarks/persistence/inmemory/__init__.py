"""In-memory implementations for testing."""

from .comment import InMemoryCommentStore
from .gate_state import InMemoryGateStateStore

__all__ = [
    "InMemoryCommentStore",
    "InMemoryGateStateStore",
]
