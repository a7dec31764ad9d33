"""Persistence implementations of the domain ports."""

from remarks.persistence.gate_state import GATE_STATE_KEY, FileGateStateStore

__all__ = ["FileGateStateStore", "GATE_STATE_KEY"]
