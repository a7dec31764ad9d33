"""Submission gate state infrastructure providers."""

from dishka import Scope, provide

from remarks.config import GateSettings
from remarks.domain.repository import GateStateStore
from remarks.persistence import FileGateStateStore
from remarks.util.di.base import ProviderBase


class GateStateProvider(ProviderBase):
    """Gate state component base."""

    __mock_component__ = "gate_state"


class ProdGateStateProvider(GateStateProvider):
    """Production gate state provider persisting to a file."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_gate_state_store(self, gate_settings: GateSettings) -> GateStateStore:
        """Provide file-backed gate state."""
        return FileGateStateStore(gate_settings.state_path)
