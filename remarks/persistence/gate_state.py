"""File-backed submission gate state."""

import json
from pathlib import Path

import logfire

from remarks.domain.repository import GateStateStore

# Single key shared by every post; the rate limit is global
GATE_STATE_KEY = "comment-submit-global"


class FileGateStateStore(GateStateStore):
    """Persists the last submission timestamp as a small JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> int | None:
        """Read the timestamp; unreadable or malformed files count as empty."""
        if not self.path.exists():
            return None
        try:
            value = json.loads(self.path.read_text(encoding="utf-8")).get(
                GATE_STATE_KEY
            )
            return int(value) if value is not None else None
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logfire.warn(
                "Ignoring unreadable gate state", path=str(self.path), error=str(e)
            )
            return None

    def save(self, timestamp_ms: int) -> None:
        """Write the timestamp; an unwritable location is logged, not raised."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps({GATE_STATE_KEY: int(timestamp_ms)}), encoding="utf-8"
            )
            tmp_path.replace(self.path)
        except OSError as e:
            logfire.warn(
                "Could not persist gate state", path=str(self.path), error=str(e)
            )

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logfire.warn(
                "Could not clear gate state", path=str(self.path), error=str(e)
            )
