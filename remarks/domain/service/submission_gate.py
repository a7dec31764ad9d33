"""Global rate limiter for comment submissions."""

import math

import logfire

from remarks.domain.error import RateLimitError
from remarks.domain.repository import Clock, GateStateStore

from .base import Service

RATE_LIMIT_WINDOW_MS = 30 * 1000


def format_remaining(remaining_ms: int) -> str:
    """Render a cooldown as whole seconds, rounded up (e.g. ``"25s"``)."""
    return f"{math.ceil(max(0, remaining_ms) / 1000)}s"


class SubmissionGate(Service):
    """Client-side rate limiter for comment creation.

    The gate is global: one successful submission on any post starts the
    cooldown for every post. The last submission time is persisted so the
    limit holds across restarts.
    """

    def __init__(
        self,
        state_store: GateStateStore,
        clock: Clock,
        window_ms: int = RATE_LIMIT_WINDOW_MS,
    ) -> None:
        """Initialize submission gate.

        Args:
            state_store: Durable storage for the last submission time
            clock: Time source
            window_ms: Minimum time between two successful submissions
        """
        self.state_store = state_store
        self.clock = clock
        self.window_ms = window_ms
        self.last_submit_at: int | None = None

    def _now(self, now: int | None) -> int:
        return self.clock.now_ms() if now is None else now

    def restore(self, now: int | None = None) -> None:
        """Load the persisted submission time.

        A persisted value at least one window old is discarded and cleared
        from storage, so a stale or skewed timestamp cannot block forever.
        A newer submission already recorded by this process is kept.
        """
        now = self._now(now)
        persisted = self.state_store.load()
        if persisted is None:
            return

        if now - persisted >= self.window_ms:
            logfire.info("Stale submission gate state discarded", persisted=persisted)
            try:
                self.state_store.clear()
            except OSError as e:
                logfire.warn("Could not clear gate state", error=str(e))
            return

        if self.last_submit_at is None or persisted > self.last_submit_at:
            self.last_submit_at = persisted
            logfire.info(
                "Submission gate restored",
                last_submit_at=persisted,
                remaining_ms=self.remaining_cooldown(now),
            )

    def can_submit(self, now: int | None = None) -> bool:
        """Whether more than one window has passed since the last submission."""
        if self.last_submit_at is None:
            return True
        return self._now(now) - self.last_submit_at > self.window_ms

    def remaining_cooldown(self, now: int | None = None) -> int:
        """Milliseconds until the next submission is allowed, never negative."""
        if self.last_submit_at is None:
            return 0
        elapsed = self._now(now) - self.last_submit_at
        return max(0, self.window_ms - elapsed)

    def check(self, now: int | None = None) -> None:
        """Raise if a submission is not allowed yet.

        Raises:
            RateLimitError: With the remaining cooldown in milliseconds
        """
        now = self._now(now)
        if not self.can_submit(now):
            raise RateLimitError(self.remaining_cooldown(now))

    def record_submission(self, now: int | None = None) -> None:
        """Start the cooldown from ``now`` and persist it.

        The cooldown holds in memory even when it cannot be persisted.
        """
        now = self._now(now)
        self.last_submit_at = now
        try:
            self.state_store.save(now)
        except OSError as e:
            logfire.warn("Could not persist submission time", error=str(e))
        logfire.info("Submission recorded", last_submit_at=now)
