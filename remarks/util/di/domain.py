"""Domain layer DI providers."""

from dishka import Scope, provide

from remarks.config import Settings
from remarks.domain.repository import Clock, CommentStore, GateStateStore
from remarks.domain.service import (
    CommentCache,
    CommentService,
    CommentValidator,
    Sanitizer,
    SubmissionGate,
)
from remarks.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped: the comment cache and the submission
    gate are shared by every session in the process.
    """

    scope = Scope.APP

    @provide
    def get_sanitizer(self) -> Sanitizer:
        """Provide input sanitizer."""
        return Sanitizer()

    @provide
    def get_validator(self, sanitizer: Sanitizer) -> CommentValidator:
        """Provide comment form validator."""
        return CommentValidator(sanitizer=sanitizer)

    @provide
    def get_comment_cache(self, clock: Clock, settings: Settings) -> CommentCache:
        """Provide the process-wide comment cache."""
        return CommentCache(
            clock=clock,
            freshness_window_ms=settings.freshness_window_ms,
            max_posts=settings.comments.cache_max_posts,
        )

    @provide
    def get_submission_gate(
        self, state_store: GateStateStore, clock: Clock, settings: Settings
    ) -> SubmissionGate:
        """Provide the global submission gate."""
        return SubmissionGate(
            state_store=state_store,
            clock=clock,
            window_ms=settings.rate_limit_ms,
        )

    @provide
    def get_comment_service(
        self,
        comment_store: CommentStore,
        cache: CommentCache,
        sanitizer: Sanitizer,
        validator: CommentValidator,
        settings: Settings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_store=comment_store,
            cache=cache,
            sanitizer=sanitizer,
            validator=validator,
            user_agent=settings.store.user_agent,
        )
