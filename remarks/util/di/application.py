"""Application layer DI providers."""

from dishka import Scope, provide

from remarks.application.usecase.comment import CommentSessionFactory
from remarks.config import Settings
from remarks.domain.service import CommentService, SubmissionGate
from remarks.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_session_factory(
        self,
        comment_service: CommentService,
        gate: SubmissionGate,
        settings: Settings,
    ) -> CommentSessionFactory:
        """Provide the factory opening one comment session per post view."""
        return CommentSessionFactory(
            comment_service=comment_service,
            gate=gate,
            max_display_depth=settings.comments.max_display_depth,
        )
