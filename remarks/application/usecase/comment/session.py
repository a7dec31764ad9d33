"""Comment session for one post view.

The session sequences loading, validation, submission and refresh of a
post's comments and turns every failure into state the view can show:

    IDLE -> LOADING -> READY | FAILED
    FAILED -> LOADING          (explicit refresh only)
    READY -> SUBMITTING -> READY (reloaded on success, draft kept on failure)
"""

import logfire

from remarks.domain.error import (
    RateLimitError,
    RemoteReadError,
    RemoteWriteError,
    ValidationError,
)
from remarks.domain.model import Comment, CommentDraft, CommentWithReplies
from remarks.domain.service import (
    CommentService,
    SubmissionGate,
    format_remaining,
    organize_comments,
)
from remarks.domain.value import (
    CommentId,
    DraftField,
    Notice,
    NoticeLevel,
    PostKey,
    SessionPhase,
    SubmitOutcome,
)

from .thread_view import DEFAULT_MAX_DEPTH, CommentView, render_thread

LOAD_FAILED_MESSAGE = "Failed to load comments. Please retry."
INVALID_FORM_MESSAGE = "Please check the highlighted fields."
SUBMIT_FAILED_MESSAGE = "Failed to post your comment. Please try again later."
SUBMITTED_MESSAGE = "Comment posted!"

_SUBMITTABLE_PHASES = (SessionPhase.READY, SessionPhase.FAILED)


class CommentSession:
    """Explicitly scoped comment state for a single post view.

    Created per page view by ``CommentSessionFactory``; nothing here is
    shared between views except the cache and submission gate held by the
    services.
    """

    def __init__(
        self,
        post_key: PostKey,
        comment_service: CommentService,
        gate: SubmissionGate,
        max_display_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize comment session.

        Args:
            post_key: Post whose comments this session shows
            comment_service: Comment domain service
            gate: Global submission gate
            max_display_depth: Depth from which replies can no longer be started
        """
        self.post_key = post_key
        self.comment_service = comment_service
        self.gate = gate
        self.max_display_depth = max_display_depth

        self.phase = SessionPhase.IDLE
        self.comments: list[Comment] = []
        self.threads: list[CommentWithReplies] = []
        self.total_count = 0
        self.error: str | None = None

        self.draft = CommentDraft()
        self.field_errors: dict[str, str] = {}
        self.touched: set[DraftField] = set()
        self.notice: Notice | None = None

        self.active = True
        self._generation = 0

    # Loading

    async def mount(self) -> None:
        """Restore the persisted rate limit and load comments."""
        self.gate.restore()
        await self.load()

    def unmount(self) -> None:
        """Stop accepting results; in-flight loads are discarded when they land."""
        self.active = False
        self._generation += 1

    async def load(self) -> bool:
        """Load comments and rebuild the reply tree.

        Returns:
            True if the session ended up Ready with fresh comments
        """
        if not self.active:
            return False

        self._generation += 1
        generation = self._generation
        self.phase = SessionPhase.LOADING
        self.error = None

        try:
            comments = await self.comment_service.get_comments(self.post_key)
        except RemoteReadError as e:
            if generation != self._generation:
                return False
            logfire.warn("Comment load failed", post_key=self.post_key, reason=e.reason)
            self.error = LOAD_FAILED_MESSAGE
            self.phase = SessionPhase.FAILED
            return False

        if generation != self._generation:
            logfire.debug("Discarding stale comment load", post_key=self.post_key)
            return False

        self.comments = comments
        self.threads = organize_comments(comments)
        self.total_count = len(comments)
        self.phase = SessionPhase.READY
        return True

    async def refresh(self) -> bool:
        """User-triggered reload; the only way out of Failed."""
        return await self.load()

    # Form

    @property
    def reply_to(self) -> CommentId | None:
        return self.draft.parent_id

    def start_reply(self, comment_id: CommentId) -> None:
        self.draft.parent_id = comment_id

    def cancel_reply(self) -> None:
        self.draft.parent_id = None

    def update_field(self, field: DraftField, value: str) -> None:
        """Edit a draft field, re-validating it once it has been touched."""
        setattr(self.draft, field.value, value)
        if field in self.touched:
            self._validate_field(field)

    def blur_field(self, field: DraftField) -> None:
        """Mark a field as touched and validate it."""
        self.touched.add(field)
        self._validate_field(field)

    def _validate_field(self, field: DraftField) -> None:
        error = self.comment_service.validator.validate_field(
            field, getattr(self.draft, field.value)
        )
        if error:
            self.field_errors[field.value] = error
        else:
            self.field_errors.pop(field.value, None)

    def reset_form(self) -> None:
        self.draft = CommentDraft()
        self.field_errors = {}
        self.touched = set()

    @property
    def can_submit(self) -> bool:
        return self.gate.can_submit()

    @property
    def remaining_cooldown(self) -> int:
        return self.gate.remaining_cooldown()

    # Submission

    async def submit(self) -> SubmitOutcome:
        """Submit the current draft.

        Rate-limited or invalid drafts never reach the store and leave the
        phase unchanged. A failed create keeps the draft and leaves cache and
        gate untouched. A successful create records the submission, clears
        the form and reloads comments.
        """
        if self.phase not in _SUBMITTABLE_PHASES:
            return SubmitOutcome.BUSY

        try:
            self.gate.check()
        except RateLimitError as e:
            self.notice = Notice(
                level=NoticeLevel.ERROR,
                message=f"Please wait {format_remaining(e.remaining_ms)} before commenting again.",
            )
            return SubmitOutcome.RATE_LIMITED

        try:
            self.comment_service.validate(self.draft)
        except ValidationError as e:
            self.field_errors = e.field_errors
            self.touched = set(DraftField)
            self.notice = Notice(level=NoticeLevel.ERROR, message=INVALID_FORM_MESSAGE)
            return SubmitOutcome.INVALID

        previous_phase = self.phase
        self.phase = SessionPhase.SUBMITTING
        try:
            await self.comment_service.create_comment(self.post_key, self.draft)
        except RemoteWriteError as e:
            logfire.warn("Comment submit failed", post_key=self.post_key, reason=e.reason)
            self.phase = previous_phase
            self.notice = Notice(level=NoticeLevel.ERROR, message=SUBMIT_FAILED_MESSAGE)
            return SubmitOutcome.FAILED

        # Only after the store confirmed the comment
        self.gate.record_submission()
        self.reset_form()
        self.notice = Notice(level=NoticeLevel.SUCCESS, message=SUBMITTED_MESSAGE)
        self.phase = previous_phase
        await self.load()
        return SubmitOutcome.CREATED

    # Presentation

    def thread_view(self, max_depth: int | None = None) -> list[CommentView]:
        """Display nodes for the current threads.

        Args:
            max_depth: Reply depth cap, defaults to the session's setting
        """
        depth = self.max_display_depth if max_depth is None else max_depth
        return render_thread(self.threads, depth)


class CommentSessionFactory:
    """Opens a fresh session per post view."""

    def __init__(
        self,
        comment_service: CommentService,
        gate: SubmissionGate,
        max_display_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.comment_service = comment_service
        self.gate = gate
        self.max_display_depth = max_display_depth

    def open(self, post_key: PostKey) -> CommentSession:
        return CommentSession(
            post_key=post_key,
            comment_service=self.comment_service,
            gate=self.gate,
            max_display_depth=self.max_display_depth,
        )
