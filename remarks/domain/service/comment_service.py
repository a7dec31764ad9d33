"""Comment domain service."""

import logfire

from remarks.domain.error import CommentStoreError, RemoteReadError, RemoteWriteError
from remarks.domain.model import Comment, CommentDraft, NewComment
from remarks.domain.repository import CommentStore
from remarks.domain.value import PostKey

from .base import Service
from .cache import CommentCache
from .sanitizer import Sanitizer
from .validation import CommentValidator


class CommentService(Service):
    """Domain service for reading and creating comments.

    Reads go through the cache; a successful create invalidates the cache
    entry of the post before returning, so the next read hits the store.
    """

    def __init__(
        self,
        comment_store: CommentStore,
        cache: CommentCache,
        sanitizer: Sanitizer,
        validator: CommentValidator,
        user_agent: str = "unknown",
    ) -> None:
        """Initialize comment service.

        Args:
            comment_store: Remote comment store
            cache: Shared comment cache
            sanitizer: Input sanitizer
            validator: Form field validator
            user_agent: User agent recorded with created comments
        """
        self.comment_store = comment_store
        self.cache = cache
        self.sanitizer = sanitizer
        self.validator = validator
        self.user_agent = user_agent

    async def get_comments(self, post_key: PostKey) -> list[Comment]:
        """Get all comments for a post, from the cache when fresh.

        Args:
            post_key: Post key

        Returns:
            Flat list of comments, pinned first then newest first

        Raises:
            RemoteReadError: If the store could not be read
        """
        with logfire.span("comment_service.get_comments", post_key=post_key):
            cached = self.cache.get(post_key)
            if cached is not None:
                logfire.info(
                    "Comments served from cache", post_key=post_key, count=len(cached)
                )
                return cached

            try:
                comments = await self.comment_store.list(post_key)
            except CommentStoreError as e:
                logfire.error(
                    "Failed to fetch comments", post_key=post_key, error=str(e)
                )
                raise RemoteReadError(post_key, str(e)) from e

            self.cache.put(post_key, comments)
            logfire.info(
                "Comments retrieved for post", post_key=post_key, count=len(comments)
            )
            return comments

    def validate(self, draft: CommentDraft) -> None:
        """Validate a draft without touching the store.

        Raises:
            ValidationError: If any field fails
        """
        self.validator.check(draft)

    def build_payload(
        self, post_key: PostKey, draft: CommentDraft, ip: str = "unknown"
    ) -> NewComment:
        """Sanitize a draft into a create payload."""
        return NewComment(
            post_key=post_key,
            content=self.sanitizer.sanitize_html(draft.content),
            nickname=self.sanitizer.sanitize_text(draft.nickname).strip(),
            email=self.sanitizer.sanitize_text(draft.email).strip() or None,
            website=self.sanitizer.sanitize_url(draft.website) or None,
            parent_id=draft.parent_id or None,
            ip=ip,
            user_agent=self.user_agent,
        )

    async def create_comment(
        self, post_key: PostKey, draft: CommentDraft, ip: str = "unknown"
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        Args:
            post_key: Post key
            draft: Raw form input
            ip: Submitter address recorded with the comment

        Returns:
            Created comment

        Raises:
            ValidationError: If the draft fails the field contract
            RemoteWriteError: If the store rejected the comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_key=post_key,
            parent_id=draft.parent_id,
        ):
            self.validator.check(draft)
            payload = self.build_payload(post_key, draft, ip=ip)

            try:
                comment = await self.comment_store.create(payload)
            except CommentStoreError as e:
                logfire.error(
                    "Failed to create comment", post_key=post_key, error=str(e)
                )
                raise RemoteWriteError(post_key, str(e)) from e

            # Next read for this post must see the new comment
            self.cache.invalidate(post_key)

            logfire.info(
                "Comment created",
                comment_id=comment.id,
                post_key=post_key,
                parent_id=comment.parent_id,
            )
            return comment
