"""Comment store interface."""

from abc import ABC, abstractmethod

from remarks.domain.model import Comment, CommentPage, NewComment
from remarks.domain.value import PostKey


class CommentStore(ABC):
    """Remote record store holding comments keyed by post.

    Implementations live in the adapter layer. Every failure is reported
    as ``CommentStoreError``; callers do not distinguish causes.
    """

    @abstractmethod
    async def list_page(
        self,
        post_key: PostKey,
        page: int = 1,
        per_page: int = 20,
    ) -> CommentPage:
        """Fetch one page of comments for a post.

        Comments are ordered pinned first, then newest first.

        Args:
            post_key: Key of the post
            page: 1-based page number
            per_page: Page size

        Returns:
            The requested page with pagination totals
        """
        pass

    @abstractmethod
    async def list(self, post_key: PostKey) -> list[Comment]:
        """Fetch every comment for a post.

        Args:
            post_key: Key of the post

        Returns:
            All comments, pinned first, then newest first
        """
        pass

    @abstractmethod
    async def create(self, payload: NewComment) -> Comment:
        """Create a comment.

        Args:
            payload: Sanitized comment payload

        Returns:
            The created comment with id and creation time assigned by the store
        """
        pass
