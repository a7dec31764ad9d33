"""In-memory comment store for testing."""

import math
from datetime import datetime, timezone
from uuid import uuid4

from remarks.domain.error import CommentStoreError
from remarks.domain.model import Comment, CommentPage, NewComment
from remarks.domain.repository import CommentStore
from remarks.domain.value import CommentId, PostKey


class InMemoryCommentStore(CommentStore):
    """In-memory implementation of CommentStore for testing.

    Counts calls so tests can assert whether the store was reached, and can
    be told to fail reads or writes.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self.list_calls: int = 0
        self.create_calls: int = 0
        self.fail_reads: bool = False
        self.fail_writes: bool = False

    def add(self, comment: Comment) -> Comment:
        """Seed a comment directly, bypassing call counters."""
        self._comments[comment.id] = comment
        return comment

    def _sorted(self, post_key: PostKey) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.post_key == post_key]
        # Pinned first, then newest first
        comments.sort(key=lambda c: (c.pinned, c.created_at), reverse=True)
        return comments

    async def list_page(
        self,
        post_key: PostKey,
        page: int = 1,
        per_page: int = 20,
    ) -> CommentPage:
        if self.fail_reads:
            raise CommentStoreError("Store unavailable")
        comments = self._sorted(post_key)
        start = (page - 1) * per_page
        return CommentPage(
            items=comments[start : start + per_page],
            page=page,
            per_page=per_page,
            total_items=len(comments),
            total_pages=math.ceil(len(comments) / per_page),
        )

    async def list(self, post_key: PostKey) -> list[Comment]:
        self.list_calls += 1
        if self.fail_reads:
            raise CommentStoreError("Store unavailable")
        return self._sorted(post_key)

    async def create(self, payload: NewComment) -> Comment:
        self.create_calls += 1
        if self.fail_writes:
            raise CommentStoreError("Store rejected the comment", status_code=400)
        comment = Comment(
            id=CommentId(uuid4().hex[:15]),
            post_key=payload.post_key,
            content=payload.content,
            nickname=payload.nickname,
            email=payload.email,
            website=payload.website,
            parent_id=payload.parent_id,
            pinned=False,
            created_at=datetime.now(timezone.utc),
        )
        self._comments[comment.id] = comment
        return comment
