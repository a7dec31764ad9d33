"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

from remarks.domain.model import Comment
from remarks.domain.value import CommentId, PostKey

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_comment(
    comment_id: str,
    parent_id: str | None = None,
    post_key: str = "hello-world",
    minutes: int = 0,
    pinned: bool = False,
    content: str = "A thoughtful remark",
    nickname: str = "reader",
    email: str | None = None,
) -> Comment:
    """Helper function to build comments for tests.

    Args:
        comment_id: Comment id
        parent_id: Id of the comment replied to, if any
        post_key: Post the comment belongs to
        minutes: Creation time offset from a fixed base time
        pinned: Whether the comment is pinned
        content: Comment body
        nickname: Commenter nickname
        email: Commenter email

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(comment_id),
        post_key=PostKey(post_key),
        content=content,
        nickname=nickname,
        email=email,
        parent_id=CommentId(parent_id) if parent_id else None,
        pinned=pinned,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
