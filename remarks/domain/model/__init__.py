"""Domain model entities for the comment core."""

from remarks.domain.model.comment import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    NICKNAME_MAX_LENGTH,
    Comment,
    CommentDraft,
    CommentPage,
    CommentWithReplies,
    NewComment,
)

__all__ = [
    "Comment",
    "CommentDraft",
    "CommentPage",
    "CommentWithReplies",
    "NewComment",
    "CONTENT_MAX_LENGTH",
    "CONTENT_MIN_LENGTH",
    "NICKNAME_MAX_LENGTH",
]
