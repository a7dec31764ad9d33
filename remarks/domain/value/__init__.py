"""Domain value objects for the comment core."""

from remarks.domain.value.identifiers import CommentId, PostKey
from remarks.domain.value.types import (
    DraftField,
    Notice,
    NoticeLevel,
    SessionPhase,
    SubmitOutcome,
)

__all__ = [
    # Identifiers
    "CommentId",
    "PostKey",
    # Types
    "DraftField",
    "Notice",
    "NoticeLevel",
    "SessionPhase",
    "SubmitOutcome",
]
