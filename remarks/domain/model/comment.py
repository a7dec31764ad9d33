"""Comment entities.

Comments are threaded remarks under a blog post. The store keeps them
flat; each comment may name the comment it replies to through
``parent_id`` and the nested structure is rebuilt on every load.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from remarks.domain.model.common import DomainModel
from remarks.domain.value import CommentId, PostKey

NICKNAME_MAX_LENGTH = 50
CONTENT_MIN_LENGTH = 5
CONTENT_MAX_LENGTH = 5000


class Comment(DomainModel):
    """Comment entity as returned by the store.

    Threading is managed through ``parent_id``: ``None`` marks a top-level
    comment. A ``parent_id`` that does not match any comment fetched for
    the same post is rendered as top-level too.
    """

    id: CommentId
    post_key: PostKey
    content: str
    nickname: str
    email: Optional[str] = None
    website: Optional[str] = None
    parent_id: Optional[CommentId] = None
    pinned: bool = False
    created_at: datetime


class NewComment(DomainModel):
    """Sanitized payload for creating a comment."""

    post_key: PostKey
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    nickname: str = Field(min_length=1, max_length=NICKNAME_MAX_LENGTH)
    email: Optional[str] = None
    website: Optional[str] = None
    parent_id: Optional[CommentId] = None
    ip: str = "unknown"
    user_agent: str = "unknown"


class CommentPage(DomainModel):
    """One page of a post's comments."""

    items: list[Comment]
    page: int = Field(ge=1)
    per_page: int = Field(ge=1)
    total_items: int = Field(ge=0)
    total_pages: int = Field(ge=0)


@dataclass
class CommentWithReplies:
    """A comment and its direct replies, in display order.

    View-only: built fresh by the tree builder on every load and never
    edited by consumers.
    """

    comment: Comment
    replies: list["CommentWithReplies"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id


@dataclass
class CommentDraft:
    """Raw comment form input, before sanitization."""

    nickname: str = ""
    email: str = ""
    website: str = ""
    content: str = ""
    parent_id: CommentId | None = None
