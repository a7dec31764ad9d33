"""Display model of a comment thread."""

from datetime import datetime

from pydantic import BaseModel

from remarks.domain.model import CommentWithReplies
from remarks.domain.service import avatar_url

DEFAULT_MAX_DEPTH = 3


class CommentView(BaseModel):
    """Comment node prepared for display.

    Recursive structure mirroring the reply tree. ``can_reply`` turns off
    below the display depth cap; the nodes themselves are never dropped.
    """

    comment_id: str
    nickname: str
    content: str
    website: str | None
    avatar_url: str
    pinned: bool
    created_at: datetime
    depth: int
    can_reply: bool
    replies: list["CommentView"]

    @classmethod
    def from_domain(
        cls, node: CommentWithReplies, depth: int = 0, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> "CommentView":
        """Convert a tree node to a view node, recursing into replies.

        Args:
            node: Tree node from the tree builder
            depth: Nesting level of ``node`` (roots are 0)
            max_depth: Depth from which replying is disabled

        Returns:
            View node with replies converted recursively
        """
        comment = node.comment
        return cls(
            comment_id=str(comment.id),
            nickname=comment.nickname,
            content=comment.content,
            website=comment.website,
            avatar_url=avatar_url(comment.email, comment.nickname),
            pinned=comment.pinned,
            created_at=comment.created_at,
            depth=depth,
            can_reply=depth < max_depth,
            replies=[
                cls.from_domain(reply, depth + 1, max_depth) for reply in node.replies
            ],
        )


def render_thread(
    roots: list[CommentWithReplies], max_depth: int = DEFAULT_MAX_DEPTH
) -> list[CommentView]:
    """Convert a reply forest into display nodes."""
    return [CommentView.from_domain(root, 0, max_depth) for root in roots]
