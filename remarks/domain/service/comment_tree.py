"""Threading of flat comment lists into reply trees."""

from collections.abc import Iterable, Iterator

from remarks.domain.model import Comment, CommentWithReplies
from remarks.domain.value import CommentId


def organize_comments(comments: Iterable[Comment]) -> list[CommentWithReplies]:
    """Build the reply forest for a flat list of comments.

    Algorithm:
    1. Create a node with an empty reply list for every comment
    2. Attach each comment to its parent's replies when the parent is in
       the input, otherwise add it to the roots

    Input order is kept for roots and within every reply list. A comment
    replying to an id that is not in the input becomes a root, so partial
    comment sets still render every comment. Parents are assumed to have
    been created before their replies, so no cycle check is made.

    Args:
        comments: Flat list of comments for one post

    Returns:
        Root nodes, each carrying its nested replies
    """
    comments = list(comments)
    nodes: dict[CommentId, CommentWithReplies] = {
        comment.id: CommentWithReplies(comment=comment) for comment in comments
    }

    roots: list[CommentWithReplies] = []
    for comment in comments:
        node = nodes[comment.id]
        parent = nodes.get(comment.parent_id) if comment.parent_id else None
        if parent is not None:
            parent.replies.append(node)
        else:
            roots.append(node)
    return roots


def walk(roots: Iterable[CommentWithReplies]) -> Iterator[tuple[CommentWithReplies, int]]:
    """Yield every node depth-first together with its depth (roots are 0)."""
    stack = [(node, 0) for node in reversed(list(roots))]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((reply, depth + 1) for reply in reversed(node.replies))


def count_nodes(roots: Iterable[CommentWithReplies]) -> int:
    """Count all nodes in a forest."""
    return sum(1 for _ in walk(roots))
