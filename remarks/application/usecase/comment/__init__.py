"""Comment use cases."""

from .session import CommentSession, CommentSessionFactory
from .thread_view import CommentView, render_thread

__all__ = [
    "CommentSession",
    "CommentSessionFactory",
    "CommentView",
    "render_thread",
]
