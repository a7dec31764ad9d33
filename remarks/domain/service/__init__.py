"""Domain services."""

from .avatar import avatar_url, gravatar_url, initial_avatar_url
from .base import Service
from .cache import CacheEntry, CommentCache
from .comment_service import CommentService
from .comment_tree import count_nodes, organize_comments, walk
from .sanitizer import Sanitizer
from .submission_gate import RATE_LIMIT_WINDOW_MS, SubmissionGate, format_remaining
from .validation import CommentValidator

__all__ = [
    "CacheEntry",
    "CommentCache",
    "CommentService",
    "CommentValidator",
    "RATE_LIMIT_WINDOW_MS",
    "Sanitizer",
    "Service",
    "SubmissionGate",
    "avatar_url",
    "count_nodes",
    "format_remaining",
    "gravatar_url",
    "initial_avatar_url",
    "organize_comments",
    "walk",
]
