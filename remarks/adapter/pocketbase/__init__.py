"""PocketBase adapter."""

from .client import PocketBaseCommentStore, post_filter

__all__ = ["PocketBaseCommentStore", "post_filter"]
