"""In-process cache of comment lists per post."""

from dataclasses import dataclass

import logfire
from cachetools import TTLCache

from remarks.domain.model import Comment
from remarks.domain.repository import Clock
from remarks.domain.value import PostKey

from .base import Service

DEFAULT_FRESHNESS_WINDOW_MS = 5 * 60 * 1000


@dataclass(frozen=True)
class CacheEntry:
    """Comments fetched for a post and when they were fetched."""

    comments: tuple[Comment, ...]
    fetched_at: int


class CommentCache(Service):
    """Time-bounded memoization of "all comments for post X".

    An entry is served while ``now - fetched_at`` is below the freshness
    window. Stale entries are never returned and are replaced by the next
    ``put``. All methods run to completion without awaiting, so no entry is
    ever observed half-written.
    """

    def __init__(
        self,
        clock: Clock,
        freshness_window_ms: int = DEFAULT_FRESHNESS_WINDOW_MS,
        max_posts: int = 128,
    ) -> None:
        """Initialize comment cache.

        Args:
            clock: Time source, also used as the cache timer
            freshness_window_ms: How long an entry stays fresh
            max_posts: Maximum number of posts held at once
        """
        self.clock = clock
        self.freshness_window_ms = freshness_window_ms
        self._entries: TTLCache[PostKey, CacheEntry] = TTLCache(
            maxsize=max_posts,
            ttl=freshness_window_ms,
            timer=clock,
        )

    def get(self, post_key: PostKey) -> list[Comment] | None:
        """Return cached comments for a post, or None on a miss."""
        entry = self._entries.get(post_key)
        if entry is None:
            logfire.debug("Comment cache miss", post_key=post_key)
            return None
        logfire.debug(
            "Comment cache hit",
            post_key=post_key,
            age_ms=self.clock.now_ms() - entry.fetched_at,
        )
        return list(entry.comments)

    def put(self, post_key: PostKey, comments: list[Comment]) -> None:
        """Replace the entry for a post, stamped with the current time."""
        self._entries[post_key] = CacheEntry(
            comments=tuple(comments),
            fetched_at=self.clock.now_ms(),
        )

    def invalidate(self, post_key: PostKey) -> None:
        """Drop the entry for a post. No-op when absent."""
        if self._entries.pop(post_key, None) is not None:
            logfire.info("Comment cache invalidated", post_key=post_key)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
