"""Unit tests for CommentCache."""

from remarks.domain.service import CommentCache
from remarks.domain.value import PostKey
from tests.conftest import make_comment
from tests.di import FakeClock

WINDOW_MS = 5 * 60 * 1000


def make_cache(clock: FakeClock) -> CommentCache:
    return CommentCache(clock=clock, freshness_window_ms=WINDOW_MS)


class TestCacheFreshness:
    """Tests for the freshness window."""

    def test_empty_cache_misses(self):
        """A post never fetched is a miss."""
        cache = make_cache(FakeClock())

        assert cache.get(PostKey("hello-world")) is None

    def test_entry_served_within_window(self):
        """An entry is served until the window elapses."""
        # Arrange
        clock = FakeClock()
        cache = make_cache(clock)
        comments = [make_comment("a"), make_comment("b")]
        cache.put(PostKey("hello-world"), comments)

        # Act
        clock.advance(WINDOW_MS - 1)
        result = cache.get(PostKey("hello-world"))

        # Assert
        assert result is not None
        assert [c.id for c in result] == ["a", "b"]

    def test_entry_expires_at_window(self):
        """An entry exactly one window old is no longer served."""
        clock = FakeClock()
        cache = make_cache(clock)
        cache.put(PostKey("hello-world"), [make_comment("a")])

        clock.advance(WINDOW_MS)

        assert cache.get(PostKey("hello-world")) is None

    def test_put_restamps_entry(self):
        """Re-putting a post replaces the entry and restarts its window."""
        # Arrange
        clock = FakeClock()
        cache = make_cache(clock)
        cache.put(PostKey("hello-world"), [make_comment("a")])
        clock.advance(WINDOW_MS - 10)

        # Act
        cache.put(PostKey("hello-world"), [make_comment("b")])
        clock.advance(WINDOW_MS - 10)
        result = cache.get(PostKey("hello-world"))

        # Assert
        assert result is not None
        assert [c.id for c in result] == ["b"]

    def test_returned_list_is_a_copy(self):
        """Mutating a returned list does not change the cached entry."""
        cache = make_cache(FakeClock())
        cache.put(PostKey("hello-world"), [make_comment("a")])

        cache.get(PostKey("hello-world")).clear()

        assert len(cache.get(PostKey("hello-world"))) == 1

    def test_entries_are_per_post(self):
        """Entries for different posts do not interfere."""
        cache = make_cache(FakeClock())
        cache.put(PostKey("first"), [make_comment("a", post_key="first")])

        assert cache.get(PostKey("second")) is None
        assert cache.get(PostKey("first")) is not None


class TestCacheInvalidation:
    """Tests for invalidate and clear."""

    def test_invalidate_drops_entry(self):
        """Invalidated posts miss on the next read."""
        cache = make_cache(FakeClock())
        cache.put(PostKey("hello-world"), [make_comment("a")])
        cache.put(PostKey("other"), [make_comment("b", post_key="other")])

        cache.invalidate(PostKey("hello-world"))

        assert cache.get(PostKey("hello-world")) is None
        assert cache.get(PostKey("other")) is not None

    def test_invalidate_absent_post_is_noop(self):
        """Invalidating a post with no entry does nothing."""
        cache = make_cache(FakeClock())

        cache.invalidate(PostKey("missing"))

        assert cache.get(PostKey("missing")) is None

    def test_clear_drops_everything(self):
        """Clear removes every entry."""
        cache = make_cache(FakeClock())
        cache.put(PostKey("first"), [])
        cache.put(PostKey("second"), [])

        cache.clear()

        assert cache.get(PostKey("first")) is None
        assert cache.get(PostKey("second")) is None

    def test_empty_list_is_a_hit(self):
        """A fetched post with no comments is cached as an empty list."""
        cache = make_cache(FakeClock())
        cache.put(PostKey("quiet"), [])

        assert cache.get(PostKey("quiet")) == []
