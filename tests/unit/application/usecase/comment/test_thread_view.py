"""Unit tests for thread view rendering."""

from remarks.application.usecase.comment import CommentView, render_thread
from remarks.domain.service import organize_comments
from tests.conftest import make_comment


class TestRenderThread:
    """Tests for render_thread."""

    def test_depth_and_reply_flags(self):
        """Depth is counted from the roots and replying closes at the cap."""
        # Arrange
        comments = [
            make_comment("root"),
            make_comment("child", parent_id="root"),
            make_comment("grandchild", parent_id="child"),
        ]

        # Act
        views = render_thread(organize_comments(comments), max_depth=1)

        # Assert
        root = views[0]
        child = root.replies[0]
        grandchild = child.replies[0]
        assert (root.depth, root.can_reply) == (0, True)
        assert (child.depth, child.can_reply) == (1, False)
        assert (grandchild.depth, grandchild.can_reply) == (2, False)

    def test_nodes_below_cap_are_kept(self):
        """Capping the depth never drops replies."""
        comments = [make_comment("c0")] + [
            make_comment(f"c{i}", parent_id=f"c{i - 1}") for i in range(1, 6)
        ]

        views = render_thread(organize_comments(comments), max_depth=0)

        count = 0
        pending = list(views)
        while pending:
            view = pending.pop()
            count += 1
            pending.extend(view.replies)
        assert count == 6

    def test_fields_copied_from_comment(self):
        """View nodes carry display fields and an avatar."""
        comment = make_comment("a", pinned=True, email="jane@example.com")

        view = CommentView.from_domain(organize_comments([comment])[0])

        assert view.comment_id == "a"
        assert view.nickname == comment.nickname
        assert view.pinned is True
        assert view.created_at == comment.created_at
        assert view.avatar_url.startswith("https://gravatar.loli.net/avatar/")

    def test_empty_forest(self):
        assert render_thread([]) == []
