"""Unit tests for comment threading."""

import random

from remarks.domain.service import count_nodes, organize_comments, walk
from tests.conftest import make_comment


def ids(nodes):
    return [node.id for node in nodes]


class TestOrganizeComments:
    """Tests for organize_comments."""

    def test_empty_list_returns_no_roots(self):
        """No comments should produce an empty forest."""
        assert organize_comments([]) == []

    def test_dangling_parent_becomes_root(self):
        """Replies to comments outside the input should be shown as roots."""
        comments = [
            make_comment("a"),
            make_comment("b", parent_id="a"),
            make_comment("c", parent_id="z"),
        ]

        roots = organize_comments(comments)

        assert ids(roots) == ["a", "c"]
        assert ids(roots[0].replies) == ["b"]
        assert roots[1].replies == []

    def test_replies_keep_input_order(self):
        """Siblings should appear in the order they were given."""
        comments = [
            make_comment("root"),
            make_comment("r3", parent_id="root", minutes=3),
            make_comment("r1", parent_id="root", minutes=1),
            make_comment("r2", parent_id="root", minutes=2),
        ]

        roots = organize_comments(comments)

        assert ids(roots[0].replies) == ["r3", "r1", "r2"]

    def test_reply_listed_before_parent_is_still_nested(self):
        """A reply appearing before its parent in the input is still attached."""
        comments = [
            make_comment("child", parent_id="parent"),
            make_comment("parent"),
        ]

        roots = organize_comments(comments)

        assert ids(roots) == ["parent"]
        assert ids(roots[0].replies) == ["child"]

    def test_builds_unbounded_depth(self):
        """Deep chains should not be capped."""
        comments = [make_comment("c0")] + [
            make_comment(f"c{i}", parent_id=f"c{i - 1}") for i in range(1, 10)
        ]

        roots = organize_comments(comments)

        depths = {node.id: depth for node, depth in walk(roots)}
        assert len(roots) == 1
        assert depths["c9"] == 9

    def test_every_comment_appears_exactly_once(self):
        """Node count and ids should match the input for arbitrary parent links."""
        rng = random.Random(7)
        comment_ids = [f"c{i}" for i in range(60)]
        comments = []
        for index, comment_id in enumerate(comment_ids):
            choice = rng.random()
            if choice < 0.3 or index == 0:
                parent = None
            elif choice < 0.4:
                parent = "missing"
            else:
                parent = comment_ids[rng.randrange(index)]
            comments.append(make_comment(comment_id, parent_id=parent))

        roots = organize_comments(comments)

        flattened = [node.id for node, _ in walk(roots)]
        assert count_nodes(roots) == len(comments)
        assert sorted(flattened) == sorted(comment_ids)

        by_id = {node.id: node for node, _ in walk(roots)}
        for comment in comments:
            if comment.parent_id in by_id:
                siblings = [
                    c.id for c in comments if c.parent_id == comment.parent_id
                ]
                assert ids(by_id[comment.parent_id].replies) == siblings
            else:
                assert comment.id in ids(roots)

    def test_does_not_mutate_input(self):
        """Input comments should be carried unchanged into the nodes."""
        comment = make_comment("a")

        roots = organize_comments([comment])

        assert roots[0].comment is comment


class TestWalk:
    """Tests for depth-first traversal."""

    def test_walk_is_depth_first_in_display_order(self):
        """Traversal should follow display order with depths."""
        comments = [
            make_comment("a"),
            make_comment("b"),
            make_comment("a1", parent_id="a"),
            make_comment("a1x", parent_id="a1"),
            make_comment("a2", parent_id="a"),
        ]

        visited = [(node.id, depth) for node, depth in walk(organize_comments(comments))]

        assert visited == [("a", 0), ("a1", 1), ("a1x", 2), ("a2", 1), ("b", 0)]
