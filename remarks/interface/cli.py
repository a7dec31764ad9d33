"""Command-line view of a post's comment thread."""

import argparse
import asyncio
import sys

import logfire

from remarks.application.usecase.comment import CommentSessionFactory, CommentView
from remarks.config import Settings
from remarks.domain.value import PostKey, SessionPhase
from remarks.util.di import build_container
from remarks.util.logging import setup_logging
from remarks.util.observability import configure_logfire, instrument_httpx

INDENT = "    "


def format_thread(views: list[CommentView], depth: int = 0) -> list[str]:
    """Render view nodes as indented text lines."""
    lines: list[str] = []
    for view in views:
        prefix = INDENT * depth
        marker = " [pinned]" if view.pinned else ""
        reply = "" if view.can_reply else " (replies closed)"
        lines.append(
            f"{prefix}{view.nickname}{marker} · {view.created_at:%Y-%m-%d %H:%M}"
            f" · #{view.comment_id[:8]}{reply}"
        )
        lines.extend(f"{prefix}  {line}" for line in view.content.splitlines())
        lines.extend(format_thread(view.replies, depth + 1))
    return lines


async def show_comments(post_key: PostKey, max_depth: int | None = None) -> int:
    """Load and print the comments of a post.

    Returns:
        Process exit code, 1 when the comments could not be loaded
    """
    container = build_container()
    try:
        factory = await container.get(CommentSessionFactory)
        session = factory.open(post_key)
        await session.mount()

        if session.phase is SessionPhase.FAILED:
            print(session.error, file=sys.stderr)
            return 1

        print(f"{session.total_count} comments on {post_key}")
        for line in format_thread(session.thread_view(max_depth)):
            print(line)
        return 0
    finally:
        await container.close()


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``remarks-show``."""
    parser = argparse.ArgumentParser(description="Print the comment thread of a post.")
    parser.add_argument("post_key", help="Slug of the post")
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Depth from which replying is shown as closed",
    )
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    try:
        return asyncio.run(show_comments(PostKey(args.post_key), args.depth))
    except Exception as e:
        logfire.error(
            "Showing comments failed",
            post_key=args.post_key,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
