"""PocketBase comment store client.

Talks to the PocketBase records API of the comments collection:

    GET  /api/collections/<collection>/records?filter=...&sort=...&page=...
    POST /api/collections/<collection>/records
"""

import math

import httpx
import logfire

from remarks.adapter.pocketbase.mapper import new_comment_to_record, record_to_comment
from remarks.domain.error import CommentStoreError
from remarks.domain.model import Comment, CommentPage, NewComment
from remarks.domain.repository import CommentStore
from remarks.domain.value import PostKey

# Pinned comments first, then newest first
COMMENT_SORT = "-pinned,-created"


def post_filter(post_key: PostKey) -> str:
    """PocketBase filter expression selecting one post's comments."""
    escaped = post_key.replace("\\", "\\\\").replace('"', '\\"')
    return f'postSlug = "{escaped}"'


class PocketBaseCommentStore(CommentStore):
    """Comment store backed by a PocketBase collection.

    Every transport error, non-2xx response or malformed record is raised
    as ``CommentStoreError``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        records_url: str,
        page_size: int = 200,
    ) -> None:
        """Initialize PocketBase store.

        Args:
            client: Shared HTTP client
            records_url: Full URL of the collection's records endpoint
            page_size: Batch size used by ``list``
        """
        self.client = client
        self.records_url = records_url
        self.page_size = page_size

    async def _request(self, method: str, **kwargs) -> dict:
        try:
            response = await self.client.request(method, self.records_url, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise CommentStoreError(
                f"PocketBase returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise CommentStoreError(f"PocketBase request failed: {e}") from e
        except ValueError as e:
            raise CommentStoreError("PocketBase returned invalid JSON") from e

    async def list_page(
        self,
        post_key: PostKey,
        page: int = 1,
        per_page: int = 20,
    ) -> CommentPage:
        """Fetch one page of comments for a post."""
        data = await self._request(
            "GET",
            params={
                "page": page,
                "perPage": per_page,
                "filter": post_filter(post_key),
                "sort": COMMENT_SORT,
            },
        )
        try:
            items = [record_to_comment(record) for record in data["items"]]
            total_items = int(data.get("totalItems", len(items)))
            total_pages = int(
                data.get("totalPages", math.ceil(total_items / per_page))
            )
        except (KeyError, TypeError, ValueError) as e:
            raise CommentStoreError(f"Malformed comment page: {e}") from e

        return CommentPage(
            items=items,
            page=page,
            per_page=per_page,
            total_items=total_items,
            total_pages=total_pages,
        )

    async def list(self, post_key: PostKey) -> list[Comment]:
        """Fetch every comment for a post by walking all pages."""
        with logfire.span("pocketbase.list_comments", post_key=post_key):
            comments: list[Comment] = []
            page = 1
            while True:
                result = await self.list_page(post_key, page, self.page_size)
                comments.extend(result.items)
                if not result.items or page >= result.total_pages:
                    break
                page += 1

            logfire.info(
                "Fetched comments from PocketBase",
                post_key=post_key,
                count=len(comments),
                pages=page,
            )
            return comments

    async def create(self, payload: NewComment) -> Comment:
        """Create a comment record."""
        with logfire.span("pocketbase.create_comment", post_key=payload.post_key):
            data = await self._request("POST", json=new_comment_to_record(payload))
            try:
                comment = record_to_comment(data)
            except (KeyError, TypeError, ValueError) as e:
                raise CommentStoreError(f"Malformed created record: {e}") from e

            logfire.info("Comment record created", comment_id=comment.id)
            return comment
