"""Mapping between PocketBase comment records and domain models.

PocketBase stores unset text fields as empty strings and names fields in
camelCase; the domain uses None and snake_case.
"""

from datetime import datetime
from typing import Any, Dict

from remarks.domain.model import Comment, NewComment
from remarks.domain.value import CommentId, PostKey


def _optional(value: Any) -> Any:
    return value or None


def _parse_created(value: str) -> datetime:
    # PocketBase uses "2024-01-01 12:00:00.000Z"
    return datetime.fromisoformat(value.replace(" ", "T").replace("Z", "+00:00"))


def record_to_comment(record: Dict[str, Any]) -> Comment:
    """Convert a PocketBase record to a Comment domain model.

    Args:
        record: Record JSON as returned by the records API

    Returns:
        Comment domain model

    Raises:
        TypeError: If the record is not a JSON object
    """
    if not isinstance(record, dict):
        raise TypeError(f"Expected a record object, got {type(record).__name__}")

    parent_id = _optional(record.get("parentId"))
    return Comment(
        id=CommentId(record["id"]),
        post_key=PostKey(record["postSlug"]),
        content=record.get("content", ""),
        nickname=record.get("nickname", ""),
        email=_optional(record.get("email")),
        website=_optional(record.get("website")),
        parent_id=CommentId(parent_id) if parent_id else None,
        pinned=bool(record.get("pinned", False)),
        created_at=_parse_created(record["created"]),
    )


def new_comment_to_record(payload: NewComment) -> Dict[str, Any]:
    """Convert a create payload to the PocketBase record body.

    Args:
        payload: Sanitized comment payload

    Returns:
        JSON body for the create request, optional fields omitted when unset
    """
    body: Dict[str, Any] = {
        "postSlug": payload.post_key,
        "content": payload.content,
        "nickname": payload.nickname,
        "ip": payload.ip,
        "userAgent": payload.user_agent,
    }
    if payload.email:
        body["email"] = payload.email
    if payload.website:
        body["website"] = payload.website
    if payload.parent_id:
        body["parentId"] = payload.parent_id
    return body
