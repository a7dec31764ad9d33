"""Domain value objects for the comment core.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from remarks.domain.value.common import ValueObject


class SessionPhase(str, Enum):
    """Lifecycle phase of a comment session for one post view."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
    SUBMITTING = "submitting"


class SubmitOutcome(str, Enum):
    """Result of a submit attempt."""

    CREATED = "created"
    RATE_LIMITED = "rate_limited"
    INVALID = "invalid"
    FAILED = "failed"
    BUSY = "busy"


class DraftField(str, Enum):
    """Editable fields of the comment form."""

    NICKNAME = "nickname"
    EMAIL = "email"
    WEBSITE = "website"
    CONTENT = "content"


class NoticeLevel(str, Enum):
    """Severity of a user-facing notice."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


class Notice(ValueObject):
    """Transient message surfaced to the user (a toast)."""

    level: NoticeLevel
    message: str
