"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """One or more comment form fields fail the local contract.

    Never reaches the store; reported inline per field.
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid comment fields: {fields}")


class RateLimitError(DomainError):
    """Raised when the submission gate is still cooling down."""

    def __init__(self, remaining_ms: int):
        self.remaining_ms = remaining_ms
        super().__init__(f"Submission rate limited for another {remaining_ms}ms")


class RemoteReadError(DomainError):
    """Raised when comments for a post could not be fetched."""

    def __init__(self, post_key: str, reason: str):
        self.post_key = post_key
        self.reason = reason
        super().__init__(f"Failed to load comments for {post_key}: {reason}")


class RemoteWriteError(DomainError):
    """Raised when the store rejected or failed to create a comment."""

    def __init__(self, post_key: str, reason: str):
        self.post_key = post_key
        self.reason = reason
        super().__init__(f"Failed to create comment on {post_key}: {reason}")


class CommentStoreError(DomainError):
    """The comment store failed or returned an unusable response.

    Raised by ``CommentStore`` implementations; the comment service turns
    it into ``RemoteReadError`` or ``RemoteWriteError``.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
