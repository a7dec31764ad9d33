"""Comment form field validation."""

import re

from remarks.domain.error import ValidationError
from remarks.domain.model import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    NICKNAME_MAX_LENGTH,
    CommentDraft,
)
from remarks.domain.value import DraftField

from .base import Service
from .sanitizer import Sanitizer

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CommentValidator(Service):
    """Checks raw form fields against the comment field contract.

    Each ``validate_*`` method returns an error message, or None when the
    value is acceptable.
    """

    def __init__(self, sanitizer: Sanitizer) -> None:
        self.sanitizer = sanitizer

    def validate_nickname(self, nickname: str) -> str | None:
        sanitized = self.sanitizer.sanitize_text(nickname)
        if not sanitized.strip():
            return "Nickname is required"
        if len(sanitized) > NICKNAME_MAX_LENGTH:
            return f"Nickname must be at most {NICKNAME_MAX_LENGTH} characters"
        return None

    def validate_email(self, email: str) -> str | None:
        # Optional, only used for the avatar
        if not email or not email.strip():
            return None
        if not EMAIL_PATTERN.match(email):
            return "Email address is not valid"
        return None

    def validate_website(self, website: str) -> str | None:
        if not website or not website.strip():
            return None
        if not self.sanitizer.sanitize_url(website):
            return "Website must be an http or https URL"
        return None

    def validate_content(self, content: str) -> str | None:
        sanitized = self.sanitizer.sanitize_html(content)
        if not sanitized.strip():
            return "Comment cannot be empty"
        if len(sanitized) < CONTENT_MIN_LENGTH:
            return f"Comment must be at least {CONTENT_MIN_LENGTH} characters"
        if len(sanitized) > CONTENT_MAX_LENGTH:
            return f"Comment must be at most {CONTENT_MAX_LENGTH} characters"
        return None

    def validate_field(self, field: DraftField, value: str) -> str | None:
        """Validate a single form field by name."""
        validators = {
            DraftField.NICKNAME: self.validate_nickname,
            DraftField.EMAIL: self.validate_email,
            DraftField.WEBSITE: self.validate_website,
            DraftField.CONTENT: self.validate_content,
        }
        return validators[field](value)

    def collect_errors(self, draft: CommentDraft) -> dict[str, str]:
        """Validate every field of a draft.

        Returns:
            Mapping of field name to error message, empty when all pass
        """
        errors: dict[str, str] = {}
        for field in DraftField:
            error = self.validate_field(field, getattr(draft, field.value))
            if error:
                errors[field.value] = error
        return errors

    def check(self, draft: CommentDraft) -> None:
        """Validate a draft.

        Raises:
            ValidationError: If any field fails, with every failing field
        """
        errors = self.collect_errors(draft)
        if errors:
            raise ValidationError(errors)
