"""Unit tests for CommentValidator."""

import pytest

from remarks.domain.error import ValidationError
from remarks.domain.model import CommentDraft
from remarks.domain.service import CommentValidator, Sanitizer
from remarks.domain.value import DraftField


@pytest.fixture
def validator():
    return CommentValidator(sanitizer=Sanitizer())


def valid_draft(**overrides) -> CommentDraft:
    fields = {
        "nickname": "Jane",
        "email": "jane@example.com",
        "website": "https://jane.example.com",
        "content": "Great post, thanks!",
    }
    fields.update(overrides)
    return CommentDraft(**fields)


class TestFieldValidation:
    """Tests for individual field validators."""

    def test_nickname_required(self, validator):
        assert validator.validate_nickname("   ") == "Nickname is required"

    def test_nickname_markup_only_is_empty(self, validator):
        """A nickname consisting only of tags counts as empty."""
        assert validator.validate_nickname("<b></b>") == "Nickname is required"

    def test_nickname_too_long(self, validator):
        assert validator.validate_nickname("x" * 51) is not None
        assert validator.validate_nickname("x" * 50) is None

    def test_email_optional(self, validator):
        assert validator.validate_email("") is None

    @pytest.mark.parametrize("email", ["jane", "jane@", "jane@example", "a b@c.d"])
    def test_email_malformed(self, validator, email):
        assert validator.validate_email(email) == "Email address is not valid"

    def test_website_optional(self, validator):
        assert validator.validate_website("") is None

    def test_website_must_be_web_url(self, validator):
        assert validator.validate_website("javascript:alert(1)") is not None
        assert validator.validate_website("https://example.com") is None

    def test_content_required(self, validator):
        assert validator.validate_content("") == "Comment cannot be empty"

    def test_content_minimum_length(self, validator):
        assert (
            validator.validate_content("abcd")
            == "Comment must be at least 5 characters"
        )
        assert validator.validate_content("abcde") is None

    def test_content_measured_after_sanitizing(self, validator):
        """Script payloads do not count towards the length."""
        assert validator.validate_content("<script>long payload</script>hi") is not None

    def test_content_maximum_length(self, validator):
        assert validator.validate_content("x" * 5001) is not None

    def test_validate_field_dispatches(self, validator):
        assert validator.validate_field(DraftField.NICKNAME, "") == "Nickname is required"
        assert validator.validate_field(DraftField.CONTENT, "Hello there") is None


class TestDraftValidation:
    """Tests for collect_errors and check."""

    def test_valid_draft_has_no_errors(self, validator):
        assert validator.collect_errors(valid_draft()) == {}
        validator.check(valid_draft())

    def test_every_failing_field_reported(self, validator):
        """All failing fields are returned at once."""
        draft = valid_draft(nickname="", email="nope", content="hi")

        errors = validator.collect_errors(draft)

        assert set(errors) == {"nickname", "email", "content"}

    def test_check_raises_validation_error(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.check(valid_draft(content=""))

        assert exc_info.value.field_errors == {"content": "Comment cannot be empty"}
