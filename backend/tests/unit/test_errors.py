"""Formatting of validation errors into per-field messages."""
import pytest
from pydantic import ValidationError

from projecthub.http.errors import field_errors, validation_error_payload
from projecthub.schemas import ProjectCreate


def _errors_for(payload):
    with pytest.raises(ValidationError) as exc_info:
        ProjectCreate.model_validate(payload)
    return field_errors(exc_info.value)


class TestFieldErrors:

    def test_missing_name_and_status(self):
        assert _errors_for({}) == {
            "name": ["The name field is required."],
            "status": ["The status field is required."],
        }

    def test_blank_name_counts_as_missing(self):
        assert _errors_for({"name": "  ", "status": "active"}) == {
            "name": ["The name field is required."],
        }

    def test_null_name_counts_as_missing(self):
        assert _errors_for({"name": None, "status": "active"}) == {
            "name": ["The name field is required."],
        }

    def test_null_status_counts_as_missing(self):
        assert _errors_for({"name": "ok", "status": None}) == {
            "status": ["The status field is required."],
        }

    def test_too_long_name(self):
        assert _errors_for({"name": "a" * 300, "status": "active"}) == {
            "name": ["The name field must not be greater than 255 characters."],
        }

    def test_unknown_status(self):
        assert _errors_for({"name": "ok", "status": "ACTIVE!"}) == {
            "status": ["The selected status is invalid."],
        }

    def test_non_string_description(self):
        errors = _errors_for({"name": "ok", "status": "active", "description": 12})
        assert errors == {"description": ["The description field must be a string."]}


class TestValidationErrorPayload:

    def test_single_error_summary(self):
        payload = validation_error_payload({"status": ["The selected status is invalid."]})

        assert payload["message"] == "The selected status is invalid."
        assert payload["errors"] == {"status": ["The selected status is invalid."]}

    def test_summary_counts_remaining_errors(self):
        payload = validation_error_payload({
            "name": ["The name field is required."],
            "status": ["The status field is required."],
        })

        assert payload["message"] == "The name field is required. (and 1 more error)"
