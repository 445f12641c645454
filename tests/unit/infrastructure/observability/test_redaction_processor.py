"""Unit tests for the log redaction processor: zero I/O."""

from gitlab_annotator.infrastructure.observability import redact_dict, redact_text
from gitlab_annotator.infrastructure.observability.redaction_processor import (
    redaction_processor,
)


class TestRedactText:
    def test_gitlab_personal_token(self) -> None:
        assert redact_text("token glpat-AbC_123-xyz used") == "token [REDACTED] used"

    def test_private_token_header(self) -> None:
        assert redact_text("Private-Token: s3cr3t") == "Private-Token: [REDACTED]"

    def test_bearer(self) -> None:
        assert redact_text("Authorization: Bearer abc.def") == "Authorization: Bearer [REDACTED]"

    def test_plain_text_untouched(self) -> None:
        assert redact_text("Placed 3 comments on !7") == "Placed 3 comments on !7"


class TestRedactDict:
    def test_sensitive_keys_masked(self) -> None:
        assert redact_dict({"PRIVATE-TOKEN": "x", "mr_iid": 7}) == {
            "PRIVATE-TOKEN": "[REDACTED]",
            "mr_iid": 7,
        }

    def test_nested_values(self) -> None:
        event = {"headers": {"Authorization": "Bearer z"}, "errors": ["glpat-abc"]}

        assert redact_dict(event) == {
            "headers": {"Authorization": "[REDACTED]"},
            "errors": ["[REDACTED]"],
        }

    def test_processor_redacts_event_dict(self) -> None:
        event = {"event": "Request failed with glpat-leak", "level": "error"}

        assert redaction_processor(None, "error", event) == {
            "event": "Request failed with [REDACTED]",
            "level": "error",
        }
