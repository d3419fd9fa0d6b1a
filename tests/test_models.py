"""Tests for crud-fields data models."""

import pytest
from pydantic import ValidationError

from crud_fields.models.uploads import UploadedFile
from crud_fields.models.violations import RuleViolation, ValidationReport


RULES = {
    "title": ["required", "min:3", "max:255"],
    "status": ["required", "in:draft,live"],
}


class TestUploadedFile:
    """Tests for UploadedFile model."""

    def test_from_path(self):
        """Test building a handle from a stored path."""
        upload = UploadedFile.from_path("uploads\\2024\\report.pdf", size=10)
        assert upload.filename == "report.pdf"
        assert upload.content_type == "application/pdf"
        assert upload.extension == "pdf"
        assert str(upload) == "uploads\\2024\\report.pdf"

    def test_negative_size(self):
        """Test that sizes cannot be negative."""
        with pytest.raises(ValidationError):
            UploadedFile(path="a.txt", filename="a.txt", size=-1)


class TestRuleViolation:
    """Tests for RuleViolation model."""

    def test_rule_name(self):
        """Test that the rule name drops parameters."""
        violation = RuleViolation(field="title", rule="min:3", message="Too short.")
        assert violation.rule_name == "min"
        assert RuleViolation(field="code", rule="regex:/^a,b$/", message="x").rule_name == "regex"

    def test_missing_message(self):
        """Test that every violation carries a message."""
        with pytest.raises(ValidationError):
            RuleViolation(field="title", rule="required")


class TestValidationReport:
    """Tests for ValidationReport model."""

    def test_passed(self):
        """Test an empty report."""
        report = ValidationReport()
        assert report.passed
        assert report.to_messages() == {}

    def test_parse_validator_output(self):
        """Test loading a report from plain validator output."""
        report = ValidationReport.model_validate({
            "violations": [{"field": "title", "rule": "required", "message": "Required."}],
        })
        assert not report.passed
        assert report.for_field("title")[0].rule == "required"
        assert report.for_field("status") == []

    def test_messages_keep_report_order_without_rules(self):
        """Test grouping in the order the validator reported."""
        report = ValidationReport(violations=[
            RuleViolation(field="status", rule="in:draft,live", message="Invalid status."),
            RuleViolation(field="title", rule="min:3", message="Too short."),
            RuleViolation(field="title", rule="required", message="Required."),
        ])
        messages = report.to_messages()
        assert list(messages) == ["status", "title"]
        assert messages["title"] == ["Too short.", "Required."]

    def test_messages_follow_declared_order(self):
        """Test ordering by field order and declared rule order."""
        report = ValidationReport(violations=[
            RuleViolation(field="status", rule="in:draft,live", message="Invalid status."),
            RuleViolation(field="title", rule="max:255", message="Too long."),
            RuleViolation(field="title", rule="required", message="Required."),
        ])
        messages = report.to_messages(RULES)
        assert list(messages) == ["title", "status"]
        assert messages["title"] == ["Required.", "Too long."]

    def test_undeclared_entries_come_last(self):
        """Test that unknown fields and rules keep report order after declared ones."""
        report = ValidationReport(violations=[
            RuleViolation(field="slug", rule="unique", message="Taken."),
            RuleViolation(field="title", rule="alpha", message="Letters only."),
            RuleViolation(field="title", rule="min:3", message="Too short."),
        ])
        messages = report.to_messages(RULES)
        assert list(messages) == ["title", "slug"]
        assert messages["title"] == ["Too short.", "Letters only."]

    def test_undeclared(self):
        """Test spotting violations of rules no field declares."""
        report = ValidationReport(violations=[
            RuleViolation(field="title", rule="min:5", message="Too short."),
            RuleViolation(field="title", rule="alpha", message="Letters only."),
            RuleViolation(field="slug", rule="required", message="Required."),
        ])
        undeclared = report.undeclared(RULES)
        assert [(v.field, v.rule) for v in undeclared] == [("title", "alpha"), ("slug", "required")]
