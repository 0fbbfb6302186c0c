"""
Tests for the MCP server tools.

Tests cover:
- Redacting single documents
- Invalid JSON fallbacks
- Batch redaction and its size limit
- Describing the configured policy
- Invalid configuration handling
"""

import json

import pytest


@pytest.fixture
def configured_env(monkeypatch):
    """Configure the server to redact passwords and check numbers."""
    monkeypatch.setenv("JSON_REDACTOR_REDACT_NAMES", "password")
    monkeypatch.setenv(
        "JSON_REDACTOR_CONDITIONAL_RULES",
        json.dumps([{"if": "type", "is": "check", "redact": "checkNumber"}])
    )


class TestRedactJson:
    """Test suite for redact_json tool."""

    def test_redacts_document(self, configured_env):
        """Should return the redacted document."""
        from server import redact_json

        result = redact_json('{"user": "ann", "password": "hunter2"}')

        assert result["status"] == "success"
        assert result["redacted"] == '{"user":"ann","password":"[REDACTED]"}'

    def test_invalid_json_returns_mask_fallback(self, configured_env):
        """Should report the error and never echo the input by default."""
        from server import redact_json

        result = redact_json("password=hunter2")

        assert result["status"] == "error"
        assert "Invalid JSON" in result["message"]
        assert result["fallback"] == "[REDACTED]"
        assert "hunter2" not in json.dumps(result)

    def test_invalid_json_returns_input_when_configured(self, monkeypatch):
        """Should echo the input only when configured to."""
        monkeypatch.setenv("JSON_REDACTOR_ON_PARSE_ERROR", "return_input_unchanged")

        from server import redact_json

        result = redact_json("abc")

        assert result["status"] == "error"
        assert result["fallback"] == "abc"

    def test_invalid_configuration(self, monkeypatch):
        """Should report configuration errors instead of raising."""
        monkeypatch.setenv("JSON_REDACTOR_CONTAINER_POLICY", "sometimes")

        from server import redact_json

        result = redact_json("{}")

        assert result["status"] == "error"
        assert "Invalid redactor configuration" in result["message"]


class TestRedactJsonBatch:
    """Test suite for redact_json_batch tool."""

    def test_redacts_each_document(self, configured_env):
        """Should redact documents in order and count failures."""
        from server import redact_json_batch

        result = redact_json_batch([
            '{"type": "check", "checkNumber": "2468"}',
            "not json",
            '{"type": "cash", "checkNumber": "1"}',
        ])

        assert result["status"] == "success"
        assert result["count"] == 3
        assert result["failed_count"] == 1
        assert result["results"] == [
            '{"type":"check","checkNumber":"[REDACTED]"}',
            "[REDACTED]",
            '{"type":"cash","checkNumber":"1"}',
        ]

    def test_enforces_batch_limit(self):
        """Should refuse batches over the maximum size."""
        from server import MAX_BATCH_SIZE, redact_json_batch

        result = redact_json_batch(["{}"] * (MAX_BATCH_SIZE + 1))

        assert result["status"] == "error"
        assert str(MAX_BATCH_SIZE) in result["message"]


class TestDescribeRedactionPolicy:
    """Test suite for describe_redaction_policy tool."""

    def test_describes_configured_policy(self, configured_env):
        """Should return the active configuration."""
        from server import describe_redaction_policy

        result = describe_redaction_policy()

        assert result["status"] == "success"
        policy = result["policy"]
        assert policy["mask"] == "[REDACTED]"
        assert policy["redact_names"] == ["password"]
        assert policy["conditional_rules"] == [
            {"if": "type", "is": "check", "redact": "checkNumber"}
        ]
        assert policy["container_policy"] == "mask_whole_container"
        assert policy["on_parse_error"] == "return_mask"
        assert policy["comparison"] == "ordinal_ignore_case"
        assert policy["formatting"] == "compressed"
        assert policy["profiles"] == []

    def test_lists_profiles(self, monkeypatch):
        """Should list merged profiles."""
        monkeypatch.setenv("JSON_REDACTOR_PROFILES", "us_global")

        from server import describe_redaction_policy

        result = describe_redaction_policy()

        assert result["policy"]["profiles"] == ["us_global"]
        assert "socialSecurityNumber" in result["policy"]["redact_names"]
