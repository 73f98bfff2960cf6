"""Tests for logging configuration and audit events."""

import json
from io import StringIO
from unittest.mock import Mock

import pytest
import structlog

from shiftswap.errors import NotFoundError
from shiftswap.logging.config import configure_logging, get_logger, log_status_change
from shiftswap.persistence.request_store import RequestStore
from shiftswap.requests.lifecycle import RequestLifecycle


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestLogStatusChange:
    """Test the standardized status-change event."""

    def setup_method(self):
        self.bound = Mock()
        self.bound.bind.return_value = self.bound
        self.logger = Mock()
        self.logger.bind.return_value = self.bound

    def test_first_review_logged_at_info(self):
        log_status_change(self.logger, "abc", "PENDING", "APPROVED")

        self.logger.bind.assert_called_once_with(
            request_id="abc",
            from_status="PENDING",
            to_status="APPROVED",
            audit_trail=True,
        )
        self.bound.info.assert_called_once_with("Status change")
        self.bound.warning.assert_not_called()

    def test_reversal_logged_at_warning(self):
        log_status_change(self.logger, "abc", "APPROVED", "DENIED")

        self.bound.warning.assert_called_once_with("Status change on reviewed request")

    def test_context_bound(self):
        log_status_change(self.logger, "abc", "PENDING", "DENIED", context={"by": "cli"})

        self.bound.bind.assert_called_once_with(context={"by": "cli"})


class TestConfigureLogging:
    """Test structlog output configuration."""

    def test_json_output(self):
        stream = StringIO()
        configure_logging(level="INFO", format_json=True, stream=stream)

        get_logger("shiftswap.test").info("hello", request_id="abc")

        entry = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert entry["event"] == "hello"
        assert entry["request_id"] == "abc"
        assert entry["level"] == "info"
        assert entry["logger"] == "shiftswap.test"
        assert "timestamp" in entry

    def test_level_filters(self):
        stream = StringIO()
        configure_logging(level="WARNING", format_json=True, stream=stream)

        get_logger("shiftswap.test").info("quiet")

        assert stream.getvalue() == ""


class TestLifecycleEvents:
    """Lifecycle operations emit audit events."""

    def test_create_and_approve_events(self, tmp_path, sample_request_args):
        with structlog.testing.capture_logs() as logs:
            lifecycle = RequestLifecycle(RequestStore(tmp_path / "requests.json"))
            request = lifecycle.create_request(**sample_request_args)
            lifecycle.approve(request.id)

        created = [e for e in logs if e["event"] == "Request created"]
        changes = [e for e in logs if e["event"] == "Status change"]
        assert created[0]["request_id"] == request.id
        assert changes[0]["to_status"] == "APPROVED"
        assert changes[0]["from_status"] == "PENDING"

    def test_not_found_warning(self, tmp_path):
        with structlog.testing.capture_logs() as logs:
            lifecycle = RequestLifecycle(RequestStore(tmp_path / "requests.json"))
            with pytest.raises(NotFoundError):
                lifecycle.deny("missing")

        assert {"event": "Request not found", "request_id": "missing", "log_level": "warning"} in logs
