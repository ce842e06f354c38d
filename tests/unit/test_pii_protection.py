"""
Unit tests for log redaction
"""

import logging
import logging.handlers

import pytest

from kitchen_tracker.security.pii_protection import (
    PIIDetector,
    add_service_context,
    configure_logging,
    redact_event,
)


@pytest.fixture
def detector():
    return PIIDetector()


@pytest.mark.unit
class TestPIIProtection:
    """Masking of tokens, passcodes and addresses"""

    def test_email_masked(self, detector):
        assert detector.mask_pii("OTP sent to chef@gmail.com") == "OTP sent to {{EMAIL}}"

    def test_bearer_token_masked(self, detector):
        masked = detector.mask_pii("Authorization: Bearer abc.def-123")
        assert "abc.def-123" not in masked
        assert "Bearer {{TOKEN}}" in masked

    def test_sensitive_fields_redacted(self, detector):
        cleaned = detector.clean({"otp": "123456", "token": "tok", "status_code": 401})

        assert cleaned == {"otp": "{{REDACTED}}", "token": "{{REDACTED}}", "status_code": 401}

    def test_nested_values(self, detector):
        cleaned = detector.clean({"payload": {"email": "chef@gmail.com", "items": ["a@gmail.com"]}})

        assert cleaned["payload"]["email"] == "{{EMAIL}}"
        assert cleaned["payload"]["items"] == ["{{EMAIL}}"]

    def test_processor(self, detector):
        processor = redact_event(detector)
        event = processor(None, "info", {"event": "Login for chef@gmail.com", "code": "000111"})

        assert event == {"event": "Login for {{EMAIL}}", "code": "{{REDACTED}}"}


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    for handler in before:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.unit
class TestLoggingConfiguration:
    """Handler setup when the app reconfigures logging"""

    def _file_handlers(self, root):
        return [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]

    def test_repeated_configuration_keeps_one_file_handler(self, restore_root_handlers, tmp_path):
        log_file = tmp_path / "logs" / "app.log"

        configure_logging(log_file=str(log_file))
        configure_logging(log_file=str(log_file))

        handlers = self._file_handlers(restore_root_handlers)
        assert len(handlers) == 1
        assert handlers[0].baseFilename == str(log_file)
        assert log_file.parent.is_dir()

    def test_reconfigure_without_file_removes_file_handler(self, restore_root_handlers, tmp_path):
        configure_logging(log_file=str(tmp_path / "app.log"))
        configure_logging()

        assert self._file_handlers(restore_root_handlers) == []

    def test_log_level_applied(self, restore_root_handlers):
        configure_logging(log_level="warning")
        assert restore_root_handlers.level == logging.WARNING

    def test_service_context_processor(self):
        processor = add_service_context("kitchen_tracker", "production")

        event = processor(None, "info", {"event": "started"})
        assert event["service"] == "kitchen_tracker"
        assert event["environment"] == "production"

        explicit = processor(None, "info", {"event": "x", "environment": "test"})
        assert explicit["environment"] == "test"
