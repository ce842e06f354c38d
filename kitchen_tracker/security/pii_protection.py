"""
PII Protection and Structured Logging

Configures structlog on top of the standard logging module and masks
bearer tokens, one-time passcodes and email addresses before anything
is rendered.
"""

import logging
import logging.handlers
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import structlog


@dataclass
class PIIPattern:
    """PII pattern definition"""

    name: str
    pattern: str
    replacement: str


DEFAULT_PATTERNS = [
    PIIPattern(
        name="bearer_token",
        pattern=r"(?i)bearer\s+[A-Za-z0-9\-._~+/]+=*",
        replacement="Bearer {{TOKEN}}",
    ),
    PIIPattern(
        name="email",
        pattern=r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b",
        replacement="{{EMAIL}}",
    ),
]

SENSITIVE_FIELDS = {"token", "auth_token", "authorization", "otp", "code", "password"}


class PIIDetector:
    """Regex-based masking of sensitive values."""

    def __init__(self, patterns: Optional[List[PIIPattern]] = None):
        self.patterns = patterns or DEFAULT_PATTERNS
        self._compiled = [(re.compile(p.pattern), p.replacement) for p in self.patterns]

    def mask_pii(self, text: str) -> str:
        for regex, replacement in self._compiled:
            text = regex.sub(replacement, text)
        return text

    def is_sensitive_field(self, field_name: str) -> bool:
        return field_name.lower() in SENSITIVE_FIELDS

    def clean(self, value: Any, key: Optional[str] = None) -> Any:
        """Recursively mask a log value."""
        if key is not None and self.is_sensitive_field(key):
            return "{{REDACTED}}"
        if isinstance(value, str):
            return self.mask_pii(value)
        if isinstance(value, dict):
            return {k: self.clean(v, k) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self.clean(item) for item in value]
        return value


def redact_event(detector: PIIDetector):
    """Build a structlog processor that masks every key of an event dict."""

    def processor(logger, method_name, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        return {key: detector.clean(value, key) for key, value in event_dict.items()}

    return processor


_INSTALLED_MARK = "_kitchen_tracker_handler"


def add_service_context(service_name: str, environment: str):
    """Build a structlog processor that stamps service and environment."""

    def processor(logger, method_name, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def _install(root: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _INSTALLED_MARK, True)
    root.addHandler(handler)


def _remove_installed_handlers(root: logging.Logger) -> None:
    """Detach and close handlers added by an earlier configuration."""
    for handler in list(root.handlers):
        if getattr(handler, _INSTALLED_MARK, False):
            root.removeHandler(handler)
            handler.close()


class StructuredLogger:
    """Structured logging setup with PII protection"""

    def __init__(
        self,
        service_name: str = "kitchen_tracker",
        log_level: Optional[str] = None,
        log_file: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.service_name = service_name
        self.pii_detector = PIIDetector()
        self.environment = environment or os.getenv("APP_ENVIRONMENT", "development")
        self.log_level = (log_level or os.getenv("APP_LOG_LEVEL", "INFO")).upper()
        self.log_file = log_file
        self._setup_logging()

    def _setup_logging(self):
        """Setup structured logging with PII protection"""
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                add_service_context(self.service_name, self.environment),
                redact_event(self.pii_detector),
                structlog.processors.JSONRenderer(),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        # Reconfiguring replaces our own handlers instead of stacking them
        root = logging.getLogger()
        _remove_installed_handlers(root)
        root.setLevel(getattr(logging, self.log_level, logging.INFO))
        if not root.handlers:
            _install(root, logging.StreamHandler())

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)
            _install(
                root,
                logging.handlers.RotatingFileHandler(
                    self.log_file,
                    maxBytes=10 * 1024 * 1024,  # 10MB
                    backupCount=5,
                ),
            )

    def get_logger(self, name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
        """Get a structured logger instance"""
        return structlog.get_logger(name or self.service_name)


_structured_logger: Optional[StructuredLogger] = None


def get_structured_logger() -> StructuredLogger:
    """Get global structured logger instance"""
    global _structured_logger
    if _structured_logger is None:
        _structured_logger = StructuredLogger()
    return _structured_logger


def configure_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    environment: Optional[str] = None,
) -> StructuredLogger:
    """Reconfigure the global structured logger from application settings.

    Safe to call repeatedly; handlers from a previous call are replaced.
    """
    global _structured_logger
    _structured_logger = StructuredLogger(
        log_level=log_level, log_file=log_file, environment=environment
    )
    return _structured_logger
