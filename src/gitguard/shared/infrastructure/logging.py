"""
Structured logging configuration using structlog.

Hook output for the operator goes through the rich console; these logs are
diagnostics on stderr. Since the pre-commit hook reads files that may hold
credentials, every event is passed through a redactor first.
"""

import logging
import re
import sys
from typing import Any

import structlog

from gitguard.shared.infrastructure.config import settings

_REDACTIONS = {
    r"/Users/[^/\s]+": "[HOME_REDACTED]",
    r"/home/[^/\s]+": "[HOME_REDACTED]",
    r"(api[_-]?key|token|password|secret)['\"]?\s*[:=]\s*['\"]?([^'\"\s]+)": r"\1=[REDACTED]",
    r"AKIA[0-9A-Z]{16}": "[AWS_KEY_REDACTED]",
    r"sk_live_[0-9a-zA-Z]{24}": "[STRIPE_KEY_REDACTED]",
}


def redact_string(text: str) -> str:
    """Redact sensitive patterns from a string."""
    for pattern, replacement in _REDACTIONS.items():
        text = re.sub(pattern, replacement, text, flags=re.IGNORECASE)
    return text


def privacy_redactor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    structlog processor masking secrets, tokens and home directories.

    Args:
        logger: Logger instance
        method_name: Logging method name
        event_dict: Event dictionary to process

    Returns:
        Redacted event dictionary
    """
    if not settings.log_redaction_enabled:
        return event_dict

    def redact_value(value: Any) -> Any:
        if isinstance(value, str):
            return redact_string(value)
        if isinstance(value, dict):
            return {k: redact_value(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [redact_value(v) for v in value]
        return value

    return {k: redact_value(v) for k, v in event_dict.items()}


def configure_logging(stream: Any = None) -> None:
    """
    Configure structlog for the application.

    Sets up:
    - Pretty console output for development
    - JSON output for production
    - Log level from settings
    """
    if stream is None:
        stream = sys.stderr

    shared_processors: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        privacy_redactor,
    ]

    if settings.is_development:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=stream.isatty() if hasattr(stream, "isatty") else False),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, settings.log_level),
        force=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("hook_installed", hook="pre-commit")
    """
    return structlog.get_logger(name)
