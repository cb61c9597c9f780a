"""
Logging configuration for IdeaSpark API.

Console and rotating-file output. Credentials never reach either sink:
records pass through ``RedactingFilter`` and request payloads are logged via
``sanitize_log_data``.
"""
import logging
import re
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Any

LOG_FILE_NAME = "ideaspark.log"
REDACTED = "***REDACTED***"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Substrings of dict keys whose values are never logged
SENSITIVE_KEYS = ("password", "token", "secret", "api_key", "apikey", "authorization", "database_url")

# "Bearer <jwt>" headers and bare three-part JWTs
_BEARER_PATTERN = re.compile(r"(?i)\bbearer\s+[A-Za-z0-9\-_.=]+")
_JWT_PATTERN = re.compile(r"\beyJ[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+")

NOISY_LOGGERS = ("uvicorn", "uvicorn.access", "httpx", "openai", "google.generativeai")


def redact_text(text: str) -> str:
    text = _BEARER_PATTERN.sub(f"Bearer {REDACTED}", text)
    return _JWT_PATTERN.sub(REDACTED, text)


class RedactingFilter(logging.Filter):
    """Scrubs bearer tokens and JWTs out of the rendered message."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        scrubbed = redact_text(message)
        if scrubbed != message:
            record.msg = scrubbed
            record.args = None
        return True


def _build_handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    handler.addFilter(RedactingFilter())
    return handler


def setup_logging(log_level: str = "INFO", log_dir: str = "logs"):
    """
    Configure application logging.

    Args:
        log_level: Logging level name; unknown names fall back to INFO
        log_dir: Directory for the rotating log file, created if missing
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    root.addHandler(_build_handler(logging.StreamHandler(sys.stdout), level, CONSOLE_FORMAT))
    root.addHandler(_build_handler(
        RotatingFileHandler(log_path / LOG_FILE_NAME, maxBytes=10 * 1024 * 1024, backupCount=5),
        level,
        FILE_FORMAT,
    ))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _is_sensitive(key: Any) -> bool:
    lowered = str(key).lower()
    return any(sensitive in lowered for sensitive in SENSITIVE_KEYS)


def sanitize_log_data(data: Any) -> Any:
    """
    Copy of ``data`` with credential values replaced, nested dicts and lists included.

    Keys are matched by substring, so ``password``, ``fullName`` and
    ``mainKeyword`` behave as expected: only the first is redacted.
    """
    if isinstance(data, dict):
        return {
            key: REDACTED if _is_sensitive(key) else sanitize_log_data(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [sanitize_log_data(item) for item in data]
    if isinstance(data, str):
        return redact_text(data)
    return data
