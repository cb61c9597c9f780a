"""
Tests for log redaction and logging setup.
"""
import logging

import pytest

from ideaspark.core.logging_config import (
    LOG_FILE_NAME,
    REDACTED,
    RedactingFilter,
    sanitize_log_data,
    setup_logging,
)


def make_record(msg, *args):
    return logging.LogRecord("ideaspark.test", logging.INFO, __file__, 1, msg, args, None)


def test_sanitize_redacts_credentials_only():
    data = {"email": "writer@example.com", "password": "hunter22", "fullName": "Test Writer"}

    assert sanitize_log_data(data) == {
        "email": "writer@example.com",
        "password": REDACTED,
        "fullName": "Test Writer",
    }


def test_sanitize_keeps_keywords():
    data = {"mainKeyword": "sustainable fashion", "trendingKeywords": "thrift haul"}

    assert sanitize_log_data(data) == data


def test_sanitize_nested_structures():
    data = {"user": {"id": 1, "token": "abc"}, "headers": [{"Authorization": "Bearer abc"}]}

    assert sanitize_log_data(data) == {
        "user": {"id": 1, "token": REDACTED},
        "headers": [{"Authorization": REDACTED}],
    }


def test_sanitize_does_not_mutate_input():
    data = {"password": "hunter22"}
    sanitize_log_data(data)

    assert data == {"password": "hunter22"}


def test_filter_scrubs_bearer_token_from_args(token_service):
    token = token_service.create_access_token(user_id=1, email="writer@example.com")
    record = make_record("Header was %s", f"Bearer {token}")

    assert RedactingFilter().filter(record) is True
    assert token not in record.getMessage()
    assert REDACTED in record.getMessage()


def test_filter_scrubs_bare_jwt(token_service):
    token = token_service.create_access_token(user_id=1, email="writer@example.com")
    record = make_record(f"Issued {token} for user 1")

    RedactingFilter().filter(record)

    assert record.getMessage() == f"Issued {REDACTED} for user 1"


def test_filter_leaves_plain_messages_alone():
    record = make_record("Generated content ideas: parsed=%d", 5)

    RedactingFilter().filter(record)

    assert record.msg == "Generated content ideas: parsed=%d"
    assert record.getMessage() == "Generated content ideas: parsed=5"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_redacted_file(tmp_path, restore_root_logger):
    log_dir = tmp_path / "logs"
    setup_logging("debug", str(log_dir))

    logging.getLogger("ideaspark.test").info("Authorization: Bearer abc.def.ghi")
    for handler in logging.getLogger().handlers:
        handler.flush()

    contents = (log_dir / LOG_FILE_NAME).read_text()
    assert "abc.def.ghi" not in contents
    assert f"Bearer {REDACTED}" in contents
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("openai").level == logging.WARNING


def test_setup_logging_unknown_level_defaults_to_info(tmp_path, restore_root_logger):
    setup_logging("chatty", str(tmp_path))

    assert logging.getLogger().level == logging.INFO
