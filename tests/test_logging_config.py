"""
Logging setup tests
Run with: pytest tests/test_logging_config.py -v
"""
import logging

from app.config.logging_config import SensitiveDataFilter, setup_logging


def make_record(msg):
    return logging.LogRecord("app.test", logging.INFO, __file__, 1, msg, None, None)


class TestSensitiveDataFilter:
    """Test password redaction"""

    def test_password_redacted(self):
        record = make_record("login attempt email=o@x.com password=hunter2")
        assert SensitiveDataFilter().filter(record) is True
        assert record.msg == "login attempt email=o@x.com password=[REDACTED]"

    def test_hashed_password_and_json_style_redacted(self):
        record = make_record('{"hashed_password": "$2b$12$abc", "name": "oussama"}')
        SensitiveDataFilter().filter(record)
        assert "$2b$12$abc" not in record.msg
        assert '"name": "oussama"' in record.msg

    def test_plain_message_untouched(self):
        record = make_record("Company created: id=1 name=META")
        SensitiveDataFilter().filter(record)
        assert record.msg == "Company created: id=1 name=META"


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    setup_logging("DEBUG")
    assert logger.name == "app"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False
