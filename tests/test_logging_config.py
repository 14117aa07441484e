"""
Test suite for structured logging helpers
"""

import io
import json
import logging

from simple_bank.logging_config import JSONFormatter, setup_logging, get_logger, log_action


class TestJSONFormatter:

    def test_structured_fields(self):
        logger = logging.getLogger("test.formatter")
        record = logger.makeRecord("test.formatter", logging.INFO, __name__, 42, "Test message", (), None)
        record.action = "deposit"
        record.resource = "account:A1"
        record.extra = {"amount": "USD 1.00"}

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "test.formatter"
        assert entry["message"] == "Test message"
        assert entry["action"] == "deposit"
        assert entry["resource"] == "account:A1"
        assert entry["extra"] == {"amount": "USD 1.00"}
        assert "timestamp" in entry

    def test_missing_fields_omitted(self):
        record = logging.getLogger("test.formatter").makeRecord(
            "test.formatter", logging.WARNING, __name__, 1, "Plain", (), None
        )
        entry = json.loads(JSONFormatter().format(record))
        assert "action" not in entry
        assert "extra" not in entry


class TestSetupLogging:

    def _stream_of(self, logger):
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)
        return stream

    def test_json_setup(self):
        logger = setup_logging("WARNING", "test.setup.json")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.WARNING
        assert not logger.propagate

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging("INFO", "test.setup.repeat")
        logger = setup_logging("INFO", "test.setup.repeat")
        assert len(logger.handlers) == 1

    def test_text_format(self):
        logger = setup_logging("INFO", "test.setup.text", log_format="text")
        stream = self._stream_of(logger)

        logger.info("hello")
        assert "INFO test.setup.text: hello" in stream.getvalue()

    def test_log_action_respects_level(self):
        logger = setup_logging("WARNING", "test.setup.level")
        stream = self._stream_of(logger)

        log_action(logger, "info", "quiet", action="deposit")
        assert stream.getvalue() == ""

        log_action(logger, "warning", "loud", action="withdraw",
                   resource="account:C1", extra={"reason": "OVERDRAFT_LIMIT_EXCEEDED"})
        entry = json.loads(stream.getvalue())
        assert entry["message"] == "loud"
        assert entry["action"] == "withdraw"
        assert entry["extra"]["reason"] == "OVERDRAFT_LIMIT_EXCEEDED"

    def test_get_logger(self):
        assert get_logger("simple_bank.operations").name == "simple_bank.operations"
        assert get_logger().name == "simple_bank"
