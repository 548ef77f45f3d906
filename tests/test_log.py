"""Tests for logger implementations."""

import logging

import pytest

from mqconfig import NOP_LOGGER, Logger, NopLogger, StdLogger

LOGGER_NAME = "tests.mqconfig"


class TestStdLogger:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(StdLogger(), Logger)

    def test_info_joins_args(self, caplog: pytest.LogCaptureFixture) -> None:
        log = StdLogger(logging.getLogger(LOGGER_NAME))
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log.info("connected to", "kafka-1", 9092)
        assert caplog.records[0].getMessage() == "connected to kafka-1 9092"
        assert caplog.records[0].levelno == logging.INFO

    def test_warn_maps_to_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        log = StdLogger(logging.getLogger(LOGGER_NAME))
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            log.warn("slow")
        assert caplog.records[0].levelno == logging.WARNING

    def test_errorf_formats(self, caplog: pytest.LogCaptureFixture) -> None:
        log = StdLogger(logging.getLogger(LOGGER_NAME))
        with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
            log.errorf("failed on %s after %d tries", "orders", 3)
            log.error("plain", "error")
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["failed on orders after 3 tries", "plain error"]
        assert all(r.levelno == logging.ERROR for r in caplog.records)

    def test_infof_formats(self, caplog: pytest.LogCaptureFixture) -> None:
        log = StdLogger(logging.getLogger(LOGGER_NAME))
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log.infof("%d messages", 5)
        assert caplog.records[0].getMessage() == "5 messages"

    def test_default_logger_name(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="mqconfig"):
            StdLogger().info("hello")
        assert caplog.records[0].name == "mqconfig"


class TestNopLogger:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(NOP_LOGGER, Logger)

    def test_discards(self, caplog: pytest.LogCaptureFixture) -> None:
        log = NopLogger()
        with caplog.at_level(logging.DEBUG):
            log.info("a")
            log.warn("b")
            log.error("c")
            log.errorf("%s", "d")
            log.infof("%s", "e")
        assert caplog.records == []
