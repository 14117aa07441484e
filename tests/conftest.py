"""Shared fixtures for the simple_bank test suite"""

import logging

import pytest

from simple_bank.config import reload_config


class _RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _capture(name):
    logger = logging.getLogger(name)
    handler = _RecordingHandler()
    old_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger, handler, old_level


@pytest.fixture
def operation_logs():
    """Records emitted by simple_bank.operations during the test"""
    logger, handler, old_level = _capture("simple_bank.operations")
    yield handler.records
    logger.removeHandler(handler)
    logger.setLevel(old_level)


@pytest.fixture
def account_logs():
    """Records emitted by simple_bank.accounts during the test"""
    logger, handler, old_level = _capture("simple_bank.accounts")
    yield handler.records
    logger.removeHandler(handler)
    logger.setLevel(old_level)


@pytest.fixture
def fresh_config(monkeypatch):
    """Reload configuration from the (monkeypatched) environment, restore afterwards"""
    yield reload_config
    monkeypatch.undo()
    reload_config()
