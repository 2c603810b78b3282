"""Tests for the package logger."""

import logging

import pytest

from hawkular.logger import logger, setup_logger


@pytest.fixture
def restore_level():
    yield
    setup_logger()


def test_logger_does_not_propagate():
    assert logger.name == "hawkular"
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_setup_logger_updates_existing_handler(restore_level):
    """Calling setup_logger again changes the level instead of adding handlers."""
    setup_logger(logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.DEBUG
