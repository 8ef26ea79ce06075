"""Tests for the logging configuration."""

import logging

from src.oxysound.logging_config import disable_debug, enable_debug, get_logger, logger


def test_default_logger_configuration():
    """Test the default logger configuration."""
    assert logger.name == "oxysound"
    assert not logger.propagate

    # Check handler configuration
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)

    # Check formatter configuration
    formatter = handler.formatter
    assert formatter._fmt == "%(asctime)s - %(levelname)s - %(message)s"
    assert formatter.datefmt == "%Y-%m-%d %H:%M:%S"


def test_enable_debug():
    """Test enabling debug logging."""
    logger.setLevel(logging.INFO)
    logger.handlers[0].setLevel(logging.INFO)

    enable_debug()

    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
    disable_debug()


def test_disable_debug():
    """Test disabling debug logging."""
    logger.setLevel(logging.DEBUG)
    logger.handlers[0].setLevel(logging.DEBUG)

    disable_debug()

    assert logger.level == logging.INFO
    assert logger.handlers[0].level == logging.INFO


def test_get_logger_default():
    assert get_logger() is logger


def test_get_logger_names():
    """Test module loggers end up under the package logger."""
    assert get_logger("oxysound.api").name == "oxysound.api"
    assert get_logger("src.oxysound.api").name == "oxysound.api"
    assert get_logger("custom").name == "oxysound.custom"
    assert get_logger("oxysound") is logger
