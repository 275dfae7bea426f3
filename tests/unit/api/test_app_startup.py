"""Tests for logging setup."""

import logging

from loguru import logger

from src.pet_registry.api.utils.app_startup import InterceptHandler, configure_logging
from src.pet_registry.runtime.config.config_data import ConfigData
from src.pet_registry.runtime.context import with_context


def test_configure_logging_creates_file_sink(tmp_path):
    log_file = tmp_path / "logs" / "pets.log"
    override = ConfigData()
    override.logging.file = str(log_file)
    override.logging.format = "json"

    try:
        with with_context(override):
            configure_logging()
            logger.info("pet registered")
            logger.complete()

        assert log_file.exists()
    finally:
        configure_logging()


def test_stdlib_logging_is_intercepted():
    configure_logging()

    assert any(isinstance(h, InterceptHandler) for h in logging.getLogger().handlers)


def test_stdlib_records_forwarded_to_loguru():
    messages = []
    configure_logging()
    sink_id = logger.add(messages.append, format="{message}")
    try:
        logging.getLogger("tests.stdlib").warning("from stdlib")
    finally:
        logger.remove(sink_id)

    assert any("from stdlib" in m for m in messages)
