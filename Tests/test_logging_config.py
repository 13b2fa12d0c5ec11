"""Tests for loguru sink configuration."""

import logging

from loguru import logger

from shared_pages.config import AppSettings
from shared_pages.Logging_Config import configure_application_logging


def test_file_sink_receives_loguru_and_stdlib_records(isolated_temp_dir, restore_loguru):
    log_file = isolated_temp_dir / "app.log"
    settings = AppSettings()
    settings.logging.log_level = "debug"

    assert configure_application_logging(settings, log_file=log_file) == log_file

    logger.debug("from loguru")
    logging.getLogger("some.library").warning("from stdlib")
    logger.remove()

    contents = log_file.read_text(encoding="utf-8")
    assert "from loguru" in contents
    assert "from stdlib" in contents


def test_level_filters_records(isolated_temp_dir, restore_loguru):
    log_file = isolated_temp_dir / "app.log"
    settings = AppSettings()
    settings.logging.log_level = "WARNING"

    configure_application_logging(settings, log_file=log_file)
    logger.info("quiet")
    logger.warning("loud")
    logger.remove()

    contents = log_file.read_text(encoding="utf-8")
    assert "quiet" not in contents
    assert "loud" in contents


def test_file_logging_can_be_disabled(isolated_temp_dir, restore_loguru):
    settings = AppSettings()
    settings.logging.log_to_file = False

    assert configure_application_logging(settings) is None
    assert list(isolated_temp_dir.iterdir()) == []
