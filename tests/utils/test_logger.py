"""Tests for the structured logger singleton"""

import io

import pytest

from models.enums import LogCategory, LogLevel
from utils.logger import Logger, configure_logger, get_category_logger, get_logger


@pytest.fixture
def restore_logger():
    logger = get_logger()
    saved = (logger.min_level, logger.use_colors, logger.stream)
    yield logger
    logger.min_level, logger.use_colors, logger.stream = saved


def test_singleton(restore_logger):
    original = get_logger()
    configure_logger(LogLevel.DEBUG)
    assert get_logger() is original
    assert get_logger().min_level == LogLevel.DEBUG


def test_output_format():
    stream = io.StringIO()
    logger = Logger(use_colors=False, stream=stream)
    logger.info(LogCategory.CANVAS, "Canvas dimensions recalculated", width=608, height=1080)

    lines = stream.getvalue().splitlines()
    assert "CANVAS" in lines[0]
    assert lines[0].endswith("Canvas dimensions recalculated")
    assert lines[1].strip() == "├─ width: 608"
    assert lines[2].strip() == "└─ height: 1080"


def test_min_level_filters():
    stream = io.StringIO()
    logger = Logger(min_level=LogLevel.WARN, use_colors=False, stream=stream)
    logger.info(LogCategory.STATE, "hidden")
    logger.warn(LogCategory.STATE, "shown")
    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()


def test_bound_logger_follows_configuration(restore_logger):
    stream = io.StringIO()
    log = get_category_logger(LogCategory.ANIMATION)
    configure_logger(LogLevel.INFO, use_colors=False, stream=stream)

    log.info("Spring evaluated")
    log.with_category(LogCategory.CONFIG).error("Broken")

    output = stream.getvalue()
    assert "ANIMATION" in output
    assert "CONFIG" in output
