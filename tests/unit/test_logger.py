"""Unit tests for get_logger."""

import logging

import pytest

from profile_readme.config import LOG_LEVEL
from profile_readme.utils.logger import get_logger


@pytest.mark.unit
def test_handler_added_once():
    first = get_logger("profile_readme.tests.once")
    second = get_logger("profile_readme.tests.once")

    assert first is second
    assert len(first.handlers) == 1


@pytest.mark.unit
def test_default_level_from_config():
    logger = get_logger("profile_readme.tests.default_level")

    assert logger.level == logging.getLevelName(LOG_LEVEL)


@pytest.mark.unit
def test_explicit_level_overrides_default():
    logger = get_logger("profile_readme.tests.explicit_level", logging.DEBUG)

    assert logger.level == logging.DEBUG
