from __future__ import annotations

import logging

from utils.logger import get_logger, setup_logger


def test_setup_logger_does_not_stack_handlers():
    name = "trendscope.tests.stack"
    logger = setup_logger(name, use_rich=False)
    again = setup_logger(name, use_rich=False)

    assert logger is again
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_get_logger_configures_on_first_use():
    logger = get_logger("trendscope.tests.rich")
    assert logger.handlers
    assert logger.level == logging.INFO


def test_setup_logger_without_name_configures_root():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        logger = setup_logger(level=logging.DEBUG, use_rich=False)

        assert logger is root
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("intelligence.pipeline").getEffectiveLevel() == logging.DEBUG
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
