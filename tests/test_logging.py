"""
Tests for structlog configuration.
Path: tests/test_logging.py
"""

import structlog

from keyfmt.utils.logging import configure_logging


def test_configure_logging_filters_below_level(capsys):
    configure_logging("warning")
    try:
        logger = structlog.get_logger()
        logger.info("keys.test.hidden")
        logger.warning("keys.test.shown", path="cache.product.book")
    finally:
        structlog.reset_defaults()

    err = capsys.readouterr().err
    assert "keys.test.shown" in err
    assert "cache.product.book" in err
    assert "keys.test.hidden" not in err
