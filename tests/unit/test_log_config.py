"""
Tests for n8n_codegen.log_config.
"""

import logging

import structlog

from n8n_codegen.log_config import configure_logging


def test_structlog_events_reach_stdlib_logging(caplog):
    configure_logging(logging.WARNING)
    try:
        with caplog.at_level(logging.WARNING):
            structlog.get_logger("n8n_codegen.test").warning("something_happened", key="value")
            structlog.get_logger("n8n_codegen.test").debug("hidden_event")
    finally:
        structlog.reset_defaults()

    assert "event='something_happened'" in caplog.text
    assert "key='value'" in caplog.text
    assert "hidden_event" not in caplog.text
