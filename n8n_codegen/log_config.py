"""Logging setup shared by stdlib and structlog loggers."""

import logging
import sys
from typing import Union

import structlog


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Send all log output to stderr so generated code on stdout stays clean."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
