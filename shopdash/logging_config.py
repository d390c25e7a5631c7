"""Structured logger setup shared by the analysis modules."""

import logging

from pythonjsonlogger.json import JsonFormatter

from shopdash.settings import settings


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Aggregations run on every dashboard refresh, so only diagnostics
    (orphaned orders, records outside the chart window) are logged.
    """
    logger = logging.getLogger(f"shopdash.{name}")
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.propagate = False
    return logger
