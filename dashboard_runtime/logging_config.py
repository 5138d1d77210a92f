"""Structured JSON logging shared by the store, the API and the scripts."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Modules log through logging.getLogger(__name__); these package loggers own the handler.
APP_LOGGERS = ("tickets", "analytics", "dashboard_runtime")


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Later calls only adjust the level, so the handler is never duplicated.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    if any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(levelname)s %(name)s %(message)s %(asctime)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def configure_logging(level: str = "INFO") -> None:
    for name in APP_LOGGERS:
        get_logger(name, level)
