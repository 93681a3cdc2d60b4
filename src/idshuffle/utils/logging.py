"""Logging utilities."""
from __future__ import annotations

import logging

LOGGER_NAME = "idshuffle"

# applications decide where records go; stay silent until they do
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
