"""Exception hierarchy shared across the encoder."""
from __future__ import annotations


class SqidsError(Exception):
    """Base class for all encoder failures."""


class ConfigurationError(SqidsError, ValueError):
    pass


class ValueOutOfRangeError(SqidsError, ValueError):
    pass


class GenerationExhaustedError(SqidsError, RuntimeError):
    pass
