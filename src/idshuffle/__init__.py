"""Short, reversible, blocklist-aware IDs for sequences of non-negative integers."""
from __future__ import annotations

from .domain.models import SqidsOptions
from .sqids import Sqids
from .utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH
from .utils.errors import (
    ConfigurationError,
    GenerationExhaustedError,
    SqidsError,
    ValueOutOfRangeError,
)
from .utils.io import load_default_blocklist, load_word_list

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_MIN_LENGTH",
    "ConfigurationError",
    "GenerationExhaustedError",
    "Sqids",
    "SqidsError",
    "SqidsOptions",
    "ValueOutOfRangeError",
    "load_default_blocklist",
    "load_word_list",
]
