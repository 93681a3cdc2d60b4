"""Construction-time validation of the alphabet and minimum length."""
from __future__ import annotations

from ..utils.constants import MIN_ALPHABET_LENGTH
from ..utils.errors import ConfigurationError


def validate_alphabet(alphabet: object) -> str:
    if not isinstance(alphabet, str):
        raise ConfigurationError(f"Alphabet must be a string, got {type(alphabet).__name__}")

    # every character must fit in a single byte
    if len(alphabet.encode("utf-8")) != len(alphabet):
        raise ConfigurationError("Alphabet cannot contain multibyte characters")

    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise ConfigurationError(f"Alphabet length must be at least {MIN_ALPHABET_LENGTH}")

    if len(set(alphabet)) != len(alphabet):
        raise ConfigurationError("Alphabet must contain unique characters")

    return alphabet


def validate_min_length(min_length: object, alphabet: str) -> int:
    upper = len(alphabet)
    if isinstance(min_length, bool) or not isinstance(min_length, int):
        raise ConfigurationError(f"Minimum length has to be an integer between 0 and {upper}")
    if not 0 <= min_length <= upper:
        raise ConfigurationError(f"Minimum length has to be between 0 and {upper}")
    return min_length


__all__ = ["validate_alphabet", "validate_min_length"]
