"""Shared defaults for the encoder."""
from __future__ import annotations

import sys
from pathlib import Path

# url-safe characters
DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_MIN_LENGTH = 0

# prefix, partition and separator are reserved; two digits must remain
MIN_ALPHABET_LENGTH = 5
MIN_BLOCKLIST_WORD_LENGTH = 3

MIN_VALUE = 0
MAX_VALUE = sys.maxsize

BLOCKLIST_JSON_PATH = Path(__file__).resolve().parents[1] / "data" / "blocklist.json"

ENV_ALPHABET = "IDSHUFFLE_ALPHABET"
ENV_MIN_LENGTH = "IDSHUFFLE_MIN_LENGTH"
ENV_BLOCKLIST = "IDSHUFFLE_BLOCKLIST"
