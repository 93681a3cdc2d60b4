"""Blocked-word filtering and matching."""
from __future__ import annotations

import re
from typing import FrozenSet, Iterable

from ..utils.constants import MIN_BLOCKLIST_WORD_LENGTH
from ..utils.logging import get_logger

LOG = get_logger()

_DIGIT_RE = re.compile(r"\d")


def filter_blocklist(words: Iterable[str], alphabet: str) -> FrozenSet[str]:
    """Keep the lower-cased words that could ever appear in an ID over ``alphabet``."""
    alphabet_chars = set(alphabet.lower())
    kept = set()
    dropped = 0
    for word in words:
        lowered = word.lower()
        if len(lowered) >= MIN_BLOCKLIST_WORD_LENGTH and set(lowered) <= alphabet_chars:
            kept.add(lowered)
        else:
            dropped += 1

    LOG.debug("blocklist filtered: %d kept, %d dropped", len(kept), dropped)
    return frozenset(kept)


def is_blocked_id(id_: str, blocklist: Iterable[str]) -> bool:
    """Return True when ``id_`` contains a blocked word.

    Short words and short IDs must match exactly; words with digits (leet
    speak) only match at either end of the ID; other words match anywhere.
    """
    lowered = id_.lower()
    for word in blocklist:
        if len(word) > len(lowered):
            continue
        if len(lowered) <= 3 or len(word) <= 3:
            if lowered == word:
                return True
        elif _DIGIT_RE.search(word):
            if lowered.startswith(word) or lowered.endswith(word):
                return True
        elif word in lowered:
            return True
    return False


__all__ = ["filter_blocklist", "is_blocked_id"]
