"""Word-list loading helpers."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Tuple

from .constants import BLOCKLIST_JSON_PATH
from .errors import ConfigurationError
from .logging import get_logger

LOG = get_logger()


def load_word_list(path: Path) -> Tuple[str, ...]:
    """Read a word list from a JSON array or a plain text file.

    Plain text files hold one word per line; blank lines and lines starting
    with ``#`` are ignored.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read word list {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in word list {path}: {exc}") from exc
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise ConfigurationError(f"Word list {path} must be a JSON array of strings")
        words = tuple(data)
    else:
        words = tuple(
            line.strip()
            for line in text.splitlines()
            if line.strip() and not line.lstrip().startswith("#")
        )

    LOG.debug("loaded %d words from %s", len(words), path)
    return words


@lru_cache(maxsize=1)
def load_default_blocklist() -> Tuple[str, ...]:
    return load_word_list(BLOCKLIST_JSON_PATH)
