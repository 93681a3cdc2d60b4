"""Configuration models."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from ..utils.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_MIN_LENGTH,
    ENV_ALPHABET,
    ENV_BLOCKLIST,
    ENV_MIN_LENGTH,
)
from ..utils.errors import ConfigurationError
from ..utils.io import load_word_list


@dataclass(frozen=True)
class SqidsOptions:
    """Encoder settings; ``blocklist=None`` selects the bundled word list."""

    alphabet: str = DEFAULT_ALPHABET
    min_length: int = DEFAULT_MIN_LENGTH
    blocklist: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SqidsOptions":
        env = os.environ if environ is None else environ

        alphabet = env.get(ENV_ALPHABET) or DEFAULT_ALPHABET

        raw_min_length = env.get(ENV_MIN_LENGTH, "").strip()
        if raw_min_length:
            try:
                min_length = int(raw_min_length)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{ENV_MIN_LENGTH} must be an integer, got {raw_min_length!r}"
                ) from exc
        else:
            min_length = DEFAULT_MIN_LENGTH

        blocklist_path = env.get(ENV_BLOCKLIST, "").strip()
        blocklist = load_word_list(Path(blocklist_path)) if blocklist_path else None

        return cls(alphabet=alphabet, min_length=min_length, blocklist=blocklist)


__all__ = ["SqidsOptions"]
