from pathlib import Path

import pytest

from idshuffle.utils.errors import ConfigurationError
from idshuffle.utils.io import load_default_blocklist, load_word_list


def test_load_json_word_list(tmp_path: Path) -> None:
    path = tmp_path / "words.json"
    path.write_text('["alpha", "beta"]', encoding="utf-8")

    assert load_word_list(path) == ("alpha", "beta")


def test_load_text_word_list_skips_comments(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("alpha\n  # note\n\n beta \n", encoding="utf-8")

    assert load_word_list(path) == ("alpha", "beta")


def test_json_word_list_must_hold_strings(tmp_path: Path) -> None:
    path = tmp_path / "words.json"
    path.write_text('{"alpha": 1}', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="array of strings"):
        load_word_list(path)


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "words.json"
    path.write_text("[alpha", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        load_word_list(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_word_list(tmp_path / "missing.txt")


def test_default_blocklist_is_bundled() -> None:
    words = load_default_blocklist()

    assert "sexy" in words
    assert all(word == word.lower() and len(word) >= 3 for word in words)
    assert load_default_blocklist() is words
