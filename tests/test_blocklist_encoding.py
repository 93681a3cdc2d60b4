"""Blocklist behaviour of the public encoder."""
from itertools import product

import pytest

from idshuffle import GenerationExhaustedError, Sqids


def test_default_blocklist_is_used_when_none_given() -> None:
    sqids = Sqids()

    assert sqids.decode("sexy") == [200044]
    assert sqids.encode([200044]) == "d171vI"


def test_empty_blocklist_disables_blocking() -> None:
    sqids = Sqids(blocklist=[])

    assert sqids.decode("sexy") == [200044]
    assert sqids.encode([200044]) == "sexy"


def test_custom_blocklist_replaces_default() -> None:
    sqids = Sqids(blocklist={"AvTg"})

    assert sqids.decode("sexy") == [200044]
    assert sqids.encode([200044]) == "sexy"

    assert sqids.decode("AvTg") == [100000]
    assert sqids.encode([100000]) == "7T1X8k"
    assert sqids.decode("7T1X8k") == [100000]


def test_successive_blocked_results() -> None:
    sqids = Sqids(
        blocklist=[
            "8QRLaD",  # first encoding of [1, 2, 3]
            "7T1cd0dL",  # second attempt
            "UeIe",  # substring of the third attempt, RA8UeIe7
            "imhw",  # suffix of the fourth attempt, WM3Limhw
            "LfUQ",  # prefix of the fifth attempt, LfUQh4HN
        ]
    )

    assert sqids.encode([1, 2, 3]) == "TM0x1Mxz"
    assert sqids.decode("TM0x1Mxz") == [1, 2, 3]


@pytest.mark.parametrize("id_", ["8QRLaD", "7T1cd0dL", "RA8UeIe7", "WM3Limhw", "LfUQh4HN"])
def test_decoding_blocked_ids_still_works(id_: str) -> None:
    sqids = Sqids(blocklist=["8QRLaD", "7T1cd0dL", "RA8UeIe7", "WM3Limhw", "LfUQh4HN"])

    assert sqids.decode(id_) == [1, 2, 3]


def test_match_against_short_blocked_word() -> None:
    assert Sqids(blocklist=[]).encode([1000]) == "pPQ"

    sqids = Sqids(blocklist=["pPQ"])

    assert sqids.encode([1000]) == "3nqzK"
    assert sqids.decode("3nqzK") == [1000]


def test_blocklist_filtering_in_constructor() -> None:
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert Sqids(alphabet=alphabet, blocklist=[]).encode([1, 2, 3]) == "SQNMPN"

    # lowercase word against an uppercase alphabet
    sqids = Sqids(alphabet=alphabet, blocklist=["sqnmpn"])

    assert sqids.blocklist == frozenset({"sqnmpn"})
    assert sqids.encode([1, 2, 3]) == "ULPBZGBM"
    assert sqids.decode("ULPBZGBM") == [1, 2, 3]
    assert sqids.decode("SQNMPN") == [1, 2, 3]


def test_exhaustion_when_every_id_is_blocked() -> None:
    alphabet = "abcde"
    words = ["".join(chars) for chars in product(alphabet, repeat=4)]
    sqids = Sqids(alphabet=alphabet, blocklist=words)

    # two-character ids cannot contain a blocked word
    assert sqids.encode([0]) == "ab"

    with pytest.raises(GenerationExhaustedError):
        sqids.encode([0, 0])
