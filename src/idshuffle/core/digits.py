"""Base-N conversion between integers and strings over an alphabet."""
from __future__ import annotations


def to_id(number: int, alphabet: str) -> str:
    base = len(alphabet)
    digits = []
    result = number

    while True:
        result, digit = divmod(result, base)
        digits.append(alphabet[digit])
        if result == 0:
            break

    return "".join(reversed(digits))


def to_number(token: str, alphabet: str) -> int:
    base = len(alphabet)
    result = 0
    for char in token:
        result = result * base + alphabet.index(char)
    return result


__all__ = ["to_id", "to_number"]
