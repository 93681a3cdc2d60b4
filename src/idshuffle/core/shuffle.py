"""Consistent alphabet shuffle."""
from __future__ import annotations


def shuffle(alphabet: str) -> str:
    """Permute ``alphabet`` deterministically; the same input always yields the same output."""
    chars = list(alphabet)
    length = len(chars)

    i, j = 0, length - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % length
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1

    return "".join(chars)


__all__ = ["shuffle"]
