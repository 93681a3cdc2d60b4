"""Lay out numbers into IDs and read them back.

An ID is ``prefix + digits(n0) + boundary + digits(n1) + ... + digits(nk)``.
The prefix and partition characters are taken from a rotation of the stored
alphabet; the remaining characters form the working alphabet whose last
character separates numbers. The working alphabet is re-shuffled after every
number, so equal numbers at different positions render differently.

When the first number is a throwaway (padding or blocklist avoidance), the
boundary after it is the partition character instead of the separator.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from ..utils.errors import GenerationExhaustedError
from ..utils.logging import get_logger
from .digits import to_id, to_number
from .shuffle import shuffle

LOG = get_logger()


def rotation_offset(numbers: Sequence[int], alphabet: str) -> int:
    """Derive the rotation point of ``alphabet`` from the numbers being encoded."""
    length = len(alphabet)
    total = len(numbers)
    for index, number in enumerate(numbers):
        total += index + ord(alphabet[number % length])
    return total % length


def _rotate(alphabet: str, offset: int) -> Tuple[str, str, str]:
    rotated = alphabet[offset:] + alphabet[:offset]
    return rotated[0], rotated[1], rotated[2:]


def compose(numbers: Sequence[int], alphabet: str, *, partitioned: bool = False) -> Tuple[str, str]:
    """Render ``numbers`` once, without padding or blocklist handling.

    Returns the ID together with the working alphabet as it stands after the
    last number; padding numbers are read from it.
    """
    prefix, partition, working = _rotate(alphabet, rotation_offset(numbers, alphabet))

    parts = [prefix]
    last = len(numbers) - 1
    for index, number in enumerate(numbers):
        parts.append(to_id(number, working[:-1]))
        if index < last:
            if partitioned and index == 0:
                parts.append(partition)
            else:
                parts.append(working[-1])
            working = shuffle(working)

    return "".join(parts), working


def encode_numbers(
    numbers: Sequence[int],
    alphabet: str,
    *,
    min_length: int = 0,
    is_blocked: Optional[Callable[[str], bool]] = None,
    max_attempts: Optional[int] = None,
) -> str:
    """Compose an ID that satisfies ``min_length`` and avoids blocked words.

    ``max_attempts`` caps the number of candidates composed, padding steps
    included (default ``len(alphabet) + 1``). When every candidate is rejected,
    :class:`GenerationExhaustedError` is raised.
    """
    numbers = list(numbers)
    if not numbers:
        return ""
    if max_attempts is None:
        max_attempts = len(alphabet) + 1

    partitioned = False
    for attempt in range(1, max_attempts + 1):
        candidate, working = compose(numbers, alphabet, partitioned=partitioned)

        if len(candidate) < min_length:
            padding = to_number(working[: min_length - len(candidate)], working)
            LOG.debug("id %r shorter than %d, padding with %d", candidate, min_length, padding)
            if partitioned:
                numbers[0] = padding
            else:
                numbers.insert(0, padding)
                partitioned = True
            continue

        if is_blocked is not None and is_blocked(candidate):
            LOG.debug("id %r is blocked (attempt %d of %d)", candidate, attempt, max_attempts)
            if partitioned:
                numbers[0] += 1
            else:
                numbers.insert(0, 0)
                partitioned = True
            continue

        return candidate

    LOG.warning("no acceptable id after %d attempts", max_attempts)
    raise GenerationExhaustedError(
        f"Reached max attempts ({max_attempts}) trying to generate an ID that is not blocked"
    )


def decompose(
    id_: str,
    alphabet: str,
    *,
    max_value: Optional[int] = None,
) -> Optional[Tuple[List[int], bool]]:
    """Split ``id_`` into its raw numbers, throwaway included.

    Returns ``(numbers, partitioned)`` or ``None`` when the ID cannot be parsed.
    With ``max_value`` set, chunks are length-checked before conversion: a
    number chunk may not be longer than ``max_value`` rendered in the digit
    alphabet, a throwaway chunk not longer than the alphabet itself.
    """
    if not id_ or any(char not in alphabet for char in id_):
        return None

    _, partition, working = _rotate(alphabet, alphabet.index(id_[0]))
    partitioned = partition in id_[1:]

    number_limit = None
    if max_value is not None:
        number_limit = len(to_id(max_value, working[:-1]))

    numbers: List[int] = []
    position = 1
    end = len(id_)
    while position < end:
        throwaway = partitioned and not numbers
        separator = partition if throwaway else working[-1]

        found = id_.find(separator, position)
        stop = end if found < 0 else found
        limit = len(alphabet) if throwaway else number_limit
        if stop == position or (limit is not None and stop - position > limit):
            return None

        chunk = id_[position:stop]
        digits = working[:-1]
        if any(char not in digits for char in chunk):
            return None

        number = to_number(chunk, digits)
        if not throwaway and max_value is not None and number > max_value:
            return None
        numbers.append(number)

        if found < 0:
            break
        position = found + 1
        working = shuffle(working)

    if not numbers:
        return None
    return numbers, partitioned


def decode_id(id_: str, alphabet: str, *, max_value: Optional[int] = None) -> List[int]:
    """Recover the encoded numbers, or ``[]`` when ``id_`` is not a canonical ID.

    The parsed structure is composed again and must reproduce ``id_`` exactly.
    Blocked IDs and intermediate retry results still decode.
    """
    parsed = decompose(id_, alphabet, max_value=max_value)
    if parsed is None:
        return []

    numbers, partitioned = parsed
    if compose(numbers, alphabet, partitioned=partitioned)[0] != id_:
        return []

    return numbers[1:] if partitioned else numbers


__all__ = ["compose", "decode_id", "decompose", "encode_numbers", "rotation_offset"]
