"""Public encoder object."""
from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Sequence

from .checks.blocklist import filter_blocklist, is_blocked_id
from .checks.configuration import validate_alphabet, validate_min_length
from .core.composer import decode_id, encode_numbers
from .core.shuffle import shuffle
from .domain.models import SqidsOptions
from .utils.constants import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, MAX_VALUE, MIN_VALUE
from .utils.errors import ValueOutOfRangeError
from .utils.io import load_default_blocklist
from .utils.logging import get_logger

LOG = get_logger()


class Sqids:
    """Encode sequences of non-negative integers into short IDs and back.

    Configuration is validated and frozen at construction; ``encode`` and
    ``decode`` only read it, so one instance can be shared between threads.
    """

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        min_length: int = DEFAULT_MIN_LENGTH,
        blocklist: Optional[Iterable[str]] = None,
    ) -> None:
        alphabet = validate_alphabet(alphabet)
        min_length = validate_min_length(min_length, alphabet)
        words = load_default_blocklist() if blocklist is None else blocklist

        self._blocklist = filter_blocklist(words, alphabet)
        self._alphabet = shuffle(alphabet)
        self._min_length = min_length
        LOG.debug(
            "encoder ready: alphabet of %d, min_length=%d, %d blocked words",
            len(alphabet),
            min_length,
            len(self._blocklist),
        )

    @classmethod
    def from_options(cls, options: SqidsOptions) -> "Sqids":
        return cls(
            alphabet=options.alphabet,
            min_length=options.min_length,
            blocklist=options.blocklist,
        )

    @property
    def alphabet(self) -> str:
        """The shuffled alphabet IDs are built from."""
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def blocklist(self) -> FrozenSet[str]:
        return self._blocklist

    def encode(self, numbers: Sequence[int]) -> str:
        """Encode ``numbers`` into an ID.

        Raises :class:`ValueOutOfRangeError` when a number is not an integer in
        ``[min_value(), max_value()]`` and :class:`GenerationExhaustedError`
        when no unblocked ID can be produced.
        """
        numbers = list(numbers)
        if not numbers:
            return ""

        for number in numbers:
            if (
                isinstance(number, bool)
                or not isinstance(number, int)
                or not self.min_value() <= number <= self.max_value()
            ):
                raise ValueOutOfRangeError(
                    f"Encoding supports numbers between {self.min_value()} and {self.max_value()}"
                )

        return encode_numbers(
            numbers,
            self._alphabet,
            min_length=self._min_length,
            is_blocked=self._is_blocked_id,
        )

    def decode(self, id_: str) -> List[int]:
        """Decode an ID back into numbers; invalid IDs yield an empty list."""
        if not isinstance(id_, str) or not id_:
            return []

        numbers = decode_id(id_, self._alphabet, max_value=self.max_value())
        if not numbers:
            LOG.debug("rejected id of length %d", len(id_))
        return numbers

    def min_value(self) -> int:
        return MIN_VALUE

    def max_value(self) -> int:
        return MAX_VALUE

    def _is_blocked_id(self, id_: str) -> bool:
        return is_blocked_id(id_, self._blocklist)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_length={self._min_length}, blocklist={len(self._blocklist)} words)"


__all__ = ["Sqids"]
