"""Alphabet permutation, digit conversion and ID composition."""
from .composer import compose, decode_id, decompose, encode_numbers, rotation_offset
from .digits import to_id, to_number
from .shuffle import shuffle

__all__ = [
    "compose",
    "decode_id",
    "decompose",
    "encode_numbers",
    "rotation_offset",
    "shuffle",
    "to_id",
    "to_number",
]
