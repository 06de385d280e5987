# core/password_utils.py
from __future__ import annotations
import secrets
from dataclasses import asdict, dataclass
from typing import Callable, List, Mapping

from loguru import logger

from core.config import CHAR_SETS, CLASS_ORDER, MAX_LENGTH, MIN_LENGTH
from core.errors import EmptyCharsetError, InvalidLengthError

_RANDOM_BITS = 32
_RANGE = 1 << _RANDOM_BITS


@dataclass(frozen=True)
class CharacterClassSelection:
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    special: bool = True

    @classmethod
    def from_mapping(cls, options: Mapping[str, object]) -> "CharacterClassSelection":
        return cls(**{key: bool(options.get(key, False)) for key in CLASS_ORDER})

    def as_dict(self) -> dict:
        return asdict(self)

    def enabled_classes(self) -> List[str]:
        return [key for key in CLASS_ORDER if getattr(self, key)]

    def any_enabled(self) -> bool:
        return bool(self.enabled_classes())


def build_charset(selection: CharacterClassSelection) -> str:
    """
    Concatenate the alphabets of every enabled class, in the fixed order
    uppercase, lowercase, numbers, special.
    """
    return "".join(CHAR_SETS[key] for key in selection.enabled_classes())


def validate_length(length: object) -> int:
    if isinstance(length, bool):
        raise InvalidLengthError("Length must be an integer")
    if isinstance(length, float) and length.is_integer():
        length = int(length)
    if not isinstance(length, int):
        raise InvalidLengthError("Length must be an integer")
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidLengthError(f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}")
    return length


def secure_index(size: int, random_bits: Callable[[int], int] = secrets.randbits) -> int:
    """
    Uniform index in [0, size) from a 32-bit source using rejection sampling.

    Draws >= max_valid fall in the incomplete last block of `size` values and
    are redrawn. The loop has no fixed bound; a redraw happens with
    probability < size / 2**32 per draw.
    """
    max_valid = (_RANGE // size) * size
    while True:
        value = random_bits(_RANDOM_BITS)
        if value < max_valid:
            return value % size


def generate(
    length: int,
    selection: CharacterClassSelection,
    *,
    random_bits: Callable[[int], int] = secrets.randbits,
) -> str:
    """
    Generate a password of `length` characters drawn uniformly from the
    charset built from `selection`.

    Raises InvalidLengthError, then EmptyCharsetError, before any draw.
    """
    length = validate_length(length)
    charset = build_charset(selection)
    if not charset:
        raise EmptyCharsetError("At least one character type must be selected")

    logger.debug("Generating password: length={}, charset size={}", length, len(charset))
    return "".join(charset[secure_index(len(charset), random_bits)] for _ in range(length))
