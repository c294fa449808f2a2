"""Validated option record and splitting mode variants."""

from dataclasses import dataclass

# Integer bounds shared with the reference split implementation.
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


@dataclass(frozen=True, slots=True)
class ByLines:
    """Put ``count`` lines in every piece."""

    count: int


@dataclass(frozen=True, slots=True)
class ByBytes:
    """Put ``count`` bytes in every piece."""

    count: int


@dataclass(frozen=True, slots=True)
class ByLineBytes:
    """Put at most ``count`` bytes of a single line in every piece."""

    count: int


type Mode = ByLines | ByBytes | ByLineBytes


@dataclass(frozen=True, slots=True)
class SplitOptions:
    """Options produced by check_options, valid for a single split call."""

    mode: Mode
    prefix: str | None = None
    suffix_length: int | None = None
    numeric_suffixes: int | None = None
    additional_suffix: str = ""
    strict_suffixes: bool = False


def is_safe(number: int) -> bool:
    """Check that a number lies within the safe integer range."""
    return MIN_SAFE_INTEGER <= number <= MAX_SAFE_INTEGER
