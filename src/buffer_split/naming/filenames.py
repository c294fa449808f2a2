"""Output file name generation with alphabetic or numeric suffixes."""

import logging
from collections.abc import Iterator
from itertools import islice

from buffer_split.errors import SuffixesExhaustedError
from buffer_split.naming.suffix import (
    ALPHABET,
    ALPHABET_RADIX,
    MIN_SUFFIX_LENGTH,
    NUMERIC_RADIX,
    suffix_length,
)
from buffer_split.options.types import SplitOptions, is_safe

logger = logging.getLogger(__name__)


def _resolve_width(count: int, radix: int, explicit: int | None) -> int:
    required = suffix_length(count, radix)
    if explicit is None:
        return max(required, MIN_SUFFIX_LENGTH)
    if explicit < required:
        raise SuffixesExhaustedError("output file suffixes exhausted")
    return explicit


def iter_alphabetic_suffixes(width: int) -> Iterator[str]:
    """Yield ``aa..a``, ``aa..b``, ... up to ``zz..z`` for the given width."""
    digits = [0] * width
    while True:
        yield "".join(ALPHABET[digit] for digit in digits)

        # Odometer increment, rightmost position fastest.
        position = width - 1
        while position >= 0 and digits[position] == ALPHABET_RADIX - 1:
            digits[position] = 0
            position -= 1
        if position < 0:
            return
        digits[position] += 1


def iter_numeric_suffixes(start: int, width: int, strict: bool = False) -> Iterator[str]:
    """
    Yield zero-padded numerals counting up from ``start``.

    Numerals wider than ``width`` keep only their last ``width`` digits,
    matching the reference split behaviour. With ``strict`` such a numeral
    raises SuffixesExhaustedError instead.
    """
    number = start
    while True:
        numeral = str(number).zfill(width)
        if len(numeral) > width:
            if strict:
                raise SuffixesExhaustedError(
                    f"output file suffixes exhausted: {number} is wider than {width} digits"
                )
            numeral = numeral[-width:]
        yield numeral
        number += 1


def create_filenames(count: int, options: SplitOptions) -> list[str]:
    """
    Build ``count`` output file names in piece order.

    Names are ``prefix + suffix + additional_suffix``. Without an explicit
    suffix length the width is the smallest that addresses every piece,
    but never below two symbols.
    """
    if options.prefix is None:
        raise ValueError("create_filenames requires a prefix")

    if options.numeric_suffixes is not None:
        start = options.numeric_suffixes
        if not is_safe(start + count - 1):
            raise SuffixesExhaustedError(
                f"output file suffixes exhausted: {start} + {count} pieces is out of range"
            )
        width = _resolve_width(count, NUMERIC_RADIX, options.suffix_length)
        suffixes = iter_numeric_suffixes(start, width, options.strict_suffixes)
    else:
        width = _resolve_width(count, ALPHABET_RADIX, options.suffix_length)
        suffixes = iter_alphabetic_suffixes(width)

    logger.debug("Generating %d file names with suffix width %d", count, width)
    return [
        f"{options.prefix}{suffix}{options.additional_suffix}"
        for suffix in islice(suffixes, count)
    ]
