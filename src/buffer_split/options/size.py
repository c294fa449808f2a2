"""Parsing of human size expressions such as ``"10K"`` or ``"2MB"``."""

import re

from buffer_split.errors import InvalidSizeStringError
from buffer_split.options.types import is_safe

SIZE_PATTERN = re.compile(r"([0-9]+)(KB|MB|K|M)", re.IGNORECASE)

# K and M are binary multipliers, KB and MB decimal ones.
SIZE_UNITS = {
    "K": 1024,
    "M": 1024 * 1024,
    "KB": 1000,
    "MB": 1000 * 1000,
}


def parse_size(text: str) -> int:
    """
    Convert a sized string into a byte count.

    Raises InvalidSizeStringError when the unit is unknown or the result
    leaves the safe integer range.
    """
    match = SIZE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidSizeStringError(f"Invalid number of bytes: {text!r}")

    amount, unit = match.groups()
    size = int(amount) * SIZE_UNITS[unit.upper()]
    if not is_safe(size):
        raise InvalidSizeStringError(f"Invalid number of bytes: {text!r} is too large")
    return size
