"""Validation of loosely typed split options."""

import math
from collections.abc import Mapping
from typing import Any

from buffer_split.errors import (
    InvalidCountError,
    InvalidNumericStartError,
    InvalidOptionsError,
    InvalidSuffixLengthError,
    ModeConflictError,
)
from buffer_split.options.size import parse_size
from buffer_split.options.types import (
    ByBytes,
    ByLineBytes,
    ByLines,
    Mode,
    SplitOptions,
    is_safe,
)

MODE_KEYS = ("lines", "bytes", "line_bytes")


def _is_defined(key: str, options: Mapping[str, Any]) -> bool:
    return options.get(key) is not None


def _to_number(value: Any) -> int | float | None:
    """Return value as a finite number, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text.isascii():
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _to_integer(value: Any, minimum: int) -> int | None:
    """Truncate value toward zero; None if non-numeric, below minimum or unsafe."""
    number = _to_number(value)
    if number is None:
        return None

    integer = math.trunc(number)
    if integer < minimum or not is_safe(integer):
        return None
    return integer


def _check_size(value: Any) -> int:
    if isinstance(value, str) and _to_number(value) is None:
        size = parse_size(value)
    else:
        size = _to_integer(value, 1)
        if size is None:
            raise InvalidCountError(f"Invalid number of bytes: {value!r}")

    if size < 1:
        raise InvalidCountError(f"Invalid number of bytes: {value!r}")
    return size


def _check_mode(options: Mapping[str, Any]) -> Mode:
    selected = [key for key in MODE_KEYS if _is_defined(key, options)]
    if len(selected) > 1:
        raise ModeConflictError("Cannot split in more than one way")
    if not selected:
        raise ModeConflictError("Splitting way is not specified")

    key = selected[0]
    if key == "lines":
        lines = _to_integer(options["lines"], 1)
        if lines is None:
            raise InvalidCountError(f"Invalid number of lines: {options['lines']!r}")
        return ByLines(lines)

    size = _check_size(options[key])
    return ByBytes(size) if key == "bytes" else ByLineBytes(size)


def check_options(options: Any) -> SplitOptions:
    """
    Validate raw options into an immutable SplitOptions record.

    Exactly one of ``lines``, ``bytes`` or ``line_bytes`` selects the mode.
    The naming keys (``suffix_length``, ``numeric_suffixes``,
    ``additional_suffix``, ``strict_suffixes``) only apply when ``prefix``
    is set and are ignored otherwise. Keys set to None count as absent.
    """
    if not isinstance(options, Mapping):
        raise InvalidOptionsError(
            f"Options must be a mapping, got {type(options).__name__}"
        )

    mode = _check_mode(options)
    if not _is_defined("prefix", options):
        return SplitOptions(mode=mode)

    suffix_length = None
    if _is_defined("suffix_length", options):
        suffix_length = _to_integer(options["suffix_length"], 1)
        if suffix_length is None:
            raise InvalidSuffixLengthError(
                f"Invalid suffix length: {options['suffix_length']!r}"
            )

    numeric_suffixes = None
    if _is_defined("numeric_suffixes", options):
        numeric_suffixes = _to_integer(options["numeric_suffixes"], 0)
        if numeric_suffixes is None:
            raise InvalidNumericStartError(
                f"Invalid numeric suffix start: {options['numeric_suffixes']!r}"
            )

    additional_suffix = ""
    if _is_defined("additional_suffix", options):
        additional_suffix = str(options["additional_suffix"])

    strict_suffixes = options.get("strict_suffixes")
    if strict_suffixes is None:
        strict_suffixes = False
    elif not isinstance(strict_suffixes, bool):
        raise InvalidOptionsError(
            f"strict_suffixes must be a bool, got {type(strict_suffixes).__name__}"
        )

    return SplitOptions(
        mode=mode,
        prefix=str(options["prefix"]),
        suffix_length=suffix_length,
        numeric_suffixes=numeric_suffixes,
        additional_suffix=additional_suffix,
        strict_suffixes=strict_suffixes,
    )
