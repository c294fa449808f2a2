"""Option validation for buffer splitting."""

from buffer_split.options.size import parse_size
from buffer_split.options.types import (
    MAX_SAFE_INTEGER,
    ByBytes,
    ByLineBytes,
    ByLines,
    Mode,
    SplitOptions,
)
from buffer_split.options.validate import check_options

__all__ = [
    "MAX_SAFE_INTEGER",
    "ByBytes",
    "ByLineBytes",
    "ByLines",
    "Mode",
    "SplitOptions",
    "check_options",
    "parse_size",
]
