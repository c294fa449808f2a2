"""Buffer Split - split byte buffers into pieces and optionally write them to files."""

from buffer_split.errors import (
    InvalidCountError,
    InvalidNumericStartError,
    InvalidOptionsError,
    InvalidSizeStringError,
    InvalidSuffixLengthError,
    ModeConflictError,
    SplitError,
    SuffixesExhaustedError,
)
from buffer_split.options import ByBytes, ByLineBytes, ByLines, SplitOptions, check_options
from buffer_split.orchestrator import split, split_sync

__all__ = [
    "ByBytes",
    "ByLineBytes",
    "ByLines",
    "InvalidCountError",
    "InvalidNumericStartError",
    "InvalidOptionsError",
    "InvalidSizeStringError",
    "InvalidSuffixLengthError",
    "ModeConflictError",
    "SplitError",
    "SplitOptions",
    "SuffixesExhaustedError",
    "check_options",
    "split",
    "split_sync",
]
