"""Output file naming."""

from buffer_split.naming.filenames import (
    create_filenames,
    iter_alphabetic_suffixes,
    iter_numeric_suffixes,
)
from buffer_split.naming.suffix import suffix_length

__all__ = [
    "create_filenames",
    "iter_alphabetic_suffixes",
    "iter_numeric_suffixes",
    "suffix_length",
]
