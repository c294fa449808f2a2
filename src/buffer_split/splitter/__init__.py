"""Buffer splitting strategies."""

from buffer_split.splitter.strategies import (
    split_buffer,
    split_by_bytes,
    split_by_line_bytes,
    split_by_lines,
)

__all__ = ["split_buffer", "split_by_bytes", "split_by_line_bytes", "split_by_lines"]
