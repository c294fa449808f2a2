"""Splitting strategies over an in-memory buffer."""

from buffer_split.options.types import ByBytes, ByLineBytes, ByLines, Mode

LF = b"\n"


def split_by_lines(data: bytes, lines: int) -> list[bytes]:
    """
    Split data into pieces of ``lines`` lines each.

    A line feed stays the last byte of the piece it terminates. The final
    piece holds whatever remains, and is dropped only if empty.
    """
    pieces: list[bytes] = []
    begin = 0
    line_count = 0
    index = data.find(LF)

    while index != -1:
        line_count += 1
        if line_count == lines:
            pieces.append(data[begin : index + 1])
            begin = index + 1
            line_count = 0
        index = data.find(LF, index + 1)

    if begin < len(data):
        pieces.append(data[begin:])
    return pieces


def split_by_bytes(data: bytes, size: int) -> list[bytes]:
    """Split data into chunks of ``size`` bytes; the last chunk may be shorter."""
    return [data[begin : begin + size] for begin in range(0, len(data), size)]


def split_by_line_bytes(data: bytes, size: int) -> list[bytes]:
    """Split every line into chunks of at most ``size`` bytes."""
    pieces: list[bytes] = []
    for line in split_by_lines(data, 1):
        pieces.extend(split_by_bytes(line, size))
    return pieces


def split_buffer(data: bytes, mode: Mode) -> list[bytes]:
    """Dispatch to the strategy selected by mode."""
    match mode:
        case ByLines(count):
            return split_by_lines(data, count)
        case ByBytes(count):
            return split_by_bytes(data, count)
        case ByLineBytes(count):
            return split_by_line_bytes(data, count)
    raise TypeError(f"Unknown split mode: {mode!r}")
