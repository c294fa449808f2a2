"""Suffix width calculation."""

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_RADIX = len(ALPHABET)
NUMERIC_RADIX = 10

# Width used when no explicit suffix length is configured and fewer symbols would do.
MIN_SUFFIX_LENGTH = 2


def suffix_length(count: int, radix: int) -> int:
    """Return the fewest symbols in base ``radix`` that can name ``count`` items."""
    length = 0
    capacity = 1
    while capacity < count:
        capacity *= radix
        length += 1
    return length
