"""Persistence of split pieces."""

import logging

logger = logging.getLogger(__name__)

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024


def write_piece(filename: str, data: bytes) -> None:
    """Create or overwrite filename with the raw bytes of one piece."""
    with open(filename, "wb", buffering=BUFFER_SIZE) as handle:
        handle.write(data)
    logger.debug("Wrote %s (%d bytes)", filename, len(data))
