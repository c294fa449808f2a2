"""Split orchestration: blocking and non-blocking entry points."""

from buffer_split.orchestrator.pipeline import split, split_sync

__all__ = ["split", "split_sync"]
