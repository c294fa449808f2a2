"""Tests for executor configuration helpers."""

import pytest

from buffer_split.orchestrator import execution


def test_max_workers_from_environment(monkeypatch) -> None:
    monkeypatch.delenv(execution.SPLIT_WORKERS_ENV, raising=False)
    assert execution.get_max_workers() is None

    monkeypatch.setenv(execution.SPLIT_WORKERS_ENV, "")
    assert execution.get_max_workers() is None

    monkeypatch.setenv(execution.SPLIT_WORKERS_ENV, "4")
    assert execution.get_max_workers() == 4


@pytest.mark.parametrize("value", ["0", "-3", "many"])
def test_invalid_max_workers(monkeypatch, value: str) -> None:
    monkeypatch.setenv(execution.SPLIT_WORKERS_ENV, value)
    with pytest.raises(ValueError, match=execution.SPLIT_WORKERS_ENV):
        execution.get_max_workers()


def test_shared_executor_is_reused(monkeypatch) -> None:
    monkeypatch.setattr(execution, "_shared_executor", None)
    monkeypatch.setenv(execution.SPLIT_WORKERS_ENV, "2")

    first = execution.get_executor()
    try:
        assert execution.get_executor() is first
        assert first._max_workers == 2
    finally:
        first.shutdown(wait=True)


def test_write_workers_bounded_by_pieces(monkeypatch) -> None:
    monkeypatch.setenv(execution.SPLIT_WORKERS_ENV, "4")
    assert execution.get_write_workers(2) == 2
    assert execution.get_write_workers(10) == 4

    monkeypatch.delenv(execution.SPLIT_WORKERS_ENV)
    assert 1 <= execution.get_write_workers(1000) <= 32
