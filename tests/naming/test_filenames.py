"""Tests for output file name generation."""

import pytest

from buffer_split.errors import SuffixesExhaustedError
from buffer_split.naming import (
    create_filenames,
    iter_alphabetic_suffixes,
    iter_numeric_suffixes,
)
from buffer_split.options import MAX_SAFE_INTEGER, ByLines, SplitOptions


def make_options(**kwargs) -> SplitOptions:
    kwargs.setdefault("prefix", "x")
    return SplitOptions(mode=ByLines(1), **kwargs)


class TestAlphabeticNames:
    """Test cases for the default alphabetic suffixes."""

    def test_default_width_is_two(self) -> None:
        assert create_filenames(3, make_options()) == ["xaa", "xab", "xac"]

    def test_odometer_carries(self) -> None:
        names = create_filenames(28, make_options())
        assert names[25] == "xaz"
        assert names[26] == "xba"
        assert names[27] == "xbb"

    def test_width_grows_with_count(self) -> None:
        names = create_filenames(677, make_options())
        assert names[0] == "xaaa"
        assert names[676] == "xbaa"

    def test_explicit_width(self) -> None:
        names = create_filenames(26, make_options(suffix_length=1))
        assert names[0] == "xa"
        assert names[-1] == "xz"

    def test_explicit_width_too_small(self) -> None:
        with pytest.raises(SuffixesExhaustedError, match="exhausted"):
            create_filenames(27, make_options(suffix_length=1))

    def test_additional_suffix(self) -> None:
        names = create_filenames(2, make_options(prefix="part-", additional_suffix=".txt"))
        assert names == ["part-aa.txt", "part-ab.txt"]

    def test_zero_pieces(self) -> None:
        assert create_filenames(0, make_options()) == []

    def test_names_are_unique(self) -> None:
        names = create_filenames(1000, make_options())
        assert len(set(names)) == 1000


class TestNumericNames:
    """Test cases for numeric suffixes."""

    def test_counts_from_start(self) -> None:
        names = create_filenames(3, make_options(numeric_suffixes=5))
        assert names == ["x05", "x06", "x07"]

    def test_starts_at_zero(self) -> None:
        names = create_filenames(2, make_options(numeric_suffixes=0, suffix_length=4))
        assert names == ["x0000", "x0001"]

    def test_explicit_width_too_small(self) -> None:
        with pytest.raises(SuffixesExhaustedError):
            create_filenames(11, make_options(numeric_suffixes=0, suffix_length=1))

    def test_explicit_width_exactly_enough(self) -> None:
        names = create_filenames(10, make_options(numeric_suffixes=0, suffix_length=1))
        assert names == [f"x{i}" for i in range(10)]

    def test_wide_numerals_keep_last_digits(self) -> None:
        """Test that numerals wider than the width drop their leading digits."""
        names = create_filenames(3, make_options(numeric_suffixes=99))
        assert names == ["x99", "x00", "x01"]

    def test_strict_suffixes_refuse_to_truncate(self) -> None:
        with pytest.raises(SuffixesExhaustedError):
            create_filenames(3, make_options(numeric_suffixes=99, strict_suffixes=True))

    def test_strict_suffixes_allow_fitting_numerals(self) -> None:
        names = create_filenames(2, make_options(numeric_suffixes=98, strict_suffixes=True))
        assert names == ["x98", "x99"]

    def test_start_beyond_safe_range(self) -> None:
        with pytest.raises(SuffixesExhaustedError):
            create_filenames(2, make_options(numeric_suffixes=MAX_SAFE_INTEGER))


class TestSuffixIterators:
    """Test cases for the lazy suffix generators."""

    def test_alphabetic_suffixes_end_at_last_letter(self) -> None:
        suffixes = list(iter_alphabetic_suffixes(1))
        assert len(suffixes) == 26
        assert suffixes[-1] == "z"

    def test_numeric_suffixes_are_padded(self) -> None:
        suffixes = iter_numeric_suffixes(8, 3)
        assert [next(suffixes) for _ in range(3)] == ["008", "009", "010"]


def test_requires_prefix() -> None:
    with pytest.raises(ValueError):
        create_filenames(1, SplitOptions(mode=ByLines(1)))
