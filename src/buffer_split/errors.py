"""Exceptions raised while validating options and naming output files."""


class SplitError(Exception):
    """Base exception for buffer splitting errors."""


class InvalidOptionsError(SplitError, TypeError):
    """Raised when options are not a mapping or the input is not bytes-like."""


class ModeConflictError(SplitError, ValueError):
    """Raised when no splitting mode, or more than one, is selected."""


class InvalidCountError(SplitError, ValueError):
    """Raised when a line or byte count is not a positive safe integer."""


class InvalidSizeStringError(InvalidCountError):
    """Raised when a sized string such as ``"10K"`` is malformed or overflows."""


class InvalidSuffixLengthError(SplitError, ValueError):
    """Raised when ``suffix_length`` is not a positive safe integer."""


class InvalidNumericStartError(SplitError, ValueError):
    """Raised when ``numeric_suffixes`` is not a non-negative safe integer."""


class SuffixesExhaustedError(SplitError):
    """Raised when the suffix width cannot address every piece."""
