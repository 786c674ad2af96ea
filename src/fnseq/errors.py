"""Error types raised by fnseq operations.

Every error derives from both `SeqError` and the builtin exception a caller
would naturally catch, so `except TypeError` still works for a missing
argument and `except RuntimeError` for reading an empty Option.
"""

from __future__ import annotations

__all__ = [
    'InvalidArgumentError',
    'InvalidOperationError',
    'MissingArgumentError',
    'SeqError',
]


class SeqError(Exception):
    """Base exception class for fnseq errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from fnseq import SeqError, windowed

        try:
            windowed([1, 2, 3], 0)
        except SeqError as e:
            print(e)  # [invalid_argument] windowed: window_size must be >= 1, got 0
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class MissingArgumentError(SeqError, TypeError):
    """A required sequence or function argument was None or not supplied."""

    def __init__(self, parameter: str, function: str | None = None) -> None:
        self.parameter = parameter
        self.function = function
        where = f'{function}: ' if function else ''
        super().__init__(f"{where}required argument '{parameter}' is missing", 'missing_argument')


class InvalidOperationError(SeqError, RuntimeError):
    """An operation is not valid for the current state, e.g. unwrapping Nothing."""

    def __init__(self, message: str = 'Called unwrap on Nothing') -> None:
        super().__init__(message, 'invalid_operation')


class InvalidArgumentError(SeqError, ValueError):
    """An argument was supplied but its value cannot be used."""

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        super().__init__(message, 'invalid_argument')
