"""Option type: Some[T] | Nothing for values that may be absent.

`Some` wraps exactly one value (which may itself be None); `Nothing` carries
nothing. Both are immutable and compare by value:

    ```python
    from fnseq.option import Nothing, Some

    Some(5) == Some(5)    # True
    Some(5) == Nothing    # False
    Nothing.unwrap_or(0)  # 0
    Nothing.value         # raises InvalidOperationError
    ```

Hashing agrees with equality: `hash(Nothing) == 0` and
`hash(Some(v)) == hash(v)`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import NoReturn, TypeGuard

from fnseq.errors import InvalidOperationError

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'from_nullable',
    'is_none',
    'is_some',
    'nothing',
    'some',
]


@dataclass(slots=True, frozen=True)
class Some[T]:
    """Present variant of Option containing a value of type T.

    Attributes:
        value: The wrapped value.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(21).map(lambda x: x * 2)
        Some(value=42)
    """

    value: T
    __match_args__ = ('value',)

    def __hash__(self) -> int:
        return hash(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def is_some(self) -> bool:
        """Return True since this is Some."""
        return True

    def is_none(self) -> bool:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Some containing f(value).
        """
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that itself returns an Option (flatmap / bind).

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if predicate(value) holds, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def or_(self, _other: Option[T]) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self since this is Some."""
        return self

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair this value with other's value, or Nothing if other is Nothing."""
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing


@dataclass(slots=True, frozen=True)
class NothingType:
    """Absent variant of Option.

    Use the `Nothing` constant. Constructing `NothingType()` is allowed and
    every instance compares equal to `Nothing`; there is no shared mutable
    state behind it.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def __hash__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[NoReturn]:
        return iter(())

    @property
    def value(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            InvalidOperationError: Always.
        """
        raise InvalidOperationError('Accessed value of Nothing')

    def is_some(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> bool:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            InvalidOperationError: Always.
        """
        raise InvalidOperationError('Called unwrap on Nothing')

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            InvalidOperationError: Always, carrying msg.
        """
        raise InvalidOperationError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default since this is Nothing."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        return self

    def and_then[T, U](self, _f: Callable[[T], Option[U]]) -> NothingType:
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        return self

    def or_[T](self, other: Option[T]) -> Option[T]:
        """Return other since this is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return the Option produced by f since this is Nothing."""
        return f()

    def zip[U](self, _other: Option[U]) -> NothingType:
        return self


Nothing: NothingType = NothingType()
"""The absent Option value."""

type Option[T] = Some[T] | NothingType


def is_some[T](m: Option[T]) -> TypeGuard[Some[T]]:
    """Check whether an Option holds a value."""
    return isinstance(m, Some)


def is_none[T](m: Option[T]) -> TypeGuard[NothingType]:
    """Check whether an Option is Nothing."""
    return isinstance(m, NothingType)


def some[T](x: T) -> Option[T]:
    """Wrap a value in Some."""
    return Some(x)


def nothing() -> NothingType:
    """Return the absent Option value."""
    return Nothing


def from_nullable[T](x: T | None) -> Option[T]:
    """Convert a nullable value to an Option.

    Args:
        x: The value that may be None.

    Returns:
        Some(x) if x is not None, otherwise Nothing.
    """
    return Some(x) if x is not None else Nothing
