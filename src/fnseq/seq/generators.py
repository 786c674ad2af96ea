"""Sequence sources: unfold, initialize_infinite, singleton.

All three return lazy generators. Nothing is computed until the first
element is pulled, and each call owns its own state, so two sequences built
from the same seed never interfere.

Example:
    ```python
    from itertools import islice

    from fnseq import Nothing, Some, unfold

    fibs = unfold(lambda s: Some((s[0], (s[1], s[0] + s[1]))), (1, 1))
    list(islice(fibs, 8))  # [1, 1, 2, 3, 5, 8, 13, 21]

    countdown = unfold(lambda n: Some((n, n - 1)) if n > 0 else Nothing, 3)
    list(countdown)  # [3, 2, 1]
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from fnseq.decorators import requires
from fnseq.option import NothingType, Option, Some
from fnseq.runtime._logging import get_logger

__all__ = ['initialize_infinite', 'singleton', 'unfold']

log = get_logger(__name__)


@requires('generator')
def unfold[S, R](generator: Callable[[S], Option[tuple[R, S]]], seed: S) -> Iterator[R]:
    """Generate a sequence from a seed and a step function.

    On every pull the generator is called with the current state. It returns
    `Some((value, next_state))` to emit `value` and carry `next_state` into
    the next pull, or `Nothing` to end the sequence. A generator that never
    returns Nothing produces an infinite sequence; bound it with `truncate`
    or `itertools.islice`.

    Args:
        generator: Step function from state to Option[(value, next_state)].
        seed: Initial state.

    Yields:
        The emitted values, in order.

    Raises:
        MissingArgumentError: If generator is None (raised at call time).
        TypeError: If the generator returns something other than an Option
            of a 2-tuple.
    """
    state = seed
    steps = 0
    while True:
        step = generator(state)
        match step:
            case Some((value, next_state)):
                yield value
                state = next_state
                steps += 1
            case NothingType():
                log.debug('unfold_stopped', steps=steps)
                return
            case _:
                msg = f'unfold generator must return Some((value, next_state)) or Nothing, got {step!r}'
                raise TypeError(msg)


@requires('func')
def initialize_infinite[T](func: Callable[[int], T]) -> Iterator[T]:
    """Create the infinite sequence func(0), func(1), func(2), ...

    Args:
        func: Function from the element index to the element.

    Returns:
        A lazy, never-ending iterator.
    """
    return unfold(lambda index: Some((func(index), index + 1)), 0)


def singleton[T](value: T | None = None) -> Iterator[T | None]:
    """Yield value exactly once. Defaults to a single None."""
    yield value
