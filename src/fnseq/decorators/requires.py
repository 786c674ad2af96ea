"""@requires decorator for eager argument-presence checks."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeVar

import wrapt

from fnseq.errors import MissingArgumentError
from fnseq.runtime._logging import get_logger

__all__ = ['requires']

F = TypeVar('F', bound=Callable[..., Any])

log = get_logger(__name__)


def requires(*names: str) -> Callable[[F], F]:
    """Decorator that rejects None for the named parameters at call time.

    The check runs in the wrapper, before the wrapped function body. For a
    generator function that means the error surfaces when the sequence is
    created, not when it is first iterated.

    Args:
        *names: Parameter names that must be supplied and not None.

    Returns:
        A decorator preserving the wrapped function's signature.

    Raises:
        MissingArgumentError: From the decorated function, naming the first
            offending parameter.

    Example:
        ```python
        @requires('source')
        def doubled(source):
            for x in source:
                yield x * 2

        doubled(None)  # raises MissingArgumentError immediately
        ```
    """

    def decorate(func: F) -> F:
        signature = inspect.signature(func)
        unknown = [name for name in names if name not in signature.parameters]
        if unknown:
            msg = f'{func.__qualname__} has no parameter(s) {", ".join(unknown)}'
            raise TypeError(msg)

        @wrapt.decorator
        def wrapper(
            wrapped: Callable[..., Any],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Any:
            bound = signature.bind_partial(*args, **kwargs)
            for name in names:
                if bound.arguments.get(name) is None:
                    log.debug('argument_missing', function=func.__name__, parameter=name)
                    raise MissingArgumentError(name, func.__name__)
            return wrapped(*args, **kwargs)

        return wrapper(func)

    return decorate
