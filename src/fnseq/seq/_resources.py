"""Scoped acquisition of upstream iterators."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from fnseq.runtime._logging import get_logger

__all__ = ['acquire']

log = get_logger(__name__)


@contextmanager
def acquire[T](source: Iterable[T], operation: str) -> Iterator[Iterator[T]]:
    """Open an iterator over source and close it when the block exits.

    The block exits when the combinator finishes, stops early, raises, or is
    itself closed by an abandoning consumer. Iterators without a `close`
    method (list and tuple iterators, for example) hold nothing and are just
    dropped.

    Args:
        source: The iterable to iterate.
        operation: Name of the calling combinator, for logging.
    """
    it = iter(source)
    try:
        yield it
    finally:
        close = getattr(it, 'close', None)
        if close is not None:
            close()
            log.debug('upstream_closed', operation=operation)
