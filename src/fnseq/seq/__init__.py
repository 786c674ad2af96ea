"""Lazy sequence functions over any iterable.

`iter` and `zip` are left out of `__all__` so `from fnseq.seq import *` does
not shadow the builtins; import them by name.
"""

from fnseq.seq.consumers import (
    collect,
    exists,
    forall,
    item,
    iter,  # noqa: A004
    nth,
    pairwise,
    truncate,
    windowed,
)
from fnseq.seq.generators import initialize_infinite, singleton, unfold
from fnseq.seq.lockstep import exists2, forall2, iter2, zip, zip3  # noqa: A004

__all__ = [
    'collect',
    'exists',
    'exists2',
    'forall',
    'forall2',
    'initialize_infinite',
    'item',
    'iter2',
    'nth',
    'pairwise',
    'singleton',
    'truncate',
    'unfold',
    'windowed',
    'zip3',
]
