"""fnseq: F#-style lazy sequence functions and an Option type for Python.

Flat imports (preferred):
    from fnseq import Some, Nothing, Option, Stream
    from fnseq import unfold, initialize_infinite, truncate, pairwise, windowed, nth

Submodule imports (for organization):
    from fnseq.option import Some, Nothing, from_nullable
    from fnseq.seq import zip, zip3, forall2
    from fnseq.runtime import init, get_logger
"""

# Errors
from fnseq.errors import (
    InvalidArgumentError,
    InvalidOperationError,
    MissingArgumentError,
    SeqError,
)

# Option
from fnseq.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    nothing,
    some,
)

# Sequence functions
from fnseq.seq import (
    collect,
    exists,
    exists2,
    forall,
    forall2,
    initialize_infinite,
    item,
    iter,  # noqa: A004
    iter2,
    nth,
    pairwise,
    singleton,
    truncate,
    unfold,
    windowed,
    zip,  # noqa: A004
    zip3,
)

# Fluent wrapper
from fnseq.stream import Stream

__all__ = [
    # Errors
    'InvalidArgumentError',
    'InvalidOperationError',
    'MissingArgumentError',
    # Option
    'Nothing',
    'NothingType',
    'Option',
    'SeqError',
    'Some',
    # Fluent wrapper
    'Stream',
    # Sequence functions (iter and zip are importable by name only, so star imports keep the builtins)
    'collect',
    'exists',
    'exists2',
    'forall',
    'forall2',
    'from_nullable',
    'initialize_infinite',
    'item',
    'iter2',
    'nothing',
    'nth',
    'pairwise',
    'singleton',
    'some',
    'truncate',
    'unfold',
    'windowed',
    'zip3',
]
