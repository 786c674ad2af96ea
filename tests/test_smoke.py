"""Smoke tests to verify package structure and imports work."""

import builtins


def test_import_types():
    """Test that core types can be imported."""
    from fnseq import Nothing, NothingType, Option, Some, Stream

    assert Some is not None
    assert Nothing is not None
    assert NothingType is not None
    assert Option is not None
    assert Stream is not None


def test_import_errors():
    """Test that the error hierarchy can be imported."""
    from fnseq import InvalidArgumentError, InvalidOperationError, MissingArgumentError, SeqError

    assert issubclass(MissingArgumentError, SeqError)
    assert issubclass(InvalidOperationError, SeqError)
    assert issubclass(InvalidArgumentError, SeqError)


def test_import_sequence_functions():
    """Test that sequence functions are importable from the package and fnseq.seq."""
    import fnseq
    from fnseq import seq

    for name in seq.__all__:
        assert getattr(fnseq, name) is getattr(seq, name)


def test_builtins_not_shadowed():
    """Importing fnseq leaves the builtin zip and iter untouched."""
    import fnseq  # noqa: F401

    assert builtins.zip is zip
    assert builtins.iter is iter


def test_iter_and_zip_importable_by_name():
    """iter and zip stay out of star imports but import by name."""
    import fnseq
    from fnseq import iter as seq_iter
    from fnseq import zip as seq_zip
    from fnseq.seq import lockstep

    assert seq_zip is lockstep.zip
    assert seq_iter is fnseq.seq.consumers.iter
    assert 'zip' not in fnseq.__all__
    assert 'iter' not in fnseq.__all__
    assert 'zip' not in fnseq.seq.__all__
    assert 'iter' not in fnseq.seq.__all__


def test_star_import_keeps_builtins():
    """from fnseq import * leaves zip and iter bound to the builtins."""
    namespace: dict = {}
    exec('from fnseq import *\nfrom fnseq.seq import *', namespace)  # noqa: S102

    assert 'zip' not in namespace
    assert 'iter' not in namespace
    assert 'unfold' in namespace


def test_import_runtime():
    """Test that runtime configuration can be imported."""
    from fnseq.runtime import SeqConfig, configure_logging, get_config, get_logger, init

    assert SeqConfig is not None
    assert init is not None
    assert get_config is not None
    assert configure_logging is not None
    assert get_logger is not None


def test_all_exports_exist():
    """Every name in __all__ resolves."""
    import fnseq

    for name in fnseq.__all__:
        assert hasattr(fnseq, name), name


def test_benchmark_modules_are_collectable():
    """pytest picks up benchmarks/bench_*.py when benchmarks/ is requested."""
    import fnmatch
    import tomllib
    from pathlib import Path

    root = Path(__file__).resolve().parent.parent
    options = tomllib.loads((root / 'pyproject.toml').read_text())['tool']['pytest']['ini_options']
    bench_files = sorted(path.name for path in (root / 'benchmarks').glob('*.py'))

    assert options['testpaths'] == ['tests']
    assert 'bench_seq.py' in bench_files
    assert any(fnmatch.fnmatch('bench_seq.py', pattern) for pattern in options['python_files'])
