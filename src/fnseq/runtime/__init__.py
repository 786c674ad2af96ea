"""fnseq.runtime: configuration and structured logging."""

from fnseq.runtime._config import SeqConfig, get_config, init
from fnseq.runtime._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

__all__ = [
    'SeqConfig',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'remove_log_hook',
]
