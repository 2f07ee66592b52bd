"""Testing utilities for families built on the Monadic contract.

- capture_logs: record failure reports emitted by combinators
- check_adapter / check_functor_laws / check_monad_laws / assert_lawful: law checks
"""

from .capture import LogCapture, RecordingRenderer, capture_logs
from .laws import assert_lawful, check_adapter, check_functor_laws, check_monad_laws

__all__ = [
    "LogCapture", "RecordingRenderer", "capture_logs",
    "assert_lawful", "check_adapter", "check_functor_laws", "check_monad_laws",
]
