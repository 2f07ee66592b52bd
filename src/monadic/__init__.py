"""Monadic - one combinator vocabulary for every container family.

A family (optional value, fallible computation, ...) implements three
primitives and names its Witness; in return it gets filter, recovery and
observation combinators whose behaviour is identical across families,
including what happens when a user callback raises.

Quick Start:
    >>> from monadic import Nothing, Some, Try
    >>>
    >>> Some(5).map(lambda x: x + 1).filter(lambda x: x > 3)
    Some(6)
    >>> Nothing().or_else(10)
    Some(10)
    >>> Some(5).filter(lambda x: x > 10, Some(-1))
    Some(-1)
    >>> Try.of(int, "oops").or_else_get(lambda: 0)
    Success(0)

Defining a Family:
    >>> from monadic import Monadic, Witness
    >>>
    >>> class BoxKind(Witness["BoxKind"]):
    ...     @classmethod
    ...     def adapter(cls): return BoxAdapter()
    >>>
    >>> class Box(Monadic[BoxKind, T]):
    ...     witness = BoxKind
    ...     def is_present(self): ...
    ...     def map(self, f): ...
    ...     def flat_map(self, f): ...

Failure Policy:
    map/flat_map propagate exceptions (unless the family says otherwise).
    filter/or_else_get/or_else_m degrade to the family's empty() and log an
    error; peek*/inspect* log and return the instance unchanged.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .core import (
    Action,
    Adapter,
    Consumer,
    Err,
    Monadic,
    Ok,
    Outcome,
    Witness,
    attempt,
    cast,
    first_present,
    identity,
    sequence,
    traverse,
)

# Families
from .families import Failure, Maybe, MaybeKind, Nothing, Some, Success, Try, TryKind

# Foundation
from .foundation import CallbackFailure, FailureKind, MonadicError, MonadicSettings, NoValueError, get_settings

# Observability
from .observability import BoundLogger, LogSink, configure_logging, get_logger, logger

__all__ = [
    "__version__",
    # Family mechanism
    "Witness", "Adapter",
    # Combinator interface
    "Monadic", "cast", "identity", "Action", "Consumer",
    # Callback outcomes
    "Outcome", "Ok", "Err", "attempt",
    # Collection ops
    "sequence", "traverse", "first_present",
    # Reference families
    "Maybe", "MaybeKind", "Some", "Nothing",
    "Try", "TryKind", "Success", "Failure",
    # Errors
    "CallbackFailure", "FailureKind", "MonadicError", "NoValueError",
    # Config
    "MonadicSettings", "get_settings",
    # Logging
    "BoundLogger", "LogSink", "configure_logging", "get_logger", "logger",
]
