"""Error taxonomy for monadic combinators.

- FailureKind: classification of recovered callback failures
- CallbackFailure: structured, frozen failure record attached to log entries
- MonadicError/NoValueError: exceptions raised by the package itself
"""

from .errors import CallbackFailure, FailureKind, MonadicError, NoValueError
from .types import JsonDict, JsonMapping, JsonPrimitive, JsonValue

__all__ = [
    "CallbackFailure", "FailureKind",
    "MonadicError", "NoValueError",
    "JsonDict", "JsonMapping", "JsonPrimitive", "JsonValue",
]
