"""Reference container families built on the Monadic contract.

- Maybe: optional value (Some/Nothing); map lets exceptions escape
- Try: fallible computation (Success/Failure); map captures exceptions
"""

from .maybe import Maybe, MaybeAdapter, MaybeKind, Nothing, Some
from .try_ import Failure, Success, Try, TryAdapter, TryKind

__all__ = [
    "Maybe", "MaybeKind", "MaybeAdapter", "Some", "Nothing",
    "Try", "TryKind", "TryAdapter", "Success", "Failure",
]
