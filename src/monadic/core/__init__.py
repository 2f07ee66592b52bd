"""Core abstraction: Witness/Adapter, the Monadic combinator interface, and callback outcomes."""

from .monadic import Action, Consumer, Monadic, cast, identity
from .ops import first_present, sequence, traverse
from .outcome import Err, Ok, Outcome, attempt
from .witness import Adapter, Witness

__all__ = [
    # Family mechanism
    "Witness", "Adapter",
    # Combinator interface
    "Monadic", "cast", "identity", "Action", "Consumer",
    # Callback outcomes
    "Outcome", "Ok", "Err", "attempt",
    # Collection ops
    "sequence", "traverse", "first_present",
]
