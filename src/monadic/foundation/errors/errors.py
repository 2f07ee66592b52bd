"""Failure taxonomy for callback-driven combinators.

Combinators other than map/flat_map never let a callback failure escape. Each
recovered failure is described by a CallbackFailure record that travels with
the log entry, so log consumers can filter on kind and combinator.
Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .types import JsonDict


class FailureKind(StrEnum):
    """Classification of recovered callback failures.

    PREDICATE, SUPPLIER and OBSERVATION are raised callbacks.
    MISSING_FALLBACK is a warning-level degradation, not an exception.
    """
    PREDICATE = "PREDICATE"
    SUPPLIER = "SUPPLIER"
    OBSERVATION = "OBSERVATION"
    MISSING_FALLBACK = "MISSING_FALLBACK"


class CallbackFailure(BaseModel):
    """Structured record of a callback failure recovered inside a combinator.

    Attributes:
        kind: Failure classification
        combinator: Name of the combinator that recovered (e.g. "filter")
        family: Container family the combinator ran on
        message: Human-readable description
        error_type: Exception class name, None for non-exception failures
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        json_schema_extra={
            "title": "Callback Failure",
            "description": "Recovered failure of a user-supplied callback",
            "examples": [{
                "kind": "PREDICATE",
                "combinator": "filter",
                "family": "Maybe",
                "message": "division by zero",
                "error_type": "ZeroDivisionError",
            }],
        },
    )

    kind: FailureKind
    combinator: Annotated[str, Field(min_length=1, description="Combinator that recovered")]
    family: str = Field(default="", description="Container family name")
    message: str = Field(default="", description="Failure description")
    error_type: str | None = Field(default=None, description="Exception class name")

    @computed_field
    @property
    def recovered_to_empty(self) -> bool:
        """Whether the combinator degraded the instance to the family's empty()."""
        return self.kind is not FailureKind.OBSERVATION

    @classmethod
    def from_exception(cls, kind: FailureKind, combinator: str, exc: BaseException, *, family: str = "") -> Self:
        """Build a failure record from a raised exception."""
        return cls(kind=kind, combinator=combinator, family=family,
                   message=str(exc) or type(exc).__name__, error_type=type(exc).__name__)

    def to_log_context(self) -> JsonDict:
        """Flatten into log context keys (drops empty values)."""
        return {k: v for k, v in self.model_dump(mode="json").items() if v not in (None, "")}

    def __str__(self) -> str:
        where = f"{self.family}.{self.combinator}" if self.family else self.combinator
        return f"[{self.kind}] {where}: {self.message}"


class MonadicError(Exception):
    """Base exception for the monadic package."""


class NoValueError(MonadicError, LookupError):
    """Raised when a value is requested from an absent instance."""

    def __init__(self, family: str = "", message: str | None = None) -> None:
        self.family = family
        super().__init__(message or f"no value present{f' in {family}' if family else ''}")
