"""
Defines the `Result` algebraic data type and the handler record used to fold it.

`Result` is a sum type representing either a success (`Ok`) or a failure
(`Err`). Making failure part of a function's return type keeps every outcome
explicit: callers cannot forget the failure path because the value they get
back has to be taken apart before the success payload is reachable.

The two variants are frozen, slotted dataclasses. They carry no behaviour of
their own; all dispatch happens in `fallible.result` through exhaustive
pattern matching over the closed union.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import ClassVar, Literal

from . import config
from .errors import MatcherError


@dataclass(frozen=True, slots=True)
class Ok[A]:
    """Represents a successful outcome containing a value."""

    kind: ClassVar[Literal["ok"]] = config.OK_TAG

    value: A


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failure outcome containing an error."""

    kind: ClassVar[Literal["err"]] = config.ERR_TAG

    failure: E


# The Result type is a union of Ok and Err, representing either success or failure.
type Result[E, A] = Ok[A] | Err[E]


@dataclass(frozen=True, slots=True)
class Catamorphism[E, A, B]:
    """A pair of handlers reducing either variant of a Result to a single `B`."""

    ok: Callable[[A], B]
    err: Callable[[E], B]

    @classmethod
    def from_mapping(cls, mapping: object) -> "Catamorphism[E, A, B]":
        """
        Build a matcher from a ``{"ok": ..., "err": ...}`` mapping.

        Raises `MatcherError` naming every handler that is missing or not
        callable, or both handlers when `mapping` is not a mapping at all.
        """
        tags = (config.OK_TAG, config.ERR_TAG)
        if not isinstance(mapping, Mapping):
            raise MatcherError(
                tags, f"expected a Catamorphism or a mapping, got {type(mapping).__name__}"
            )

        missing = [tag for tag in tags if tag not in mapping]
        if missing:
            raise MatcherError(missing, "missing from matcher")

        not_callable = [tag for tag in tags if not callable(mapping[tag])]
        if not_callable:
            raise MatcherError(not_callable, "handler is not callable")

        return cls(ok=mapping[config.OK_TAG], err=mapping[config.ERR_TAG])


__all__ = ["Catamorphism", "Err", "Ok", "Result"]
