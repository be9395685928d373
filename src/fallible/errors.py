"""
Exceptions raised when the Result algebra is used outside its domain.

Failures that belong to the caller's domain always travel through `Err`;
the classes here only signal programming errors such as handing a combinator
something that is not a Result.
"""

from collections.abc import Iterable
from typing import Any


class FallibleError(Exception):
    """Base class for all errors raised by the fallible package."""


class NotAResultError(FallibleError, TypeError):
    """Raised when a combinator receives a value that is neither `Ok` nor `Err`."""

    def __init__(self, received: Any):
        self.received = received
        super().__init__(f"Expected Ok or Err, got {type(received).__name__}")


class MatcherError(FallibleError, TypeError):
    """Raised when a catamorphism matcher lacks a callable `ok` or `err` handler."""

    def __init__(self, keys: Iterable[str], reason: str):
        self.keys = tuple(keys)
        super().__init__(f"Invalid matcher handler(s) {', '.join(self.keys)}: {reason}")


__all__ = ["FallibleError", "MatcherError", "NotAResultError"]
