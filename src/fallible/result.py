"""
Constructors and combinators for `Result` values.

Every combinator has two call shapes. Given only its configuration argument it
returns a reusable transformer over Results, which slots into `pipe`
pipelines; given a Result as well it applies immediately:

    >>> increment = map(lambda x: x + 1)
    >>> increment(ok(5))
    Ok(value=6)
    >>> map(lambda x: x + 1, ok(5))
    Ok(value=6)

Combinators on the success channel (`and_then`, `map`) pass failures through
untouched, and combinators on the failure channel (`or_else`, `map_error`)
pass successes through untouched. Nothing here raises for a well-formed
Result; exceptions raised by caller-supplied functions propagate unchanged.
"""

import logging
from collections.abc import Callable, Mapping
from enum import Enum, auto
from typing import Any, Final, TypeGuard, overload

from .errors import NotAResultError
from .functions import always, pipe
from .types import Catamorphism, Err, Ok, Result

logger = logging.getLogger(__name__)


class _Missing(Enum):
    """Marks an omitted Result argument, selecting the curried call shape."""

    MISSING = auto()


_MISSING: Final = _Missing.MISSING


# Implementations take `object` for the Result argument: the `case _:` arm, not a
# runtime type checker, is what rejects non-Results with `NotAResultError`.
def _apply[T](transform: Callable[[object], T], result: object) -> Callable[[object], T] | T:
    return transform if result is _MISSING else transform(result)


# --- Constructors ---


def ok[E, A](value: A) -> Result[E, A]:
    """Wrap `value` as a success."""
    return Ok(value)


def err[E, A](failure: E) -> Result[E, A]:
    """Wrap `failure` as a failure."""
    return Err(failure)


def is_ok[A](result: object) -> TypeGuard[Ok[A]]:
    match result:
        case Ok():
            return True
        case Err():
            return False
        case _:
            raise NotAResultError(result)


def is_err[E](result: object) -> TypeGuard[Err[E]]:
    return not is_ok(result)


# --- Elimination ---


@overload
def cata[E, A, B](
    matcher: Catamorphism[E, A, B] | Mapping[str, Any],
) -> Callable[[Result[E, A]], B]: ...
@overload
def cata[E, A, B](matcher: Catamorphism[E, A, B] | Mapping[str, Any], result: Result[E, A]) -> B: ...
def cata[E, A, B](
    matcher: object,
    result: object = _MISSING,
) -> Callable[[Result[E, A]], B] | B:
    """
    Fold a Result into a single value by dispatching on its variant.

    `matcher` supplies an `ok` handler for the success value and an `err`
    handler for the failure. A plain ``{"ok": ..., "err": ...}`` mapping is
    accepted too; it is validated when `cata` is called, before any Result is
    seen, so a malformed matcher fails even in the curried form.
    """
    handlers = (
        matcher if isinstance(matcher, Catamorphism) else Catamorphism.from_mapping(matcher)
    )

    def fold(result: object) -> B:
        match result:
            case Ok(value):
                return handlers.ok(value)
            case Err(failure):
                return handlers.err(failure)
            case _:
                logger.debug("cata received non-Result %s", type(result).__name__)
                raise NotAResultError(result)

    return _apply(fold, result)


# --- Success channel ---


@overload
def and_then[E, A, B](
    fn: Callable[[A], Result[E, B]],
) -> Callable[[Result[E, A]], Result[E, B]]: ...
@overload
def and_then[E, A, B](fn: Callable[[A], Result[E, B]], result: Result[E, A]) -> Result[E, B]: ...
def and_then[E, A, B](
    fn: Callable[[A], Result[E, B]],
    result: object = _MISSING,
) -> Callable[[Result[E, A]], Result[E, B]] | Result[E, B]:
    """Chain a fallible step onto a success; a failure skips `fn` and is returned as is."""

    def mapper(result: object) -> Result[E, B]:
        match result:
            case Ok(value):
                return fn(value)
            case Err():
                return result
            case _:
                raise NotAResultError(result)

    return _apply(mapper, result)


@overload
def map[E, A, B](fn: Callable[[A], B]) -> Callable[[Result[E, A]], Result[E, B]]: ...
@overload
def map[E, A, B](fn: Callable[[A], B], result: Result[E, A]) -> Result[E, B]: ...
def map[E, A, B](
    fn: Callable[[A], B],
    result: object = _MISSING,
) -> Callable[[Result[E, A]], Result[E, B]] | Result[E, B]:
    """Transform the success value; failures pass through without calling `fn`."""
    make_it_so: Callable[[A], Result[E, B]] = pipe(fn, ok)
    return _apply(and_then(make_it_so), result)


# --- Failure channel ---


@overload
def or_else[E1, E2, A](
    fn: Callable[[E1], Result[E2, A]],
) -> Callable[[Result[E1, A]], Result[E2, A]]: ...
@overload
def or_else[E1, E2, A](fn: Callable[[E1], Result[E2, A]], result: Result[E1, A]) -> Result[E2, A]: ...
def or_else[E1, E2, A](
    fn: Callable[[E1], Result[E2, A]],
    result: object = _MISSING,
) -> Callable[[Result[E1, A]], Result[E2, A]] | Result[E2, A]:
    """Recover from a failure with `fn`; a success skips `fn` and is returned as is."""

    def mapper(result: object) -> Result[E2, A]:
        match result:
            case Ok():
                return result
            case Err(failure):
                return fn(failure)
            case _:
                raise NotAResultError(result)

    return _apply(mapper, result)


@overload
def map_error[E1, E2, A](fn: Callable[[E1], E2]) -> Callable[[Result[E1, A]], Result[E2, A]]: ...
@overload
def map_error[E1, E2, A](fn: Callable[[E1], E2], result: Result[E1, A]) -> Result[E2, A]: ...
def map_error[E1, E2, A](
    fn: Callable[[E1], E2],
    result: object = _MISSING,
) -> Callable[[Result[E1, A]], Result[E2, A]] | Result[E2, A]:
    """Transform the failure value; successes pass through without calling `fn`."""
    make_it_so: Callable[[E1], Result[E2, A]] = pipe(fn, err)
    return _apply(or_else(make_it_so), result)


# --- Unwrapping ---


@overload
def lazy_unwrap[E, A](default_provider: Callable[[], A]) -> Callable[[Result[E, A]], A]: ...
@overload
def lazy_unwrap[E, A](default_provider: Callable[[], A], result: Result[E, A]) -> A: ...
def lazy_unwrap[E, A](
    default_provider: Callable[[], A],
    result: object = _MISSING,
) -> Callable[[Result[E, A]], A] | A:
    """
    Extract the success value, or compute a fallback from `default_provider`.

    The provider is only called for a failure, and then exactly once.
    """

    def unwrapper(result: object) -> A:
        match result:
            case Ok(value):
                return value
            case Err(failure):
                logger.debug("Unwrapping Err[%s]; using default provider", type(failure).__name__)
                return default_provider()
            case _:
                raise NotAResultError(result)

    return _apply(unwrapper, result)


@overload
def unwrap[E, A](default_value: A) -> Callable[[Result[E, A]], A]: ...
@overload
def unwrap[E, A](default_value: A, result: Result[E, A]) -> A: ...
def unwrap[E, A](
    default_value: A,
    result: object = _MISSING,
) -> Callable[[Result[E, A]], A] | A:
    """Extract the success value, or return `default_value` (already evaluated) for a failure."""
    return _apply(lazy_unwrap(always(default_value)), result)


__all__ = [
    "and_then",
    "cata",
    "err",
    "is_err",
    "is_ok",
    "lazy_unwrap",
    "map",
    "map_error",
    "ok",
    "or_else",
    "unwrap",
]
