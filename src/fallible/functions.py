"""
Thin functional helpers consumed by the Result algebra.

`pipe` composes left to right and comes straight from `returns`:
``pipe(f, g)(x) == g(f(x))``.
"""

from collections.abc import Callable

from returns.pipeline import pipe


def always[A](value: A) -> Callable[..., A]:
    """Return a function that ignores its arguments and always yields `value`."""
    return lambda *_args, **_kwargs: value


def identity[A](value: A) -> A:
    return value


__all__ = ["always", "identity", "pipe"]
