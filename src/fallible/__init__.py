import contextlib
import logging

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from . import config

    if os.environ.get(config.BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(config.BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

from .config import LOGGER_NAME
from .errors import FallibleError, MatcherError, NotAResultError
from .functions import always, identity, pipe
from .result import (
    and_then,
    cata,
    err,
    is_err,
    is_ok,
    lazy_unwrap,
    map,
    map_error,
    ok,
    or_else,
    unwrap,
)
from .types import Catamorphism, Err, Ok, Result

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__: list[str] = [
    "Catamorphism",
    "Err",
    "FallibleError",
    "MatcherError",
    "NotAResultError",
    "Ok",
    "Result",
    "always",
    "and_then",
    "cata",
    "err",
    "identity",
    "is_err",
    "is_ok",
    "lazy_unwrap",
    "map",
    "map_error",
    "ok",
    "or_else",
    "pipe",
    "unwrap",
]
