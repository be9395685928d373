"""
Configuration for the fallible package.
"""

from typing import Final, Literal

# --- Variant Tags ---
OK_TAG: Final[Literal["ok"]] = "ok"
ERR_TAG: Final[Literal["err"]] = "err"

# --- Logging ---
LOGGER_NAME: Final[str] = "fallible"

# --- Runtime Type Checking (beartype) ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "FALLIBLE_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "FALLIBLE_BEARTYPE_ALL"

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "ERR_TAG",
    "LOGGER_NAME",
    "OK_TAG",
]
