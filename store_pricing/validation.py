"""Validation helpers for construction-time checks.

Items and schemes call these from ``__init__`` so that bad settings
fail before anything is scanned. Numeric checks also reject nan and
infinity, which compare false against every bound.
"""

import math
from collections.abc import Collection
from typing import Any

from .errors import ConfigurationError


def require_not_empty(value: Any, error_msg: str) -> None:
    """Require that a string or collection is non-empty."""
    if not value:
        raise ConfigurationError(error_msg)


def require_finite(value: float, error_msg: str) -> None:
    """Require that a value is a finite number."""
    if not math.isfinite(value):
        raise ConfigurationError(error_msg)


def require_positive(value: float, error_msg: str) -> None:
    """Require that a value is finite and greater than zero."""
    require_finite(value, error_msg)
    if value <= 0:
        raise ConfigurationError(error_msg)


def require_non_negative(value: float, error_msg: str) -> None:
    """Require that a value is finite and zero or greater."""
    require_finite(value, error_msg)
    if value < 0:
        raise ConfigurationError(error_msg)


def require_fraction(value: float, error_msg: str) -> None:
    """Require that a value lies in the closed range [0, 1]."""
    require_finite(value, error_msg)
    if value < 0 or value > 1:
        raise ConfigurationError(error_msg)


def require_at_least(value: int, minimum: int, error_msg: str) -> None:
    """Require that a value is ``minimum`` or greater."""
    if value < minimum:
        raise ConfigurationError(error_msg)


def require_names(names: Collection[str], error_msg: str) -> None:
    """Require a non-empty collection of non-empty names."""
    if isinstance(names, str) or not names or not all(names):
        raise ConfigurationError(error_msg)
