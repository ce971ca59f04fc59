"""Logging setup and scheme catalog loading.

Environment variables:
    STORE_LOG_LEVEL: Minimum log level name, e.g. "DEBUG" (default: INFO)
    STORE_SCHEMES_FILE: Path to a YAML scheme catalog (default: none)

A scheme catalog lists schemes in application order::

    schemes:
      - type: multi_buy
        target: Beans
      - type: grouped
        group_a: [Ketchup]
        group_b: [Beer]
        percent: 0.10
      - type: coupon
        target: Beans
        percent: 0.15
      - type: amount_off
        target: Pencil
        amount_cents: 25
      - type: rain_check
        target: Beans
        price_cents: 150
"""

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Optional, Union

import structlog
import yaml

from .errors import ConfigurationError, errmsg
from .schemes import (
    AmountOffScheme,
    CouponScheme,
    GroupedScheme,
    MultiBuyScheme,
    PricingScheme,
    RainCheckScheme,
)

LOG_LEVEL_ENV = "STORE_LOG_LEVEL"
SCHEMES_FILE_ENV = "STORE_SCHEMES_FILE"

logger = structlog.get_logger()

SchemeBuilder = Callable[[Mapping[str, Any]], PricingScheme]


def get_log_level() -> int:
    """Resolve the log level from ``STORE_LOG_LEVEL``, falling back to INFO."""
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[int] = None) -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            get_log_level() if level is None else level
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _multi_buy(entry: Mapping[str, Any]) -> PricingScheme:
    return MultiBuyScheme(entry["target"], int(entry.get("group_size", 3)))


def _grouped(entry: Mapping[str, Any]) -> PricingScheme:
    return GroupedScheme(
        _names(entry["group_a"]),
        _names(entry["group_b"]),
        float(entry["percent"]),
    )


def _coupon(entry: Mapping[str, Any]) -> PricingScheme:
    return CouponScheme(entry["target"], float(entry["percent"]))


def _amount_off(entry: Mapping[str, Any]) -> PricingScheme:
    return AmountOffScheme(entry["target"], int(entry["amount_cents"]))


def _rain_check(entry: Mapping[str, Any]) -> PricingScheme:
    return RainCheckScheme(entry["target"], int(entry["price_cents"]))


def _names(value: Any) -> list[str]:
    # A bare string is one name, not a set of letters.
    if isinstance(value, str):
        return [value]
    return [str(name) for name in value]


SCHEME_BUILDERS: dict[str, SchemeBuilder] = {
    "multi_buy": _multi_buy,
    "grouped": _grouped,
    "coupon": _coupon,
    "amount_off": _amount_off,
    "rain_check": _rain_check,
}


def scheme_from_config(entry: Mapping[str, Any]) -> PricingScheme:
    """Build one scheme from a catalog entry.

    Raises:
        ConfigurationError: If the type is unknown or a setting is missing.
    """
    scheme_type = entry.get("type", "")
    builder = SCHEME_BUILDERS.get(scheme_type)
    if builder is None:
        raise ConfigurationError(f"{errmsg.UNKNOWN_SCHEME}: {scheme_type!r}")

    try:
        return builder(entry)
    except KeyError as e:
        raise ConfigurationError(errmsg.MISSING_KEY, e) from e
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {scheme_type} scheme", e) from e


def schemes_from_config(document: Any) -> list[PricingScheme]:
    """Build schemes from a parsed catalog document, preserving order."""
    if not isinstance(document, Mapping) or not isinstance(document.get("schemes"), list):
        raise ConfigurationError(errmsg.CATALOG_INVALID)

    entries = document["schemes"]
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ConfigurationError(errmsg.CATALOG_INVALID)
    return [scheme_from_config(entry) for entry in entries]


def load_schemes(path: Union[str, Path]) -> list[PricingScheme]:
    """Load schemes from a YAML catalog file."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read scheme catalog {path}", e) from e

    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Cannot parse scheme catalog {path}", e) from e

    schemes = schemes_from_config(document)
    logger.info("schemes_loaded", path=str(path), count=len(schemes))
    return schemes


def load_schemes_from_env() -> list[PricingScheme]:
    """Load the catalog named by ``STORE_SCHEMES_FILE``; no schemes if unset."""
    path = os.environ.get(SCHEMES_FILE_ENV)
    if not path:
        return []
    return load_schemes(path)
