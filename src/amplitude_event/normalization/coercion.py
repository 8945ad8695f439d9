"""
Type coercion for known event fields.

Every known field declares a FieldType and whatever is set on it is cast to
that type. Casting is lossy and never fails: strings are parsed for a
leading number ("42abc" -> 42, "abc" -> 0), collections become 0/1 when
cast to numbers, scalars become single-entry dicts when cast to a mapping.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import re
from collections.abc import Mapping
from typing import Any, Callable, Dict

from pydantic import BaseModel

from amplitude_event.schemas.known_fields import FieldType

logger = logging.getLogger(__name__)

# Leading whitespace, optional sign, digits with optional fraction, optional exponent
_NUMERIC_PREFIX = re.compile(r"[ \t\n\r\v\f]*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INTEGER_LITERAL = re.compile(r"([+-]?)0*(\d+)")

# Integers saturate at the signed 64-bit range
INT_MAX = 2**63 - 1
INT_MIN = -(2**63)
_INT_MAX_DIGITS = len(str(INT_MAX))

_COLLECTIONS = (Mapping, list, tuple, set, frozenset)


def _numeric_prefix(value: str) -> str | None:
    match = _NUMERIC_PREFIX.match(value)
    return match.group(1) if match else None


def _clamp(value: int) -> int:
    return max(INT_MIN, min(INT_MAX, value))


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def to_string(value: Any) -> str:
    """Cast to str."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    if isinstance(value, int) and not INT_MIN <= value <= INT_MAX:
        # out-of-range ints are rendered like the float they would be
        return to_string(_int_to_float(value))
    if isinstance(value, float):
        if math.isnan(value):
            return "NAN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        if value.is_integer():
            return str(int(value))
    return str(value)


def to_integer(value: Any) -> int:
    """Cast to int, truncating toward zero and saturating at 64 bits."""
    if value is None:
        return 0
    if isinstance(value, (bool, int)):
        return _clamp(int(value))
    if isinstance(value, float):
        return _clamp(int(value)) if math.isfinite(value) else 0
    if isinstance(value, (str, bytes)):
        text = value.decode("utf-8", "replace") if isinstance(value, bytes) else value
        prefix = _numeric_prefix(text)
        if prefix is None:
            logger.debug("Non-numeric value %r cast to 0", value)
            return 0
        literal = _INTEGER_LITERAL.fullmatch(prefix)
        if literal is None:
            return to_integer(float(prefix))
        sign, digits = literal.groups()
        if len(digits) > _INT_MAX_DIGITS:
            return INT_MIN if sign == "-" else INT_MAX
        return _clamp(int(sign + digits))
    if isinstance(value, _COLLECTIONS):
        return 1 if value else 0
    return to_integer(to_string(value))


def to_float(value: Any) -> float:
    """Cast to float."""
    if value is None:
        return 0.0
    if isinstance(value, (bool, int)):
        return _int_to_float(int(value))
    if isinstance(value, float):
        return float(value)
    if isinstance(value, (str, bytes)):
        text = value.decode("utf-8", "replace") if isinstance(value, bytes) else value
        prefix = _numeric_prefix(text)
        if prefix is None:
            logger.debug("Non-numeric value %r cast to 0.0", value)
            return 0.0
        return float(prefix)
    if isinstance(value, _COLLECTIONS):
        return 1.0 if value else 0.0
    return to_float(to_string(value))


def to_mapping(value: Any) -> Dict[Any, Any]:
    """Cast to dict."""
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)):
        return dict(enumerate(value))
    if isinstance(value, (set, frozenset)):
        return dict(enumerate(sorted(value, key=repr)))
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    return {0: value}


COERCERS: Dict[FieldType, Callable[[Any], Any]] = {
    FieldType.string: to_string,
    FieldType.integer: to_integer,
    FieldType.float: to_float,
    FieldType.mapping: to_mapping,
}


def coerce(field_type: FieldType, value: Any) -> Any:
    """Cast ``value`` to the Python type backing ``field_type``."""
    return COERCERS[FieldType(field_type)](value)
