"""
Normalization helpers for event data.

This package provides:
- Inflector: memoized underscore / camelCase conversion
- FieldNameNormalizer: resolves property names to known field names
- coerce: casts values to a known field's declared type
"""

from .inflector import (
    Inflector,
    InflectorCache,
    camel_case,
    default_inflector,
    underscore,
)
from .field_names import FieldNameNormalizer
from .coercion import COERCERS, coerce, to_float, to_integer, to_mapping, to_string

__all__ = [
    # Inflector
    "Inflector",
    "InflectorCache",
    "default_inflector",
    "underscore",
    "camel_case",
    # Field names
    "FieldNameNormalizer",
    # Coercion
    "COERCERS",
    "coerce",
    "to_string",
    "to_integer",
    "to_float",
    "to_mapping",
]
