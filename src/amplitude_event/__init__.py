"""
amplitude_event: event records for the Amplitude HTTP API.

This package provides:
- Event: one event's data, with built-in field normalization and casting
- ABSENT: marker returned by Event.get() for properties that are not set
- Inflector helpers: underscore / camel_case name conversion
"""

from .schemas.event import ABSENT, Event
from .schemas.known_fields import FieldType
from .normalization.inflector import Inflector, InflectorCache, camel_case, underscore

__all__ = [
    "ABSENT",
    "Event",
    "FieldType",
    "Inflector",
    "InflectorCache",
    "camel_case",
    "underscore",
]
