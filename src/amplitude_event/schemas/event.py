"""
Event record for the Amplitude HTTP API.

Holds the data of a single event and serializes it to the JSON object the
API expects. Built-in fields can be addressed with their wire name
("user_id") or its camelCase / underscore spelling ("userId"); the value is
cast to the type declared for the field. Any other name is a custom property
and is stored verbatim under ``event_properties``.

Example:
    >>> event = Event({"userId": "u1", "eventType": "signup", "plan name": "pro"})
    >>> event.to_array()
    {'user_id': 'u1', 'event_type': 'signup', 'event_properties': {'plan name': 'pro'}}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from amplitude_event.configs.config import Config
from amplitude_event.normalization.coercion import coerce
from amplitude_event.normalization.field_names import FieldNameNormalizer
from amplitude_event.normalization.inflector import Inflector
from amplitude_event.schemas.known_fields import FieldType

logger = logging.getLogger(__name__)

EVENT_PROPERTIES = "event_properties"
USER_PROPERTIES = "user_properties"


class _Absent:
    """Marker for a property that is not set."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Any = _Absent()


class Event:
    """
    A single analytics event.

    Built-in fields are stored under their wire name with the declared type;
    custom properties are kept in a nested ``event_properties`` dict under the
    exact name they were given (custom names are case-sensitive).

    Setting, reading and removing properties never raises: unknown names go
    to ``event_properties`` and values that do not fit a field's type are
    cast with lossy semantics (``"42abc"`` -> ``42``, ``"abc"`` -> ``0``).
    """

    def __init__(
        self,
        properties: Optional[Mapping[str, Any]] = None,
        *,
        known_fields: Optional[Mapping[str, FieldType]] = None,
        inflector: Optional[Inflector] = None,
    ):
        """
        Initialize the event.

        Args:
            properties: Initial properties, applied like set_properties().
            known_fields: Table of built-in fields and their types. Defaults
                to the table loaded by Config.load_known_fields().
            inflector: Inflector used for name normalization. Defaults to the
                process-wide inflector.
        """
        self.known_fields = known_fields if known_fields is not None else Config.load_known_fields()
        self._normalizer = FieldNameNormalizer(self.known_fields, inflector)
        self._data: Dict[str, Any] = {}

        if properties:
            self.set_properties(properties)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set(self, name: str, value: Any) -> "Event":
        """
        Set a property.

        If ``name`` matches a built-in field (as is, or in its underscore /
        camelCase spelling) the value is cast to the field's type and stored
        under the field's wire name. Otherwise it is stored untouched in
        ``event_properties[name]``.
        """
        key = self._normalizer.normalize(name)
        field_type = self.known_fields.get(key)

        if field_type is None:
            logger.debug("Setting custom property %r", name, extra={"field": name})
            self._data.setdefault(EVENT_PROPERTIES, {})[name] = value
            return self

        self._data[key] = coerce(field_type, value)
        return self

    def set_properties(self, properties: Mapping[str, Any]) -> "Event":
        """Set every ``name -> value`` pair, in order. See set()."""
        for name, value in properties.items():
            self.set(name, value)
        return self

    def set_user_properties(self, user_properties: Mapping[str, Any]) -> "Event":
        """Merge ``user_properties`` into the existing user properties."""
        current = self.get(USER_PROPERTIES) or {}
        return self.set(USER_PROPERTIES, {**current, **user_properties})

    def unset_property(self, name: str) -> "Event":
        """Remove a built-in field or custom property. Missing names are ignored."""
        key = self._normalizer.normalize(name)
        if key in self.known_fields:
            self._data.pop(key, None)
        else:
            custom = self._data.get(EVENT_PROPERTIES)
            if isinstance(custom, dict):
                custom.pop(key, None)
        return self

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, name: str, default: Any = ABSENT) -> Any:
        """
        Get a built-in field or custom property.

        Built-in fields may be named in either case style; custom property
        names are matched exactly.

        Returns:
            The stored value, or ``default`` (ABSENT unless given) when the
            property is not set.
        """
        key = self._normalizer.normalize(name)
        if key in self._data:
            return self._data[key]

        custom = self._data.get(EVENT_PROPERTIES)
        if isinstance(custom, dict) and key in custom:
            return custom[key]

        return default

    def is_property_set(self, name: str) -> bool:
        """Whether get(name) would find a value."""
        return self.get(name) is not ABSENT

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_array(self) -> Dict[str, Any]:
        """
        Return the event as a plain dict keyed by wire names.

        The dict and the nested mappings are copies; mutating them does not
        change the event.
        """
        return {
            key: dict(value) if isinstance(value, dict) else value
            for key, value in self._data.items()
        }

    def serialize(self) -> Dict[str, Any]:
        """JSON-ready representation of the event, see to_array()."""
        return self.to_array()

    def to_json(self, **kwargs: Any) -> str:
        """Serialize the event to JSON text. Keyword arguments go to json.dumps."""
        kwargs.setdefault("ensure_ascii", False)
        return json.dumps(self.serialize(), **kwargs)

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> Any:
        value = self.get(name)
        if value is ABSENT:
            raise KeyError(name)
        return value

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self.unset_property(name)

    def __contains__(self, name: object) -> bool:
        return self.is_property_set(name)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
