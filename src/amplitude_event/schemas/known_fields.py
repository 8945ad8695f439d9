"""
amplitude_event.schemas.known_fields

Pydantic models for the known-field table.

The table lists the built-in event fields of the Amplitude HTTP API and the
type every value is coerced to when it is set on an Event. It is loaded from
YAML (see configs/known_fields.yaml) and validated here.

Requires: pydantic>=2
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, Field, field_validator

# ----------------------------
# Enums
# ----------------------------


class FieldType(str, Enum):
    """Type tag declared for a known field."""

    string = "string"
    integer = "integer"
    float = "float"
    mapping = "mapping"


# ----------------------------
# Models
# ----------------------------


class KnownField(BaseModel):
    name: str = Field(..., min_length=1, description="Wire name expected by the API.")
    type: FieldType
    description: str | None = None

    @field_validator("name")
    @classmethod
    def _no_surrounding_whitespace(cls, v: str) -> str:
        if v != v.strip():
            raise ValueError(f"field name {v!r} has surrounding whitespace")
        return v


class KnownFieldTable(BaseModel):
    """Top-level contract of the known-field YAML file."""

    version: int = Field(default=1, ge=1)
    fields: list[KnownField] = Field(..., min_length=1)

    @field_validator("fields")
    @classmethod
    def _unique_names(cls, v: list[KnownField]) -> list[KnownField]:
        seen: set[str] = set()
        dupes = []
        for f in v:
            if f.name in seen:
                dupes.append(f.name)
            seen.add(f.name)
        if dupes:
            raise ValueError(f"duplicate field names: {sorted(set(dupes))}")
        return v

    def as_mapping(self) -> Mapping[str, FieldType]:
        """Return a read-only ``name -> FieldType`` mapping, in file order."""
        return MappingProxyType({f.name: f.type for f in self.fields})
