"""
Field name normalization.

Resolves a caller-supplied property name to the canonical name of a known
field, so that "userId" and "user_id" both address the "user_id" field and
camelCase wire names like "productId" can be set as "product_id".

Names that do not resolve are returned untouched: they are custom property
names and stay case-sensitive.
"""

import re
from typing import Mapping, Optional

from amplitude_event.normalization.inflector import Inflector, default_inflector

# Only plain ASCII letters and underscores are worth inflecting
_INFLECTABLE = re.compile(r"[a-zA-Z_]+")


class FieldNameNormalizer:
    """
    Maps names onto the keys of a known-field table.

    Resolution order:
    - an exact key of the table
    - the underscore form of the name
    - the camelCase form of the name
    - the name itself, unchanged
    """

    def __init__(
        self,
        known_fields: Mapping[str, object],
        inflector: Optional[Inflector] = None,
    ):
        """
        Initialize the normalizer.

        Args:
            known_fields: Table keyed by canonical field name.
            inflector: Inflector used for case conversion. Defaults to the
                process-wide inflector.
        """
        self.known_fields = known_fields
        self.inflector = inflector or default_inflector

    def normalize(self, name: str) -> str:
        """
        Return the canonical field name for ``name``, or ``name`` unchanged.

        Args:
            name: Property name in any case style

        Returns:
            Known field name, or the original name for custom properties
        """
        if name in self.known_fields:
            return name

        if isinstance(name, str) and _INFLECTABLE.fullmatch(name):
            underscored = self.inflector.underscore(name)
            if underscored in self.known_fields:
                return underscored
            camel = self.inflector.camel_case(name)
            if camel in self.known_fields:
                return camel

        return name

    def is_known(self, name: str) -> bool:
        """Whether ``name`` resolves to a known field."""
        return self.normalize(name) in self.known_fields
