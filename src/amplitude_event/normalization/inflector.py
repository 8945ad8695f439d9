"""
Inflector.

Converts names between underscore_style and camelCaseStyle. Every conversion
is memoized: field names form a small, repeated set, so the cache is
additive-only and never evicted.
"""

from __future__ import annotations

import re
import string
import threading
from typing import Callable, Dict, Optional

_UPPERCASE = re.compile(r"([A-Z])")

# Case changes only touch ASCII letters
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class InflectorCache:
    """
    Memoization store with one mapping per conversion kind.

    Lookups and inserts are guarded by a lock so a single cache can be shared
    by every thread in the process.
    """

    def __init__(self):
        self._store: Dict[str, Dict[str, str]] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, kind: str, value: str, compute: Callable[[str], str]) -> str:
        """Return the cached conversion of ``value``, computing it on first use."""
        with self._lock:
            bucket = self._store.setdefault(kind, {})
            if value not in bucket:
                bucket[value] = compute(value)
            return bucket[value]

    def size(self, kind: Optional[str] = None) -> int:
        """Number of cached entries, for one conversion kind or in total."""
        with self._lock:
            if kind is not None:
                return len(self._store.get(kind, {}))
            return sum(len(bucket) for bucket in self._store.values())

    def __contains__(self, item) -> bool:
        kind, value = item
        with self._lock:
            return value in self._store.get(kind, {})


class Inflector:
    """Case-style conversions backed by an InflectorCache."""

    def __init__(self, cache: Optional[InflectorCache] = None):
        self.cache = cache if cache is not None else InflectorCache()

    def underscore(self, value: str = "") -> str:
        """
        Convert someValue to some_value.

        An underscore is inserted before every uppercase letter, so a leading
        capital yields a leading underscore: "DeviceId" -> "_device_id".
        """
        return self.cache.get_or_compute("underscore", value, _underscore)

    def camel_case(self, value: str = "") -> str:
        """Convert some_value to someValue."""
        return self.cache.get_or_compute("camel_case", value, _camel_case)


def _underscore(value: str) -> str:
    return _UPPERCASE.sub(r"_\1", value).translate(_TO_LOWER)


def _camel_case(value: str) -> str:
    words = value.replace("_", " ").split(" ")
    # only the first letter of each word changes; "device_ID" -> "deviceID"
    titled = " ".join(w[:1].translate(_TO_UPPER) + w[1:] for w in words)
    return (titled[:1].translate(_TO_LOWER) + titled[1:]).replace(" ", "")


# Process-wide default
default_cache = InflectorCache()
default_inflector = Inflector(default_cache)


def underscore(value: str = "") -> str:
    """Module-level shortcut for ``default_inflector.underscore``."""
    return default_inflector.underscore(value)


def camel_case(value: str = "") -> str:
    """Module-level shortcut for ``default_inflector.camel_case``."""
    return default_inflector.camel_case(value)
