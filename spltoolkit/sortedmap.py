"""A string-keyed map whose keys are kept in sorted order."""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Any, Iterator


class SortedMap:
    """A map from strings to values that iterates its keys in order."""

    def __init__(self) -> None:
        self._keys: list[str] = []
        self._values: dict[str, Any] = {}

    @staticmethod
    def _check_key(key: object) -> None:
        if not isinstance(key, str):
            raise TypeError(
                f"SortedMap keys must be strings, not {type(key).__name__}"
            )

    def put(self, key: str, value: Any) -> None:
        """Associate value with key, replacing any earlier value."""
        self._check_key(key)
        if key not in self._values:
            insort(self._keys, key)
        self._values[key] = value

    def get(self, key: str) -> Any:
        """Return the value for key, or None if the key is absent."""
        self._check_key(key)
        return self._values.get(key)

    def remove(self, key: str) -> None:
        """Remove key from the map; absent keys are ignored."""
        self._check_key(key)
        if key in self._values:
            del self._values[key]
            del self._keys[bisect_left(self._keys, key)]

    def contains_key(self, key: str) -> bool:
        """Return True if key has an entry in the map."""
        self._check_key(key)
        return key in self._values

    def clear(self) -> None:
        """Remove every entry."""
        self._keys.clear()
        self._values.clear()

    def clone(self) -> SortedMap:
        """Return a shallow copy of the map."""
        copy = SortedMap()
        copy._keys = list(self._keys)
        copy._values = dict(self._values)
        return copy

    def is_empty(self) -> bool:
        """Return True if the map has no entries."""
        return not self._keys

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield (key, value) pairs in ascending key order."""
        for key in list(self._keys):
            yield key, self._values[key]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._values

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"SortedMap({{{body}}})"