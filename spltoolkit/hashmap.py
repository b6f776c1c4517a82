"""A string-keyed map built on a chained hash table."""

from __future__ import annotations

from typing import Any, Iterator

_INITIAL_BUCKET_COUNT = 101
_HASH_SEED = 5381
_HASH_MULTIPLIER = 33
_HASH_MASK = 0x7FFFFFFF
_WORD_MASK = 0xFFFFFFFF


def _hash_code(key: str) -> int:
    """Return the non-negative hash code of a key."""
    value = _HASH_SEED
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (_HASH_MULTIPLIER * value + signed) & _WORD_MASK
    return value & _HASH_MASK


class HashMap:
    """A map from strings to values.

    Each bucket holds its entries with the most recently added first;
    iteration walks the buckets in order.
    """

    def __init__(self) -> None:
        self._buckets: list[list[list[Any]]] = [
            [] for _ in range(_INITIAL_BUCKET_COUNT)
        ]
        self._count = 0

    def _bucket(self, key: str) -> list[list[Any]]:
        if not isinstance(key, str):
            raise TypeError(f"HashMap keys must be strings, not {type(key).__name__}")
        return self._buckets[_hash_code(key) % len(self._buckets)]

    def _find(self, key: str) -> list[Any] | None:
        return next((cell for cell in self._bucket(key) if cell[0] == key), None)

    def put(self, key: str, value: Any) -> None:
        """Associate value with key, replacing any earlier value."""
        cell = self._find(key)
        if cell is None:
            self._bucket(key).insert(0, [key, value])
            self._count += 1
        else:
            cell[1] = value

    def get(self, key: str) -> Any:
        """Return the value for key, or None if the key is absent."""
        cell = self._find(key)
        return None if cell is None else cell[1]

    def remove(self, key: str) -> None:
        """Remove key from the map; absent keys are ignored."""
        bucket = self._bucket(key)
        for index, cell in enumerate(bucket):
            if cell[0] == key:
                del bucket[index]
                self._count -= 1
                return

    def contains_key(self, key: str) -> bool:
        """Return True if key has an entry in the map."""
        return self._find(key) is not None

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def clone(self) -> HashMap:
        """Return a shallow copy of the map."""
        copy = HashMap()
        for bucket in self._buckets:
            for key, value in bucket:
                copy.put(key, value)
        return copy

    def is_empty(self) -> bool:
        """Return True if the map has no entries."""
        return self._count == 0

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield (key, value) pairs whose value is not None."""
        for bucket in self._buckets:
            for key, value in list(bucket):
                if value is not None:
                    yield key, value

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        return iter([key for key, _ in self.items()])

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_key(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"HashMap({{{body}}})"