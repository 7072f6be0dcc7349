"""A set of short strings stored in a chained hash table."""

from __future__ import annotations

from collections.abc import Iterator

MAX_KEY_BYTES = 49
"""Longest key, in UTF-8 bytes, that the table stores."""

_MASK = 0xFFFFFFFF


def _to_int32(number: int) -> int:
    number &= _MASK
    return number - (1 << 32) if number & 0x80000000 else number


def hash_code(text: str) -> int:
    """Return the signed 32-bit hash of ``text``: shift left by five and add each byte."""
    number = 0
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        number = _to_int32((number << 5) + signed)
    return number


def bucket_index(size: int, text: str) -> int:
    """Return the bucket of ``text`` in a table of ``size`` buckets."""
    if size <= 0:
        raise ValueError(f"table size must be positive, got {size}")
    return (hash_code(text) & _MASK) % size


class StringHashSet:
    """Set of strings kept in ``size`` buckets, each a chain with the newest key first."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self._buckets: list[list[str]] = [[] for _ in range(size)]
        self._count = 0

    def _bucket(self, key: str) -> list[str]:
        return self._buckets[bucket_index(self.size, key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._bucket(key)

    def add(self, key: str) -> None:
        """Store ``key`` unless it is already present."""
        if len(key.encode("utf-8")) > MAX_KEY_BYTES:
            raise ValueError(f"key longer than {MAX_KEY_BYTES} bytes: {key!r}")
        bucket = self._bucket(key)
        if key not in bucket:
            bucket.insert(0, key)
            self._count += 1

    def discard(self, key: str) -> None:
        """Remove ``key`` if it is present."""
        bucket = self._bucket(key)
        if key in bucket:
            bucket.remove(key)
            self._count -= 1

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        """Iterate bucket by bucket, newest key first within a bucket."""
        for bucket in self._buckets:
            yield from bucket

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, keys={list(self)!r})"