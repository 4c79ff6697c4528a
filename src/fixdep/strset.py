"""Fixed-size chained hash set of byte strings.

Used to remember which identifiers have already been written out during one
run. The only mutating operation is :meth:`StringSet.contains_or_insert`,
which answers "seen before?" and records the string when it was not.
"""
from __future__ import annotations

from typing import Iterator, Optional

from .constants import HASHSZ

FNV_SEED = 2166136261
FNV_PRIME = 0x01000193


def strhash(data: bytes) -> int:
    h = FNV_SEED
    for byte in data:
        h = ((h ^ byte) * FNV_PRIME) & 0xFFFFFFFF
    return h


class _Item:
    __slots__ = ("next", "length", "hash", "name")

    def __init__(self, name: bytes, hash_: int, next_: Optional["_Item"]):
        self.name = name
        self.length = len(name)
        self.hash = hash_
        self.next = next_


class StringSet:
    def __init__(self, buckets: int = HASHSZ):
        if buckets <= 0:
            raise ValueError(f"bucket count must be positive, got {buckets}")
        self._buckets: list[Optional[_Item]] = [None] * buckets
        self._size = 0

    def _add(self, name: bytes, hash_: int) -> None:
        idx = hash_ % len(self._buckets)
        self._buckets[idx] = _Item(bytes(name), hash_, self._buckets[idx])
        self._size += 1

    def contains_or_insert(self, name: bytes) -> bool:
        """Return True if ``name`` is already present, otherwise insert it and
        return False."""
        hash_ = strhash(name)
        length = len(name)
        item = self._buckets[hash_ % len(self._buckets)]
        while item is not None:
            if item.hash == hash_ and item.length == length and item.name == name:
                return True
            item = item.next
        self._add(name, hash_)
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bytes]:
        for head in self._buckets:
            item = head
            while item is not None:
                yield item.name
                item = item.next
