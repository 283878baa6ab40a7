"""Open-addressing symbol table keyed by FNV-1a hashes."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import KnightError

_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619


def fnv1a(key: str | bytes) -> int:
    """Hash ``key`` with FNV-1a in 64-bit arithmetic; never returns 0."""
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    hashed = _FNV_OFFSET
    for byte in data:
        hashed = ((hashed ^ byte) * _FNV_PRIME) & _MASK64
    return hashed or 1


@dataclass
class _Entry:
    hash: int
    key: str
    value: int


class SymbolTable:
    """Maps names to integer ids using linear probing; missing names give 0."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[_Entry | None] = [None] * capacity
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _probe(self, hashed: int):
        start = hashed % self.capacity
        for offset in range(self.capacity):
            yield (start + offset) % self.capacity

    def get(self, key: str) -> int:
        """Return the value stored for ``key``, or 0 if there is none."""
        if self._size == 0:
            return 0
        hashed = fnv1a(key)
        for index in self._probe(hashed):
            entry = self._slots[index]
            if entry is None:
                return 0
            if entry.hash == hashed and entry.key == key:
                return entry.value
        return 0

    def set(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if self._size >= (self.capacity * 3) // 4:
            self._grow()
        hashed = fnv1a(key)
        for index in self._probe(hashed):
            entry = self._slots[index]
            if entry is None:
                self._slots[index] = _Entry(hashed, key, value)
                self._size += 1
                return
            if entry.hash == hashed and entry.key == key:
                entry.value = value
                return
        raise KnightError("Failed to set value in map")

    def _grow(self) -> None:
        old = [entry for entry in self._slots if entry is not None]
        self.capacity *= 2
        self._slots = [None] * self.capacity
        self._size = 0
        for entry in old:
            self.set(entry.key, entry.value)