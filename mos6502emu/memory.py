"""Flat byte-addressable memory for the emulated system."""

from __future__ import annotations

MEMORY_SIZE = 65535


class Memory:
    """A block of zero-initialised bytes addressed from 0."""

    def __init__(self) -> None:
        self._data = bytearray(MEMORY_SIZE)

    def reset(self) -> None:
        """Clear every byte back to zero."""
        self._data = bytearray(MEMORY_SIZE)

    def _check(self, address: int) -> None:
        if not 0 <= address < len(self._data):
            raise IndexError(f"memory address {address:#06x} out of range")

    def read(self, address: int) -> int:
        """Return the byte stored at ``address``."""
        self._check(address)
        return self._data[address]

    def write(self, address: int, value: int) -> None:
        """Store the byte ``value`` at ``address``."""
        self._check(address)
        self._data[address] = value

    def __len__(self) -> int:
        return len(self._data)