"""Reads and writes between the processor and memory."""

from __future__ import annotations

from collections.abc import Iterable

from mos6502emu.cpu import CPU6502
from mos6502emu.memory import Memory


def read_byte(memory: Memory, address: int) -> int:
    """Return the byte at ``address``."""
    return memory.read(address)


def fetch_byte(cpu: CPU6502, memory: Memory) -> int:
    """Return the byte at the program counter and advance it."""
    byte = memory.read(cpu.program_counter)
    cpu.program_counter = (cpu.program_counter + 1) & 0xFFFF
    return byte


def write_bytes(memory: Memory, address: int, values: Iterable[int]) -> None:
    """Write ``values`` to consecutive addresses starting at ``address``."""
    for offset, value in enumerate(values):
        memory.write(address + offset, value)