"""Opcode decoding and the load-accumulator instructions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from mos6502emu.bus import fetch_byte, read_byte
from mos6502emu.cpu import CPU6502
from mos6502emu.memory import Memory


class Opcode(IntEnum):
    LDA_IMMEDIATE = 0xA9
    LDA_ZERO_PAGE = 0xA5
    LDA_ZERO_PAGE_X = 0xB5


class UnknownOpcodeError(Exception):
    """Raised when an opcode has no known instruction."""

    def __init__(self, opcode: int) -> None:
        super().__init__(f"Unknown instruction {opcode}")
        self.opcode = opcode


@dataclass(frozen=True)
class Instruction:
    """An executable instruction and the cycles it takes."""

    execute: Callable[[CPU6502, Memory], None]
    cycles: int


def lda_immediate(cpu: CPU6502, memory: Memory) -> None:
    """Load the next program byte into the accumulator."""
    cpu.registers.a = fetch_byte(cpu, memory)
    cpu.set_load_flags()


def lda_zero_page(cpu: CPU6502, memory: Memory) -> None:
    """Load the accumulator from a zero-page address."""
    address = fetch_byte(cpu, memory)
    cpu.registers.a = read_byte(memory, address)
    cpu.set_load_flags()


def lda_zero_page_x(cpu: CPU6502, memory: Memory) -> None:
    """Load the accumulator from a zero-page address offset by X."""
    address = (fetch_byte(cpu, memory) + cpu.registers.x) & 0xFF
    cpu.registers.a = read_byte(memory, address)
    cpu.set_load_flags()


_INSTRUCTIONS = {
    Opcode.LDA_IMMEDIATE: Instruction(lda_immediate, 2),
    Opcode.LDA_ZERO_PAGE: Instruction(lda_zero_page, 3),
    Opcode.LDA_ZERO_PAGE_X: Instruction(lda_zero_page_x, 4),
}


def get_instruction(opcode: int) -> Instruction:
    """Return the instruction for ``opcode``."""
    try:
        return _INSTRUCTIONS[Opcode(opcode)]
    except ValueError:
        raise UnknownOpcodeError(opcode) from None