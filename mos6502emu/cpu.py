"""The 6502 processor state."""

from __future__ import annotations

from dataclasses import dataclass, field

from mos6502emu.registers import Registers, StatusFlags

RESET_VECTOR = 0xFFFC
RESET_STACK_POINTER = 0x10


@dataclass
class CPU6502:
    """Program counter, stack pointer, registers and status flags."""

    program_counter: int = 0
    stack_pointer: int = 0
    registers: Registers = field(default_factory=Registers)
    status_flags: StatusFlags = field(default_factory=StatusFlags)
    arch: str = "6502"

    def reset(self) -> None:
        """Put the processor into its power-on state."""
        self.program_counter = RESET_VECTOR
        self.stack_pointer = RESET_STACK_POINTER
        self.registers.set_many("axy", 0)
        self.status_flags.clear("czidbvn")

    def set_load_flags(self) -> None:
        """Update the zero and negative flags from the accumulator."""
        self.status_flags.set("z", self.registers.a == 0)
        self.status_flags.set("n", bool(self.registers.a & 0b1000_0000))

    def __str__(self) -> str:
        return f"(CPU Type: {self.arch})"