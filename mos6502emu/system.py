"""The whole machine: processor and memory, plus the demo program."""

from __future__ import annotations

from collections.abc import Sequence

from mos6502emu.bus import fetch_byte
from mos6502emu.cpu import CPU6502
from mos6502emu.instructions import get_instruction
from mos6502emu.memory import Memory


class System:
    """A processor wired to memory."""

    def __init__(self) -> None:
        self.cpu = CPU6502()
        self.memory = Memory()
        self.reset()

    def reset(self) -> None:
        """Reset the processor and clear memory."""
        self.cpu.reset()
        self.memory.reset()

    def execute(self) -> int:
        """Run one instruction to completion, report, and return its cycle count."""
        opcode = fetch_byte(self.cpu, self.memory)
        instruction = get_instruction(opcode)
        instruction.execute(self.cpu, self.memory)
        self._report()
        return instruction.cycles

    def _report(self) -> None:
        print(f"Register a: {self.cpu.registers.a}")
        print("TEST COMPLETE!... EXITING PROGRAM!")

    def load_program(self) -> None:
        """Place the demo program at the reset vector."""
        self.memory.write(0xFFFC, 0xA5)
        self.memory.write(0xFFFD, 0x42)
        self.memory.write(0x42, 84)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the demo program, run it and return the exit status."""
    system = System()
    system.load_program()
    system.execute()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())