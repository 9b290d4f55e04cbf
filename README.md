# mos6502emu

A small emulator for the MOS 6502 processor. It models a flat block of
65,535 bytes of memory (addresses `0x0000` to `0xFFFE`), the A, X and Y
registers, the processor status flags and an instruction table. The table
holds the LDA (load accumulator) instruction in its immediate, zero page and
zero page,X addressing modes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running the demo program

```
mos6502emu
```

This resets the system, loads a small demo program (`LDA $42` at the reset
vector `0xFFFC`, with the value 84 stored at zero page address `$42`), runs
that one instruction and prints:

```
Register a: 84
TEST COMPLETE!... EXITING PROGRAM!
```

The command takes no options.

## Using the library

```python
from mos6502emu.system import System

system = System()
system.load_program()
cycles = system.execute()   # prints register A, returns 3
```

`System.execute()` fetches one opcode at the program counter, runs the
matching instruction, prints the report above and returns the instruction's
cycle count. `System.reset()` resets the processor and clears memory.

The building blocks can also be used on their own:

```python
from mos6502emu.cpu import CPU6502
from mos6502emu.memory import Memory
from mos6502emu.bus import fetch_byte, write_bytes
from mos6502emu.instructions import get_instruction

cpu = CPU6502()
memory = Memory()
cpu.reset()                            # program counter starts at 0xFFFC
write_bytes(memory, 0xFFFC, [0xA9, 0x80])   # LDA #$80

instruction = get_instruction(fetch_byte(cpu, memory))
instruction.execute(cpu, memory)

print(cpu.registers.get("a"))          # 128
print(cpu.status_flags.get("n"))       # True
print(cpu.status_flags.get("z"))       # False
print(instruction.cycles)              # 2
print(cpu)                             # (CPU Type: 6502)
```

### Modules

- `mos6502emu.memory` – `Memory` with `read`, `write`, `reset` and `len()`.
  Addresses outside the block raise `IndexError`.
- `mos6502emu.registers` – `Registers` (`a`, `x`, `y`; `get`, `set`,
  `set_many`) and `StatusFlags` (`c`, `z`, `i`, `d`, `b`, `v`, `n`; `get`,
  `set`, `set_many`, `clear`), each flag a `StatusFlag`. Unknown register or
  flag names raise `ValueError`, as do register values outside 0–255.
- `mos6502emu.cpu` – `CPU6502` with `reset()` (program counter `0xFFFC`,
  stack pointer `0x10`, registers and flags cleared) and `set_load_flags()`
  (zero and negative flags from the accumulator).
- `mos6502emu.bus` – `read_byte`, `fetch_byte` (reads at the program counter
  and advances it) and `write_bytes` (writes to consecutive addresses).
- `mos6502emu.instructions` – the `Opcode` enum, `Instruction` (`execute`,
  `cycles`), the `lda_*` handlers and `get_instruction`. An opcode with no
  entry in the table raises `UnknownOpcodeError`.
- `mos6502emu.system` – `System` and the `main` entry point.

## What it does not do

- Only the three LDA opcodes are implemented; every other opcode raises
  `UnknownOpcodeError`.
- There is no way to load a program from a file: `mos6502emu` always runs
  the built-in demo program, and `System.execute()` runs a single
  instruction rather than a continuous program.
- There is no stack, interrupt handling or cycle-accurate timing.