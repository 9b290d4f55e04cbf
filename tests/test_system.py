import pytest

from mos6502emu.instructions import UnknownOpcodeError
from mos6502emu.system import System, main


def test_new_system_is_reset():
    system = System()
    assert system.cpu.program_counter == 0xFFFC
    assert system.cpu.stack_pointer == 0x10
    assert system.memory.read(0xFFFC) == 0


def test_load_program_places_bytes():
    system = System()
    system.load_program()
    assert system.memory.read(0xFFFC) == 0xA5
    assert system.memory.read(0xFFFD) == 0x42
    assert system.memory.read(0x42) == 84


def test_execute_runs_demo_program(capsys):
    system = System()
    system.load_program()
    cycles = system.execute()
    assert cycles == 3
    assert system.cpu.registers.a == 84
    out = capsys.readouterr().out
    assert out == "Register a: 84\nTEST COMPLETE!... EXITING PROGRAM!\n"


def test_reset_clears_loaded_program():
    system = System()
    system.load_program()
    system.reset()
    assert system.memory.read(0x42) == 0


def test_execute_unknown_opcode_raises():
    system = System()
    with pytest.raises(UnknownOpcodeError):
        system.execute()


def test_main_returns_zero_and_prints(capsys):
    assert main() == 0
    assert "Register a: 84" in capsys.readouterr().out