import pytest

from mos6502emu.cpu import CPU6502


def test_str_names_architecture():
    assert str(CPU6502()) == "(CPU Type: 6502)"


def test_reset_sets_vector_and_stack_pointer():
    cpu = CPU6502()
    cpu.registers.set_many("axy", 7)
    cpu.status_flags.set_many("czn", True)
    cpu.reset()
    assert cpu.program_counter == 0xFFFC
    assert cpu.stack_pointer == 0x10
    assert [cpu.registers.get(r) for r in "axy"] == [0, 0, 0]
    assert not any(cpu.status_flags.get(f) for f in "czidbvn")


def test_load_flags_zero():
    cpu = CPU6502()
    cpu.registers.a = 0
    cpu.set_load_flags()
    assert cpu.status_flags.get("z")
    assert not cpu.status_flags.get("n")


@pytest.mark.parametrize("value", [0x80, 0xFF])
def test_load_flags_negative(value):
    cpu = CPU6502()
    cpu.registers.a = value
    cpu.set_load_flags()
    assert cpu.status_flags.get("n")
    assert not cpu.status_flags.get("z")


def test_load_flags_positive_clears_both():
    cpu = CPU6502()
    cpu.status_flags.set_many("zn", True)
    cpu.registers.a = 84
    cpu.set_load_flags()
    assert not cpu.status_flags.get("z")
    assert not cpu.status_flags.get("n")