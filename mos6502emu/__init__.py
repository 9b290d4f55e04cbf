"""A small MOS 6502 CPU emulator: memory, registers, bus and LDA instructions."""

__version__ = "0.1.0"