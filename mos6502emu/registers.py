"""General-purpose registers and processor status flags."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

_REGISTER_NAMES = ("a", "x", "y")
_FLAG_NAMES = ("c", "z", "i", "d", "b", "v", "n")


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"register value {value} does not fit in a byte")
    return value


@dataclass
class Registers:
    """The accumulator and the X and Y index registers."""

    a: int = 0
    x: int = 0
    y: int = 0

    @staticmethod
    def _check_name(name: str) -> str:
        if name not in _REGISTER_NAMES:
            raise ValueError("Invalid register requested!")
        return name

    def set(self, name: str, value: int) -> None:
        """Assign ``value`` to the register called ``name``."""
        setattr(self, self._check_name(name), _check_byte(value))

    def set_many(self, names: Iterable[str], value: int) -> None:
        """Assign the same ``value`` to every named register."""
        for name in names:
            self.set(name, value)

    def get(self, name: str) -> int:
        """Return the value of the register called ``name``."""
        return getattr(self, self._check_name(name))


@dataclass
class StatusFlag:
    """One bit of the status register, holding either its mask or zero."""

    name: str
    mask: int
    bits: int = 0

    @property
    def is_set(self) -> bool:
        return self.bits != 0

    @is_set.setter
    def is_set(self, value: bool) -> None:
        self.bits = self.mask if value else 0


@dataclass
class StatusFlags:
    """The seven status flags of the processor."""

    c: StatusFlag = field(default_factory=lambda: StatusFlag("c", 1))
    z: StatusFlag = field(default_factory=lambda: StatusFlag("z", 2))
    i: StatusFlag = field(default_factory=lambda: StatusFlag("i", 4))
    d: StatusFlag = field(default_factory=lambda: StatusFlag("d", 8))
    b: StatusFlag = field(default_factory=lambda: StatusFlag("b", 16))
    v: StatusFlag = field(default_factory=lambda: StatusFlag("v", 64))
    n: StatusFlag = field(default_factory=lambda: StatusFlag("n", 128))

    def _flag(self, name: str) -> StatusFlag:
        if name not in _FLAG_NAMES:
            raise ValueError("Invalid status flag requested!")
        return getattr(self, name)

    def set(self, flag: str, value: bool) -> None:
        """Set or clear a single flag."""
        self._flag(flag).is_set = value

    def set_many(self, flags: Iterable[str], value: bool) -> None:
        """Set or clear every named flag."""
        for flag in flags:
            self.set(flag, value)

    def clear(self, flags: Iterable[str]) -> None:
        """Clear every named flag."""
        self.set_many(flags, False)

    def get(self, flag: str) -> bool:
        """Return whether the named flag is set."""
        return self._flag(flag).is_set