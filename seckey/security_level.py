"""
Scrypt cost parameters packed into a single header byte.

Flags layout, most significant bit first:

- 3 bits N as a power of two starting at 14
- 3 bits r as a power of two starting at 3
- 2 bits p as a power of two starting at 0

The easiest level is N=16384 r=8 p=1 (the 2009 scrypt paper recommendation),
the hardest N=2097152 r=1024 p=8.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple


class ScryptParams(NamedTuple):
    n: int
    r: int
    p: int


@dataclass(frozen=True)
class SecurityLevel:
    """A named or custom scrypt cost selector.

    Equality is defined on the flags byte, so ``SecurityLevel.custom(0x24)``
    equals ``SecurityLevel.DEFAULT``.
    """

    flags: int
    name: str = field(default="custom", compare=False)

    DEFAULT: ClassVar[SecurityLevel]
    HIGH: ClassVar[SecurityLevel]
    PARANOID: ClassVar[SecurityLevel]
    NAMED: ClassVar[tuple[SecurityLevel, ...]]

    def __post_init__(self) -> None:
        if not isinstance(self.flags, int) or not 0 <= self.flags <= 0xFF:
            msg = f"Security level flags must be a byte, got {self.flags!r}"
            raise ValueError(msg)

    @classmethod
    def custom(cls, flags: int) -> SecurityLevel:
        return cls(flags)

    @classmethod
    def from_flags(cls, flags: int) -> SecurityLevel:
        """Resolve a header byte to a named level, or a custom one."""
        for level in cls.NAMED:
            if level.flags == flags:
                return level
        return cls(flags)

    @classmethod
    def parse(cls, text: str) -> SecurityLevel:
        """Parse a level name (``default``, ``high``, ``paranoid``) or a flags byte."""
        value = text.strip().lower()
        for level in cls.NAMED:
            if level.name == value:
                return level
        try:
            flags = int(value, 0)
        except ValueError as err:
            msg = f"Unknown security level: {text!r}"
            raise ValueError(msg) from err
        return cls.from_flags(flags)

    @property
    def params(self) -> ScryptParams:
        """Resolved scrypt params (N, r, p)."""
        n_exp = ((self.flags & 0b1110_0000) >> 5) + 14
        r_exp = ((self.flags & 0b0001_1100) >> 2) + 3
        p_exp = self.flags & 0b0000_0011
        return ScryptParams(n=1 << n_exp, r=1 << r_exp, p=1 << p_exp)

    @property
    def memory_cost(self) -> int:
        """Bytes of memory scrypt needs for these params."""
        n, r, _ = self.params
        return 128 * r * n

    def __str__(self) -> str:
        n, r, p = self.params
        return f"N={n} r={r} p={p}"


SecurityLevel.DEFAULT = SecurityLevel(0b0010_0100, "default")  # N=32768 r=16 p=1
SecurityLevel.HIGH = SecurityLevel(0b0100_0100, "high")  # N=65536 r=16 p=1
SecurityLevel.PARANOID = SecurityLevel(0b0110_0100, "paranoid")  # N=131072 r=16 p=1
SecurityLevel.NAMED = (SecurityLevel.DEFAULT, SecurityLevel.HIGH, SecurityLevel.PARANOID)
