"""Fixed-width integer value type.

Python's ``int`` is unbounded, so "how many leading zero bits" only has an
answer once a width is chosen. :class:`FixedInt` pairs a value with an
:class:`IntWidth` and validates the value against that width's range.

Contents:
    * :class:`IntWidth` - supported widths, signed and unsigned.
    * :class:`FixedInt` - immutable integer of a fixed width.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum

from .errors import IntegerRangeError

#: Bit width of a native pointer on the running interpreter.
POINTER_BITS = struct.calcsize("P") * 8


class IntWidth(str, Enum):
    """Supported fixed integer widths.

    ``usize``/``isize`` follow the interpreter's pointer width.

    Example:
        >>> IntWidth.U8.bits
        8
        >>> IntWidth("i128").signed
        True
        >>> IntWidth.I8.min_value, IntWidth.I8.max_value
        (-128, 127)
    """

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"

    @property
    def bits(self) -> int:
        if self in (IntWidth.USIZE, IntWidth.ISIZE):
            return POINTER_BITS
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        """All-ones pattern covering the full width."""
        return (1 << self.bits) - 1


@dataclass(frozen=True, slots=True)
class FixedInt:
    """Integer value bound to a fixed width.

    Attributes:
        value: The integer, within ``width.min_value..=width.max_value``.
        width: Width used for the two's-complement bit pattern.

    Raises:
        IntegerRangeError: When ``value`` does not fit ``width``.
        TypeError: When ``value`` is not an ``int`` (``bool`` included).

    Example:
        >>> FixedInt(1, IntWidth.U32).count_leading_zeros()
        31
        >>> FixedInt(-1, IntWidth.I16).count_leading_zeros()
        0
        >>> FixedInt(256, IntWidth.U8)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        lzcount.domain.errors.IntegerRangeError: 256 is out of range for u8 (0..255)
    """

    value: int
    width: IntWidth

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"FixedInt value must be int, got {type(self.value).__name__}")
        # frozen dataclass: normalise "u8" to IntWidth.U8 through object.__setattr__
        object.__setattr__(self, "width", IntWidth(self.width))
        width = self.width
        if not width.min_value <= self.value <= width.max_value:
            raise IntegerRangeError(
                f"{self.value} is out of range for {width.value} ({width.min_value}..{width.max_value})"
            )

    @property
    def bit_pattern(self) -> int:
        """Unsigned two's-complement pattern of the value."""
        return self.value & self.width.mask

    def count_leading_zeros(self) -> int:
        return self.width.bits - self.bit_pattern.bit_length()


__all__ = [
    "POINTER_BITS",
    "FixedInt",
    "IntWidth",
]
