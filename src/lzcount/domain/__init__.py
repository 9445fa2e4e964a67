"""Domain layer - pure counting logic with no I/O or framework dependencies.

Contents:
    * :mod:`.counting` - The leading-zero capability and its dispatch
    * :mod:`.integers` - Fixed-width integer value type
    * :mod:`.enums` - Domain enumerations (InputKind, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .counting import (
    ZERO_BYTE,
    ZERO_CHAR,
    Countable,
    LeadingZeroCount,
    count_int_leading_zeros,
    count_leading_zeros,
)
from .enums import InputKind, OutputFormat
from .errors import DanglingReferenceError, IntegerRangeError, UnsupportedTypeError
from .integers import POINTER_BITS, FixedInt, IntWidth

__all__ = [
    # Counting
    "ZERO_BYTE",
    "ZERO_CHAR",
    "Countable",
    "LeadingZeroCount",
    "count_int_leading_zeros",
    "count_leading_zeros",
    # Integers
    "POINTER_BITS",
    "FixedInt",
    "IntWidth",
    # Enums
    "InputKind",
    "OutputFormat",
    # Errors
    "DanglingReferenceError",
    "IntegerRangeError",
    "UnsupportedTypeError",
]
