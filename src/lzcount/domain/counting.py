"""Leading-zero counting across integers, text, and byte/character buffers.

Integers count leading ``0`` bits of their fixed-width two's-complement
pattern. Every text, byte, and character container counts leading elements
equal to the *character* ``'0'`` (byte ``0x30``), never the numeric byte
``0x00``: ``bytes([0, 0])`` has no leading zeros while ``b"00"`` has two.

Wrappers (``UserString``, ``UserList``, ``weakref.ref``, or any object
implementing :class:`LeadingZeroCount`) delegate to the value they hold.

Contents:
    * :class:`LeadingZeroCount` - structural protocol for countable objects.
    * :func:`count_leading_zeros` - the polymorphic operation.
    * :func:`count_int_leading_zeros` - count a plain ``int`` at a given width.
"""

from __future__ import annotations

import array
import ctypes
import weakref
from collections import UserList, UserString
from collections.abc import Iterable, Sequence
from functools import singledispatch
from itertools import takewhile
from typing import Any, Final, Protocol, TypeAlias, runtime_checkable

from .errors import DanglingReferenceError, UnsupportedTypeError
from .integers import FixedInt, IntWidth

ZERO_CHAR: Final[str] = "0"
ZERO_BYTE: Final[int] = 0x30

_BYTE_TYPECODES: Final[frozenset[str]] = frozenset("bB")
_CHAR_TYPECODES: Final[frozenset[str]] = frozenset("uw")
_BYTE_FORMATS: Final[frozenset[str]] = frozenset({"b", "B", "c"})

_CTYPES_INTEGERS: Final[tuple[type[Any], ...]] = (
    ctypes.c_byte,
    ctypes.c_ubyte,
    ctypes.c_short,
    ctypes.c_ushort,
    ctypes.c_int,
    ctypes.c_uint,
    ctypes.c_long,
    ctypes.c_ulong,
    ctypes.c_longlong,
    ctypes.c_ulonglong,
)
_CTYPES_BYTE_ELEMENTS: Final[tuple[type[Any], ...]] = (ctypes.c_char, ctypes.c_byte, ctypes.c_ubyte)


@runtime_checkable
class LeadingZeroCount(Protocol):
    """Anything that knows its own leading-zero count.

    :class:`~lzcount.domain.integers.FixedInt` implements it; user-defined
    wrappers implement it to take part in :func:`count_leading_zeros`.
    """

    def count_leading_zeros(self) -> int: ...


Countable: TypeAlias = (
    "LeadingZeroCount | FixedInt | str | bytes | bytearray | memoryview | array.array[Any]"
    " | Sequence[str] | Sequence[int] | UserString | UserList[Any] | weakref.ReferenceType[Any]"
    " | ctypes.Array[Any] | ctypes.c_byte | ctypes.c_ubyte | ctypes.c_short | ctypes.c_ushort"
    " | ctypes.c_int | ctypes.c_uint | ctypes.c_long | ctypes.c_ulong | ctypes.c_longlong | ctypes.c_ulonglong"
)
"""Static union of every input kind :func:`count_leading_zeros` accepts."""


def _count_prefix(items: Iterable[object], zero: object) -> int:
    """Length of the run of ``zero`` at the start of ``items``.

    Example:
        >>> _count_prefix(["0", "0", "7"], "0")
        2
        >>> _count_prefix([], "0")
        0
    """
    return sum(1 for _ in takewhile(lambda item: item == zero, items))


def _unsupported(value: object, hint: str = "") -> UnsupportedTypeError:
    message = f"{type(value).__name__} has no leading-zero definition"
    return UnsupportedTypeError(f"{message}; {hint}" if hint else message)


@singledispatch
def _count(value: object) -> int:
    if isinstance(value, LeadingZeroCount):
        return value.count_leading_zeros()
    raise _unsupported(value)


@_count.register
def _count_int(value: int) -> int:
    if isinstance(value, bool):
        raise _unsupported(value)
    raise _unsupported(value, "wrap it in FixedInt or use count_int_leading_zeros() to choose a width")


@_count.register
def _count_str(value: str) -> int:
    # '0' is ASCII, so a character scan equals a byte scan of the UTF-8 encoding
    return len(value) - len(value.lstrip(ZERO_CHAR))


@_count.register(bytes)
@_count.register(bytearray)
def _count_bytes(value: bytes | bytearray) -> int:
    return len(value) - len(value.lstrip(b"0"))


@_count.register
def _count_memoryview(value: memoryview) -> int:
    # ctypes buffers report byte-order prefixed formats such as "<B"
    if value.format.lstrip("@=<>!") not in _BYTE_FORMATS:
        raise _unsupported(value, f"memoryview format {value.format!r} is not a byte buffer")
    flat = value.cast("B") if value.c_contiguous else value.tobytes()
    return _count_prefix(flat, ZERO_BYTE)


@_count.register
def _count_array(value: array.array) -> int:  # type: ignore[type-arg]
    if value.typecode in _BYTE_TYPECODES:
        return _count_prefix(value, ZERO_BYTE)
    if value.typecode in _CHAR_TYPECODES:
        return _count_prefix(value, ZERO_CHAR)
    raise _unsupported(value, f"array typecode {value.typecode!r} is neither bytes nor characters")


@_count.register(list)
@_count.register(tuple)
def _count_sequence(value: Sequence[object]) -> int:
    """Classify by the first element: ``str`` means characters, ``int`` means bytes."""
    if not value:
        return 0
    first = value[0]
    if isinstance(first, str):
        return _count_prefix(value, ZERO_CHAR)
    if isinstance(first, int) and not isinstance(first, bool):
        return _count_prefix(value, ZERO_BYTE)
    raise _unsupported(value, f"elements of type {type(first).__name__} are neither bytes nor characters")


@_count.register
def _count_fixed_int(value: FixedInt) -> int:
    return value.count_leading_zeros()


def _count_ctypes_integer(value: Any) -> int:
    bits = ctypes.sizeof(value) * 8
    pattern = int(value.value) & ((1 << bits) - 1)
    return bits - pattern.bit_length()


for _ctype in _CTYPES_INTEGERS:
    _count.register(_ctype, _count_ctypes_integer)


@_count.register
def _count_ctypes_array(value: ctypes.Array) -> int:  # type: ignore[type-arg]
    element = type(value)._type_  # type: ignore[attr-defined]
    if element in _CTYPES_BYTE_ELEMENTS:
        return _count_bytes(bytes(value))
    if element is ctypes.c_wchar:
        return _count_prefix(value[:], ZERO_CHAR)
    raise _unsupported(value, f"array element {element.__name__} is neither bytes nor characters")


@_count.register(UserString)
@_count.register(UserList)
def _count_user_container(value: UserString | UserList[Any]) -> int:
    return _count(value.data)


@_count.register
def _count_weakref(value: weakref.ReferenceType) -> int:  # type: ignore[type-arg]
    referent = value()
    if referent is None:
        raise DanglingReferenceError("weak reference no longer points to a live value")
    return _count(referent)


def count_leading_zeros(value: Countable) -> int:
    """Count the leading zero symbols of ``value``.

    Args:
        value: Fixed-width integer, text, byte buffer, character buffer, or a
            wrapper around one of those.

    Returns:
        Number of leading zeros: bits for integers, ``'0'`` elements for
        text, bytes, and characters. Never exceeds the bit width or length.

    Raises:
        UnsupportedTypeError: ``value`` is not one of the supported kinds.
        DanglingReferenceError: ``value`` is a dead weak reference.

    Example:
        >>> count_leading_zeros(FixedInt(0, IntWidth.U8))
        8
        >>> count_leading_zeros("000123")
        3
        >>> count_leading_zeros(b"0012")
        2
        >>> count_leading_zeros(bytes([0, 0]))
        0
        >>> count_leading_zeros(["0", "0", "1", "x"])
        2
        >>> count_leading_zeros(UserString("0007"))
        3
    """
    return _count(value)


def count_int_leading_zeros(value: int, width: IntWidth | str) -> int:
    """Count leading zero bits of ``value`` represented at ``width``.

    Raises:
        IntegerRangeError: ``value`` does not fit ``width``.
        ValueError: ``width`` is not a known width name.

    Example:
        >>> count_int_leading_zeros(1, "u64")
        63
        >>> count_int_leading_zeros(-1, IntWidth.I32)
        0
    """
    return FixedInt(value, IntWidth(width)).count_leading_zeros()


__all__ = [
    "ZERO_BYTE",
    "ZERO_CHAR",
    "Countable",
    "LeadingZeroCount",
    "count_int_leading_zeros",
    "count_leading_zeros",
]
