"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class UnsupportedTypeError(TypeError):
    """Value has no leading-zero definition.

    Raised when :func:`lzcount.domain.counting.count_leading_zeros` receives a
    value outside the supported input kinds (plain ``int``, ``float``,
    ``None``, numeric arrays wider than one byte, ...). Inherits from
    TypeError because the failure concerns the value's type, not its content.

    Example:
        >>> from lzcount.domain.errors import UnsupportedTypeError
        >>> err = UnsupportedTypeError("float has no leading-zero definition")
        >>> str(err)
        'float has no leading-zero definition'
        >>> isinstance(err, TypeError)
        True
    """


class IntegerRangeError(ValueError):
    """Integer does not fit the requested fixed width.

    Raised when a :class:`~lzcount.domain.integers.FixedInt` is constructed
    with a value outside the range of its width, e.g. ``300`` as ``u8``.

    Example:
        >>> from lzcount.domain.errors import IntegerRangeError
        >>> err = IntegerRangeError("300 is out of range for u8 (0..255)")
        >>> str(err)
        '300 is out of range for u8 (0..255)'
        >>> isinstance(err, ValueError)
        True
    """


class DanglingReferenceError(ReferenceError):
    """Weak reference no longer points to a live value.

    Example:
        >>> from lzcount.domain.errors import DanglingReferenceError
        >>> isinstance(DanglingReferenceError("referent was collected"), ReferenceError)
        True
    """


__all__ = [
    "DanglingReferenceError",
    "IntegerRangeError",
    "UnsupportedTypeError",
]
