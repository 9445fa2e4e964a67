"""Public package surface: leading-zero counting, metadata, and configuration.

Contents:
    * Domain exports: :func:`count_leading_zeros` and its supporting types
    * Composition exports: wired configuration loader
    * Metadata: :func:`print_info`

Example:
    >>> from lzcount import FixedInt, IntWidth, count_leading_zeros
    >>> count_leading_zeros(FixedInt(1, IntWidth.U8))
    7
    >>> count_leading_zeros("000123")
    3
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.counting import (
    Countable,
    LeadingZeroCount,
    count_int_leading_zeros,
    count_leading_zeros,
)
from .domain.errors import DanglingReferenceError, IntegerRangeError, UnsupportedTypeError
from .domain.integers import FixedInt, IntWidth

__all__ = [
    "Countable",
    "DanglingReferenceError",
    "FixedInt",
    "IntWidth",
    "IntegerRangeError",
    "LeadingZeroCount",
    "UnsupportedTypeError",
    "count_int_leading_zeros",
    "count_leading_zeros",
    "get_config",
    "print_info",
]
