"""Type-safe domain enums for input kinds and output formats."""

from __future__ import annotations

from enum import Enum


class InputKind(str, Enum):
    """How a raw command-line value is interpreted before counting.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        TEXT: Count leading ``'0'`` characters of the text.
        BYTES: Encode (or hex-decode) the value and count leading ``0x30`` bytes.
        CHARS: Split the value into characters and count leading ``'0'`` elements.
        INT: Parse a base-10 integer and count leading zero bits at a fixed width.

    Example:
        >>> InputKind.BYTES.value
        'bytes'
        >>> InputKind.INT == "int"
        True
    """

    TEXT = "text"
    BYTES = "bytes"
    CHARS = "chars"
    INT = "int"


class OutputFormat(str, Enum):
    """Output format options for command results and configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "InputKind",
    "OutputFormat",
]
