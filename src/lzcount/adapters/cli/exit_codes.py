"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values instead
of a bare ``1``.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h where applicable.

    * 0–1: generic success / failure
    * 22: EINVAL - a value could not be counted (bad literal, out of range, bad hex)
    * 78: EX_CONFIG - the ``[lzcount]`` section failed validation

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
