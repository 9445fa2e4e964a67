"""Process entry for ``lzcount``: run the root group, return an exit code.

Click runs non-standalone so that ``obj`` can carry the services factory.
Click's own exceptions keep their exit codes (usage errors are 2); the
commands raise ``SystemExit(ExitCode...)`` for invalid input and config;
anything else is reported by lib_cli_exit_tools.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from lzcount import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from lzcount.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    verbose = snapshot_traceback_state().enabled
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001 - SystemExit and KeyboardInterrupt map to exit codes too
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were afterwards.
        services_factory: ``build_production`` or ``build_testing``.

    Raises:
        ValueError: ``services_factory`` is missing.

    Example:
        >>> from lzcount.composition import build_testing
        >>> exit_code = main(["count", "007"], services_factory=build_testing)  # doctest: +SKIP
        >>> exit_code  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    before = snapshot_traceback_state()
    try:
        return _invoke(list(sys.argv[1:] if argv is None else argv), services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(before)
        # Only the main thread owns the process-wide logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
