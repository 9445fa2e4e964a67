"""Per-invocation CLI state.

The root group builds one :class:`CLIContext` and stores it on ``ctx.obj``;
subcommands read it back with :func:`get_cli_context`. Traceback flags live
in ``lib_cli_exit_tools.config`` and are captured as a :class:`TracebackState`
so ``main`` can put them back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from lzcount.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from lzcount.adapters.config.settings import CountSettings
    from lzcount.composition import AppServices


class TracebackState(NamedTuple):
    enabled: bool
    force_color: bool


def load_profile_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read configuration for ``profile`` and apply ``--set`` overrides.

    Bad profile names and malformed overrides are usage errors (exit 2).
    """
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Configuration and services shared by every subcommand of one run."""

    config: Config
    services: AppServices
    traceback: bool = False
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def count_settings(self) -> CountSettings:
        """Validate the ``[lzcount]`` section of the active configuration."""
        return self.services.load_count_settings(self.config.as_dict())

    def for_profile(self, profile: str | None) -> CLIContext:
        """Return this context reloaded for ``profile``, or itself when none is given.

        The root ``--set`` overrides apply to the reloaded configuration too.
        """
        if not profile:
            return self
        config = load_profile_config(self.services, profile, self.set_overrides)
        return replace(self, config=config, profile=profile)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group stored.

    Raises:
        RuntimeError: The command ran outside the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized; run the command through the root group")
    return ctx.obj


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags.

    Example:
        >>> state = snapshot_traceback_state()
        >>> isinstance(state.enabled, bool)
        True
    """
    cfg = lib_cli_exit_tools.config
    return TracebackState(bool(getattr(cfg, "traceback", False)), bool(getattr(cfg, "traceback_force_color", False)))


def apply_traceback_preferences(enabled: bool) -> None:
    """Full coloured tracebacks when ``--traceback`` is set, summaries otherwise."""
    restore_traceback_state(TracebackState(enabled, enabled))


def restore_traceback_state(state: TracebackState) -> None:
    """Write ``state`` back into ``lib_cli_exit_tools.config``.

    Example:
        >>> before = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
        >>> restore_traceback_state(before)
        >>> snapshot_traceback_state() == before
        True
    """
    lib_cli_exit_tools.config.traceback = bool(state.enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(state.force_color)


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "load_profile_config",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
