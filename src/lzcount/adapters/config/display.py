"""Display configuration through lib_layered_config's Rich renderer.

Flushes pending log output first so log lines never interleave with the
rendered configuration.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from lzcount.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` (or one ``section`` of it) to stdout.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: TOML-like human output or JSON.
        section: Optional section name, e.g. ``lzcount``.
        console: Optional Rich Console, mainly for tests.
        profile: Optional profile name included in provenance comments.

    Raises:
        ValueError: If the requested section does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
