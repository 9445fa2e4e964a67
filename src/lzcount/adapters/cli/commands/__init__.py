"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Counting commands from :mod:`.count_cmd`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .count_cmd import cli_count, cli_widths
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_count",
    "cli_info",
    "cli_widths",
]
