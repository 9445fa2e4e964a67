"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; keep both in sync when bumping the version.

Contents:
    * Module-level metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers consumed by lib_layered_config.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "lzcount"
#: Human-readable summary shown in CLI help output.
title = "Count leading zeros of integers, text, byte and character buffers"
#: Current release version.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/lzcount/lzcount"
#: Author attribution surfaced in CLI output.
author = "lzcount contributors"
#: Contact email surfaced in CLI output.
author_email = "lzcount@users.noreply.github.com"
#: Console-script name published by the package.
shell_command = "lzcount"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "lzcount"
#: Application display name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "lzcount"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "lzcount"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for lzcount:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
