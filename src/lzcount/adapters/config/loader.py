"""Layered configuration for lzcount.

Sources, lowest precedence first: the bundled ``defaultconfig.toml``, then
app, host and user files, ``.env`` and finally ``LZCOUNT___*`` environment
variables. A profile adds a ``profile/<name>/`` level to every file path.

Contents:
    * :data:`DEFAULT_CONFIG_FILE` - The bundled defaults.
    * :func:`get_config` - Validated, cached read (``get_config.cache_clear()`` resets it).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final, Protocol, cast

from lib_layered_config import Config, read_config, validate_profile_name

from lzcount import __init__conf__

DEFAULT_CONFIG_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


class CachedConfigLoader(Protocol):
    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Read the merged configuration, optionally for a named profile.

    Raises:
        ValueError: ``profile`` is empty, too long, or tries to leave its
            directory (lib_layered_config's ``ValidationError``).

    Examples:
        >>> get_config().get("lzcount", default={}).get("default_kind")
        'text'
        >>> try:
        ...     get_config(profile="../outside")
        ... except ValueError:
        ...     print("rejected")
        rejected
    """
    if profile is not None:
        validate_profile_name(profile)
    return _read_layers(profile, start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config: CachedConfigLoader = cast(CachedConfigLoader, _get_config)


__all__ = ["DEFAULT_CONFIG_FILE", "get_config"]
