"""Configuration adapter - loading, display, overrides, and counting defaults.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - ``[lzcount]`` section model
"""

from __future__ import annotations

from .display import display_config
from .loader import DEFAULT_CONFIG_FILE, get_config
from .overrides import apply_overrides
from .settings import CountSettings, load_count_settings_from_dict

__all__ = [
    "get_config",
    "DEFAULT_CONFIG_FILE",
    "display_config",
    "apply_overrides",
    "CountSettings",
    "load_count_settings_from_dict",
]
