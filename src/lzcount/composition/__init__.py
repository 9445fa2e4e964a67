"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_count_settings_from_dict
from ..adapters.logging.setup import init_logging

# pyright checks each adapter against its Protocol here.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadCountSettings,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_count_settings: LoadCountSettings = load_count_settings_from_dict
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_count_settings: LoadCountSettings
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_count_settings=load_count_settings_from_dict,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Configuration is empty (all defaults), display is a no-op, and logging
    stays uninitialised. Counting settings use the real loader since it is
    pure.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_count_settings=load_count_settings_from_dict,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "get_config",
    "display_config",
    "load_count_settings_from_dict",
    "init_logging",
    "AppServices",
    "build_production",
    "build_testing",
]
