"""Counting defaults model and loader.

Provides the CountSettings Pydantic model for the ``[lzcount]`` configuration
section and the loader that builds it from configuration dictionaries.
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator

from lzcount.domain.enums import InputKind, OutputFormat
from lzcount.domain.integers import IntWidth


class CountSettings(BaseModel):
    """Validated, immutable defaults for the ``count`` command.

    Example:
        >>> settings = CountSettings(default_kind="int", default_width="u8")
        >>> settings.default_kind
        <InputKind.INT: 'int'>
        >>> settings.default_width.bits
        8
        >>> CountSettings().encoding
        'utf-8'
    """

    model_config = ConfigDict(frozen=True)

    default_kind: InputKind = InputKind.TEXT
    default_width: IntWidth = IntWidth.U32
    encoding: str = "utf-8"
    output_format: OutputFormat = OutputFormat.HUMAN

    @field_validator("default_kind", "default_width", "output_format", mode="before")
    @classmethod
    def _lowercase_names(cls, v: Any) -> Any:
        """Accept ``"U8"`` or ``"JSON"`` from environment variables.

        Examples:
            >>> CountSettings._lowercase_names("U64")
            'u64'
            >>> CountSettings._lowercase_names(IntWidth.I8)
            <IntWidth.I8: 'i8'>
        """
        if isinstance(v, str) and not isinstance(v, (InputKind, IntWidth, OutputFormat)):
            return v.strip().lower()
        return v

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            return codecs.lookup(v).name
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {v}") from exc


def load_count_settings_from_dict(config_dict: Mapping[str, Any]) -> CountSettings:
    """Load CountSettings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    CountSettings model. Missing sections and keys fall back to defaults.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have an ``lzcount`` section.

    Returns:
        Validated counting defaults.

    Raises:
        pydantic.ValidationError: When a configured value is invalid.

    Example:
        >>> settings = load_count_settings_from_dict({"lzcount": {"default_width": "i64"}})
        >>> settings.default_width
        <IntWidth.I64: 'i64'>
        >>> load_count_settings_from_dict({}).default_kind
        <InputKind.TEXT: 'text'>
    """
    section: Any = config_dict.get("lzcount", {})

    if not isinstance(section, Mapping):
        return CountSettings.model_validate(section)

    return CountSettings.model_validate(dict(cast(Mapping[str, Any], section)))


__all__ = [
    "CountSettings",
    "load_count_settings_from_dict",
]
