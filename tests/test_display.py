"""Integration tests for the config display wrapper.

The wrapper flushes pending log output and maps lzcount's OutputFormat onto
lib_layered_config's renderer; core rendering is lib_layered_config's own.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from lzcount.adapters.config.display import display_config
from lzcount.domain.enums import OutputFormat

COUNT_SECTION: dict[str, Any] = {
    "lzcount": {"default_kind": "text", "default_width": "u32", "encoding": "utf-8", "output_format": "human"}
}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """Requesting a section that doesn't exist must raise ValueError in every format."""
    config = config_factory(COUNT_SECTION)

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_the_count_section(
    config_factory: Callable[[dict[str, Any]], Config],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Human output is TOML-like."""
    display_config(config_factory(COUNT_SECTION), output_format=OutputFormat.HUMAN)
    output = capsys.readouterr().out

    assert "[lzcount]" in output
    assert 'default_width = "u32"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_the_count_section(
    config_factory: Callable[[dict[str, Any]], Config],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """JSON output keeps keys and values quoted."""
    display_config(config_factory(COUNT_SECTION), output_format=OutputFormat.JSON, section="lzcount")
    output = capsys.readouterr().out

    assert '"default_kind": "text"' in output
    assert '"encoding": "utf-8"' in output


@pytest.mark.os_agnostic
def test_display_human_renders_profile_in_provenance(
    capsys: pytest.CaptureFixture[str],
    source_info_factory: Callable[..., SourceInfo],
) -> None:
    """Profile name must pass through to lib_layered_config."""
    metadata: dict[str, SourceInfo] = {
        "lzcount.default_width": source_info_factory(
            "lzcount.default_width", "user", "/home/user/.config/lzcount/config.toml"
        ),
    }
    config = Config({"lzcount": {"default_width": "u64"}}, metadata)

    display_config(config, output_format=OutputFormat.HUMAN, profile="production")

    assert "# layer:user profile:production" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_display_config_keeps_falsey_values(capsys: pytest.CaptureFixture[str]) -> None:
    """Zero and false values still render (the section is not 'not found')."""
    config = Config({"lib_log_rich": {"queue_maxsize": 0, "force_color": False}}, {})

    display_config(config, output_format=OutputFormat.HUMAN, section="lib_log_rich")

    output = capsys.readouterr().out
    assert "queue_maxsize = 0" in output
    assert "force_color = false" in output
