"""Behaviour tests for CLI context helpers and root-group edge cases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from lzcount.adapters import cli as cli_mod
from lzcount.adapters.cli.context import CLIContext, get_cli_context, load_profile_config
from lzcount.adapters.cli.main import main
from lzcount.composition import build_production, build_testing

# ---------------------------------------------------------------------------
# main(): click exceptions become exit codes
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_main_turns_usage_errors_into_exit_codes(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A malformed --set is a usage error, reported and returned as exit code 2."""
    exit_code = main(["--set", "invalid_no_dot=value", "widths"], services_factory=build_production)

    assert exit_code == 2
    assert "at least one dot" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_rejects_missing_count_values(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """count needs at least one VALUE."""
    exit_code = main(["count"], services_factory=build_production)

    assert exit_code == 2
    assert "VALUES" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# root group: services factory and profile handling
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_cli_root_raises_when_obj_not_callable(cli_runner: CliRunner) -> None:
    """A non-callable ctx.obj is a wiring bug."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_cli_root_rejects_invalid_profiles(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    """Path-traversal profile names are reported against --profile."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../etc", "widths"], obj=production_factory)

    assert result.exit_code == 2
    assert "--profile" in result.output


@pytest.mark.os_agnostic
def test_cli_root_stores_context_for_subcommands(cli_runner: CliRunner) -> None:
    """Subcommands see the profile, overrides, and services the root stored."""
    seen: list[CLIContext] = []

    @click.command("inspect-context")
    @click.pass_context
    def inspect_context(ctx: click.Context) -> None:
        seen.append(get_cli_context(ctx))

    cli_mod.cli.add_command(inspect_context)
    try:
        result = cli_runner.invoke(
            cli_mod.cli,
            ["--profile", "staging", "--set", "lzcount.default_width=u8", "inspect-context"],
            obj=build_testing,
        )
    finally:
        cli_mod.cli.commands.pop("inspect-context")

    assert result.exit_code == 0
    (context,) = seen
    assert context.profile == "staging"
    assert context.set_overrides == ("lzcount.default_width=u8",)
    assert context.config.get("lzcount.default_width") == "u8"
    assert context.traceback is False


# ---------------------------------------------------------------------------
# CLIContext
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    """RuntimeError raised when Click context has no CLIContext."""
    ctx = click.Context(click.Command("test"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_get_cli_context_returns_the_stored_context() -> None:
    """The object the root group stores is handed back unchanged."""
    ctx = click.Context(click.Command("test"))
    stored = CLIContext(config=Config({}, {}), services=build_production(), traceback=True, profile="staging")
    ctx.obj = stored

    assert get_cli_context(ctx) is stored


@pytest.mark.os_agnostic
def test_for_profile_without_a_profile_keeps_the_context() -> None:
    """No subcommand profile means the root configuration is reused."""
    context = CLIContext(config=Config({}, {}), services=build_testing())

    assert context.for_profile(None) is context
    assert context.for_profile("") is context


@pytest.mark.os_agnostic
def test_for_profile_reloads_and_reapplies_overrides() -> None:
    """A profile reload keeps the root --set overrides."""
    context = CLIContext(
        config=Config({}, {}),
        services=build_testing(),
        set_overrides=("lzcount.encoding=latin-1",),
    )

    reloaded = context.for_profile("staging")

    assert reloaded.profile == "staging"
    assert reloaded.set_overrides == context.set_overrides
    assert reloaded.config.get("lzcount.encoding") == "latin-1"
    assert context.profile is None


@pytest.mark.os_agnostic
def test_count_settings_reads_the_active_config() -> None:
    """count_settings validates the [lzcount] section of this context."""
    context = CLIContext(config=Config({"lzcount": {"default_width": "u8"}}, {}), services=build_testing())

    assert context.count_settings().default_width.value == "u8"


@pytest.mark.os_agnostic
def test_load_profile_config_reports_bad_profiles_against_the_option(clear_config_cache: None) -> None:
    """Invalid profile names become click.BadParameter."""
    with pytest.raises(click.BadParameter, match="profile"):
        load_profile_config(build_production(), "../x", ())


@pytest.mark.os_agnostic
def test_load_profile_config_reports_malformed_overrides_as_usage_errors() -> None:
    """An override without SECTION.KEY=VALUE shape is a usage error."""
    with pytest.raises(click.UsageError):
        load_profile_config(build_testing(), None, ("no_equals_sign",))
