"""Counting CLI commands.

Contents:
    * :func:`cli_count` - Count leading zeros of one or more values.
    * :func:`cli_widths` - List supported integer widths.
"""

from __future__ import annotations

import binascii
import logging
from collections.abc import Sequence
from dataclasses import dataclass

import lib_log_rich.runtime
import orjson
import rich_click as click
from pydantic import ValidationError

from lzcount.adapters.config.settings import CountSettings
from lzcount.domain.counting import Countable, count_leading_zeros
from lzcount.domain.enums import InputKind, OutputFormat
from lzcount.domain.integers import FixedInt, IntWidth

from ..constants import CLICK_CONTEXT_SETTINGS, COUNT_SECTION
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CountResult:
    """One counted command-line value."""

    value: str
    kind: InputKind
    count: int


def to_countable(raw: str, *, kind: InputKind, width: IntWidth, encoding: str, hex_input: bool) -> Countable:
    """Turn a command-line string into the value counted for ``kind``.

    Raises:
        ValueError: Invalid integer literal, hex string, or encoding failure.
        IntegerRangeError: Integer out of range for ``width``.

    Examples:
        >>> to_countable("0012", kind=InputKind.BYTES, width=IntWidth.U32, encoding="utf-8", hex_input=False)
        b'0012'
        >>> to_countable("0000", kind=InputKind.BYTES, width=IntWidth.U32, encoding="utf-8", hex_input=True)
        b'\\x00\\x00'
        >>> to_countable("01x", kind=InputKind.CHARS, width=IntWidth.U32, encoding="utf-8", hex_input=False)
        ['0', '1', 'x']
        >>> to_countable("1", kind=InputKind.INT, width=IntWidth.U8, encoding="utf-8", hex_input=False)
        FixedInt(value=1, width=<IntWidth.U8: 'u8'>)
        >>> to_countable("1_000", kind=InputKind.INT, width=IntWidth.U32, encoding="utf-8", hex_input=False)
        Traceback (most recent call last):
        ...
        ValueError: invalid integer '1_000': expected ASCII decimal digits
    """
    if kind is InputKind.BYTES:
        if hex_input:
            try:
                return binascii.unhexlify(raw)
            except binascii.Error as exc:
                raise ValueError(f"invalid hex value {raw!r}: {exc}") from exc
        return raw.encode(encoding)
    if kind is InputKind.CHARS:
        return list(raw)
    if kind is InputKind.INT:
        digits = raw[1:] if raw.startswith("-") else raw
        if not (digits.isascii() and digits.isdigit()):
            raise ValueError(f"invalid integer {raw!r}: expected ASCII decimal digits")
        return FixedInt(int(raw, 10), width)
    return raw


def render_results(results: Sequence[CountResult], output_format: OutputFormat) -> str:
    """Format results as ``count<TAB>value`` lines or a JSON array.

    Examples:
        >>> render_results([CountResult("007", InputKind.TEXT, 2)], OutputFormat.HUMAN)
        '2\\t007'
        >>> render_results([CountResult("007", InputKind.TEXT, 2)], OutputFormat.JSON)
        '[{"value":"007","kind":"text","count":2}]'
    """
    if output_format is OutputFormat.JSON:
        payload = [{"value": r.value, "kind": r.kind.value, "count": r.count} for r in results]
        return orjson.dumps(payload).decode("utf-8")
    return "\n".join(f"{r.count}\t{r.value}" for r in results)


def _load_settings(ctx: click.Context) -> CountSettings:
    cli_ctx = get_cli_context(ctx)
    try:
        return cli_ctx.count_settings()
    except ValidationError as exc:
        click.echo(f"Error: invalid [{COUNT_SECTION}] configuration:\n{exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("count", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in InputKind], case_sensitive=False),
    default=None,
    help="How to interpret VALUES (default from [lzcount] default_kind)",
)
@click.option(
    "--width",
    type=click.Choice([w.value for w in IntWidth], case_sensitive=False),
    default=None,
    help="Integer width for --kind int (default from [lzcount] default_width)",
)
@click.option("--encoding", default=None, help="Encoding for --kind bytes (default from [lzcount] encoding)")
@click.option("--hex", "hex_input", is_flag=True, default=False, help="Read --kind bytes values as hex, e.g. 0000")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format (default from [lzcount] output_format)",
)
@click.pass_context
def cli_count(
    ctx: click.Context,
    values: tuple[str, ...],
    kind: str | None,
    width: str | None,
    encoding: str | None,
    hex_input: bool,
    output_format: str | None,
) -> None:
    """Count leading zeros of each VALUE.

    Integers count leading zero bits at a fixed width; text, bytes and
    characters count leading '0' symbols (0x30 for bytes, never 0x00).
    """
    settings = _load_settings(ctx)
    input_kind = InputKind(kind.lower()) if kind else settings.default_kind
    int_width = IntWidth(width.lower()) if width else settings.default_width
    fmt = OutputFormat(output_format.lower()) if output_format else settings.output_format
    value_encoding = encoding or settings.encoding
    if hex_input and input_kind is not InputKind.BYTES:
        raise click.UsageError(f"--hex only applies to --kind bytes, not --kind {input_kind.value}", ctx=ctx)

    extra = {"command": "count", "kind": input_kind.value, "values": len(values)}
    with lib_log_rich.runtime.bind(job_id="cli-count", extra=extra):
        results: list[CountResult] = []
        for raw in values:
            try:
                countable = to_countable(
                    raw, kind=input_kind, width=int_width, encoding=value_encoding, hex_input=hex_input
                )
            except (ValueError, LookupError) as exc:
                logger.error("Rejected value", extra={"value": raw, "error": str(exc)})
                click.echo(f"Error: {exc}", err=True)
                raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
            results.append(CountResult(value=raw, kind=input_kind, count=count_leading_zeros(countable)))
        logger.info("Counted leading zeros", extra={"kind": input_kind.value, "width": int_width.value})
        click.echo(render_results(results, fmt))


@click.command("widths", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_widths() -> None:
    """List supported integer widths with their bit sizes and ranges.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli_widths)
        >>> "u128" in result.output
        True
    """
    for width in IntWidth:
        click.echo(f"{width.value:<6} {width.bits:>3} bits  {width.min_value}..{width.max_value}")


__all__ = ["CountResult", "cli_count", "cli_widths", "render_results", "to_countable"]
