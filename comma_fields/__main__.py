"""CLI entry point: scan each line of a file or stdin into comma-separated fields."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import click

from comma_fields.config import OUTPUT_FORMATS, load_config
from comma_fields.domain.exceptions import CommaFieldsException
from comma_fields.presentation.formatter import get_formatter
from comma_fields.scanner.field_scanner import split_fields

logger = logging.getLogger(__name__)


def _read_input(source: str, encoding: str) -> str:
    if source == "-":
        data = click.get_binary_stream("stdin").read()
    else:
        data = Path(source).read_bytes()
    return data.decode(encoding)


def _iter_lines(text: str) -> Iterator[str]:
    """Split on newlines, dropping the terminator (``\\n`` or ``\\r\\n``)."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


@click.command()
@click.argument(
    "source",
    required=False,
    default="-",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--config", "-c",
    default=None,
    help="Path to YAML config file",
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (overrides config/env)",
)
@click.option(
    "--encoding",
    default=None,
    help="Input encoding, e.g. 'utf-8' (overrides config/env)",
)
@click.option(
    "--skip-blank/--keep-blank",
    default=None,
    help="Skip empty lines instead of emitting one empty field (overrides config/env)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=None,
    help="Enable debug logging (overrides config/env)",
)
def cli(
    source: str,
    config: str | None,
    output_format: str | None,
    encoding: str | None,
    skip_blank: bool | None,
    verbose: bool | None,
) -> None:
    """Split every line of SOURCE into comma-separated fields.

    Commas inside '...' or "..." are kept as field content. SOURCE defaults
    to stdin.

    Configuration priority: YAML config < env vars (COMMA_FIELDS_*) < CLI arguments.
    """
    cli_overrides = {
        "output.format": output_format,
        "output.verbose": verbose,
        "input.encoding": encoding,
        "input.skip_blank": skip_blank,
    }
    app_config = load_config(config_path=config, cli_overrides=cli_overrides)

    logging.basicConfig(
        level=logging.DEBUG if app_config.output.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        text = _read_input(source, app_config.input.encoding)
    except (UnicodeDecodeError, LookupError) as e:
        click.echo(f"Error: cannot decode {source}: {e}", err=True)
        sys.exit(1)

    records: list[list[str]] = []
    try:
        for line in _iter_lines(text):
            if app_config.input.skip_blank and not line.strip():
                continue
            records.append(split_fields(line))
    except CommaFieldsException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.debug("Scanned %d records from %s", len(records), source)
    click.echo(get_formatter(app_config.output.format).format_records(records), nl=False)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
