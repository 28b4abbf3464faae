# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Typer entrypoint for the typed-algolia CLI."""

from typing import Optional

import typer

from typed_algolia.cli.commands import register_commands
from typed_algolia.cli.context import CLIContext

app = typer.Typer(
    help="typed-algolia - query and manage Algolia indices",
    no_args_is_help=True,
    add_completion=False,
)

OUTPUT_FORMATS = ("table", "json")


def _version_callback(value: bool) -> None:
    if value:
        from typed_algolia import __version__

        typer.echo(f"typed-algolia {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    output_format: str = typer.Option(
        "table", "--output", "-o", help="Output format: table (default), json"
    ),
    compact: bool = typer.Option(
        True, "--compact/--pretty", help="Wrap JSON output in an envelope on one line, or indent it"
    ),
    config: Optional[str] = typer.Option(
        None, "--config", help="Path to a JSON config file (default ~/.algolia/algolia.conf)"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Configure shared CLI options."""
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"expected one of {', '.join(OUTPUT_FORMATS)}", param_hint="--output"
        )
    ctx.obj = CLIContext(output_format=output_format, compact=compact, config_path=config)


register_commands(app)


if __name__ == "__main__":
    app()
