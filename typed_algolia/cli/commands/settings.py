# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Settings command."""

import typer

from typed_algolia.cli.errors import run


def register(app: typer.Typer) -> None:
    """Register settings commands."""

    @app.command("settings")
    def settings_command(
        ctx: typer.Context,
        index: str = typer.Argument(..., help="Index name"),
    ) -> None:
        """Show the settings of an index."""
        run(ctx, index, lambda idx: idx.get_settings())
