# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Object commands."""

from typing import List, Optional

import typer

from typed_algolia.cli.errors import run


def register(app: typer.Typer) -> None:
    """Register object commands."""

    @app.command("get-object")
    def get_object_command(
        ctx: typer.Context,
        index: str = typer.Argument(..., help="Index name"),
        object_id: str = typer.Argument(..., help="objectID"),
        attributes: Optional[List[str]] = typer.Option(
            None, "--attribute", "-a", help="Attribute to retrieve (repeatable)"
        ),
    ) -> None:
        """Fetch one object."""
        run(ctx, index, lambda idx: idx.get_object(object_id, attributes or None))

    @app.command("delete-object")
    def delete_object_command(
        ctx: typer.Context,
        index: str = typer.Argument(..., help="Index name"),
        object_id: str = typer.Argument(..., help="objectID"),
    ) -> None:
        """Delete one object."""
        run(ctx, index, lambda idx: idx.delete_object(object_id))
