# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Search command."""

from typing import List, Optional

import typer

from typed_algolia.cli.errors import run
from typed_algolia.index import SearchParameters


def register(app: typer.Typer) -> None:
    """Register search commands."""

    @app.command("search")
    def search_command(
        ctx: typer.Context,
        index: str = typer.Argument(..., help="Index name"),
        query: str = typer.Argument("", help="Query text"),
        page: Optional[int] = typer.Option(None, "--page", "-p", min=0, help="Page (0-based)"),
        hits_per_page: Optional[int] = typer.Option(
            None, "--hits-per-page", "-n", min=0, help="Hits per page"
        ),
        filters: Optional[str] = typer.Option(None, "--filters", "-f", help="Filter expression"),
        attributes: Optional[List[str]] = typer.Option(
            None, "--attribute", "-a", help="Attribute to retrieve (repeatable)"
        ),
    ) -> None:
        """Search an index."""
        params = SearchParameters(
            query=query,
            page=page,
            hits_per_page=hits_per_page,
            filters=filters,
            attributes_to_retrieve=attributes or None,
        )
        run(ctx, index, lambda idx: idx.search(params))
