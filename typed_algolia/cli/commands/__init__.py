# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Command registration for the typed-algolia CLI."""

import typer

from typed_algolia.cli.commands import objects, search, settings


def register_commands(app: typer.Typer) -> None:
    """Register all supported commands into the root CLI app."""
    search.register(app)
    objects.register(app)
    settings.register(app)
