# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Runtime context and index factory for CLI commands."""

from dataclasses import dataclass, field
from typing import Optional

import typer

from typed_algolia.client import Client, SyncIndex
from typed_algolia.utils.config import load_algolia_config


@dataclass
class CLIContext:
    """Shared state for one CLI invocation."""

    output_format: str = "table"
    compact: bool = True
    config_path: Optional[str] = None
    _index: Optional[SyncIndex] = field(default=None, init=False, repr=False)

    def get_index(self, name: str) -> SyncIndex:
        """Open a blocking handle on ``name`` using the resolved credentials.

        Raises:
            ConfigurationError: If credentials are missing or the config file is invalid.
        """
        if self._index is not None and self._index.name == name:
            return self._index
        self.close_index()
        client = Client(config=load_algolia_config(self.config_path))
        self._index = client.init_index(name)
        return self._index

    def close_index(self) -> None:
        if self._index is None:
            return
        self._index.close()
        self._index = None


def get_cli_context(ctx: typer.Context) -> CLIContext:
    """Return a typed CLI context from Typer context."""
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context is not initialized")
    return ctx.obj
