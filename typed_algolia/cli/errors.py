# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Exception handling helpers for CLI commands."""

from typing import Any, Callable

import httpx
import typer

from typed_algolia.cli.context import CLIContext, get_cli_context
from typed_algolia.cli.output import output_error, output_success
from typed_algolia.client import SyncIndex
from typed_algolia.exceptions import AlgoliaError, ConfigurationError, TransportError
from typed_algolia.utils.config import ALGOLIA_CONFIG_ENV


def handle_command_error(ctx: CLIContext, exc: Exception) -> None:
    """Normalize command exceptions into user-facing output and exit codes."""
    if isinstance(exc, typer.Exit):
        raise exc

    if isinstance(exc, ConfigurationError):
        output_error(
            ctx,
            message=exc.message,
            code=exc.code,
            details={**exc.details, "config_file_env": ALGOLIA_CONFIG_ENV},
            exit_code=2,
        )

    elif isinstance(exc, TransportError) and isinstance(exc.__cause__, httpx.TransportError):
        output_error(
            ctx,
            message="Failed to reach the Algolia API. Check your network and application id.",
            code="CONNECTION_ERROR",
            details={"exception": str(exc.__cause__)},
            exit_code=3,
        )

    elif isinstance(exc, AlgoliaError):
        output_error(ctx, message=exc.message, code=exc.code, details=exc.details, exit_code=1)

    else:
        output_error(
            ctx,
            message=str(exc),
            code="CLI_ERROR",
            details={"exception": type(exc).__name__},
            exit_code=1,
        )


def execute_index_command(
    ctx: CLIContext,
    index_name: str,
    operation: Callable[[SyncIndex], Any],
) -> Any:
    """Run an index operation with consistent error handling and cleanup."""
    try:
        return operation(ctx.get_index(index_name))
    except Exception as exc:  # noqa: BLE001
        handle_command_error(ctx, exc)
    finally:
        ctx.close_index()


def run(ctx: typer.Context, index_name: str, fn: Callable[[SyncIndex], Any]) -> None:
    """Open the index, run ``fn`` on it and print the result."""
    cli_ctx = get_cli_context(ctx)
    result = execute_index_command(cli_ctx, index_name, fn)
    output_success(cli_ctx, result)
