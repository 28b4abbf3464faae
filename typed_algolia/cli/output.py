# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""CLI output helpers."""

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

import typer
from pydantic import BaseModel
from tabulate import tabulate

from typed_algolia.cli.context import CLIContext
from typed_algolia.index.aggregate import ParameterSet

_MAX_COL_WIDTH = 120


def _to_serializable(value: Any) -> Any:
    """Convert results to JSON-serializable primitives."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, ParameterSet):
        return value.to_dict()
    if isinstance(value, Enum):
        return _to_serializable(value.value)
    if is_dataclass(value):
        return _to_serializable(asdict(value))
    if isinstance(value, dict):
        return {str(k): _to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_serializable(item) for item in value]
    return str(value)


def _cell(val: Any) -> str:
    s = val if isinstance(val, str) else json.dumps(val, ensure_ascii=False)
    return s[: _MAX_COL_WIDTH - 3] + "..." if len(s) > _MAX_COL_WIDTH else s


def _rows_table(rows: List[Dict[str, Any]]) -> str:
    headers: List[str] = []
    for row in rows:
        for key in row:
            if key not in headers:
                headers.append(key)
    values = [[_cell(row[h]) if h in row else "" for h in headers] for row in rows]
    return tabulate(values, headers=headers, tablefmt="plain")


def _to_table(data: Any) -> Optional[str]:
    """Render data as a table, or return None when it has no tabular shape."""
    if not isinstance(data, dict):
        return None

    # search result: hits table followed by a paging summary
    if "hits" in data and "nb_hits" in data:
        hits = [h for h in data["hits"] if isinstance(h, dict)]
        summary = (
            f"{data['nb_hits']} hits, page {data['page'] + 1}/{max(data['nb_pages'], 1)} "
            f"({data['processing_time_ms']} ms)"
        )
        return f"{_rows_table(hits)}\n\n{summary}" if hits else summary

    if not data:
        return "(empty)"
    return tabulate([[k, _cell(v)] for k, v in data.items()], tablefmt="plain")


def output_success(ctx: CLIContext, result: Any) -> None:
    """Print successful command result."""
    serializable = _to_serializable(result)

    if ctx.output_format == "json":
        if ctx.compact:
            typer.echo(json.dumps({"ok": True, "result": serializable}, ensure_ascii=False))
        else:
            typer.echo(json.dumps(serializable, ensure_ascii=False, indent=2))
        return

    table = _to_table(serializable)
    if table is not None:
        typer.echo(table)
    elif serializable is not None:
        typer.echo(json.dumps(serializable, ensure_ascii=False))


def output_error(
    ctx: CLIContext,
    *,
    message: str,
    code: str,
    exit_code: int,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Print error in JSON or plain format then exit."""
    details = details or {}
    if ctx.output_format == "json":
        payload = {
            "ok": False,
            "error": {"code": code, "message": message, "details": _to_serializable(details)},
        }
        typer.echo(json.dumps(payload, ensure_ascii=False), err=True)
    else:
        typer.echo(f"ERROR[{code}]: {message}", err=True)
    raise typer.Exit(exit_code)
