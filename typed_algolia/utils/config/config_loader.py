# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Configuration file loading utilities.

The config file is located with a three-level resolution chain:
  1. Explicit path (constructor parameter / --config)
  2. ``ALGOLIA_CONFIG_FILE`` environment variable
  3. Default path ``~/.algolia/algolia.conf``

The first level that names a path wins, whether or not the file exists.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG_DIR = Path.home() / ".algolia"

ALGOLIA_CONFIG_ENV = "ALGOLIA_CONFIG_FILE"

DEFAULT_ALGOLIA_CONF = "algolia.conf"


def resolve_config_path(
    explicit_path: Optional[str] = None,
    env_var: str = ALGOLIA_CONFIG_ENV,
    default_filename: str = DEFAULT_ALGOLIA_CONF,
) -> Optional[Path]:
    """Return the config file selected by the resolution chain, or None if it does not exist."""
    env_val = os.environ.get(env_var)
    if explicit_path:
        candidate = Path(explicit_path).expanduser()
    elif env_val:
        candidate = Path(env_val).expanduser()
    else:
        candidate = DEFAULT_CONFIG_DIR / default_filename
    return candidate if candidate.exists() else None


def load_json_config(path: Path) -> Dict[str, Any]:
    """Load and parse a JSON config file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file contains invalid JSON or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return data
