# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from .algolia_config import API_KEY_ENV, APPLICATION_ID_ENV, AlgoliaConfig, load_algolia_config
from .config_loader import (
    ALGOLIA_CONFIG_ENV,
    DEFAULT_ALGOLIA_CONF,
    DEFAULT_CONFIG_DIR,
    load_json_config,
    resolve_config_path,
)

__all__ = [
    "ALGOLIA_CONFIG_ENV",
    "API_KEY_ENV",
    "APPLICATION_ID_ENV",
    "AlgoliaConfig",
    "DEFAULT_ALGOLIA_CONF",
    "DEFAULT_CONFIG_DIR",
    "load_algolia_config",
    "load_json_config",
    "resolve_config_path",
]
