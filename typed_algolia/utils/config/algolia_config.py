# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
import os
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from typed_algolia.exceptions import ConfigurationError

from .config_loader import ALGOLIA_CONFIG_ENV, DEFAULT_ALGOLIA_CONF, load_json_config, resolve_config_path

APPLICATION_ID_ENV = "ALGOLIA_APPLICATION_ID"
API_KEY_ENV = "ALGOLIA_API_KEY"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AlgoliaConfig(BaseModel):
    """Client configuration: credentials, transport and logging."""

    application_id: Optional[str] = Field(default=None, description="Algolia application id")
    api_key: Optional[str] = Field(default=None, description="Algolia API key")

    base_url: Optional[str] = Field(
        default=None,
        description="Override for https://<application_id>-dsn.algolia.net/1",
    )
    timeout: float = Field(default=30.0, description="HTTP request timeout (seconds)")

    log_level: str = Field(
        default="WARNING", description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    log_output: str = Field(
        default="stderr", description="Log output: stdout, stderr, or file path"
    )

    model_config = {"extra": "forbid"}

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: '{value}'. Must be one of: {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "AlgoliaConfig":
        """Create configuration from dictionary."""
        try:
            return cls(**config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Algolia configuration: {e}") from e

    def missing_credentials(self) -> List[str]:
        missing = []
        if not self.application_id:
            missing.append("application_id")
        if not self.api_key:
            missing.append("api_key")
        return missing


def load_algolia_config(config_path: Optional[str] = None) -> AlgoliaConfig:
    """Build the configuration from the config file and the environment.

    ``ALGOLIA_APPLICATION_ID`` / ``ALGOLIA_API_KEY`` (read after loading a
    ``.env`` file from the working directory, if any) override the values of
    the config file. A missing config file is not an error unless
    ``config_path`` names it explicitly.
    """
    load_dotenv(find_dotenv(usecwd=True))

    path = resolve_config_path(config_path, ALGOLIA_CONFIG_ENV, DEFAULT_ALGOLIA_CONF)
    if path is None and config_path:
        raise ConfigurationError(f"Config file does not exist: {config_path}")
    try:
        data = load_json_config(path) if path is not None else {}
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    config = AlgoliaConfig.from_dict(data)
    overrides = {}
    if os.environ.get(APPLICATION_ID_ENV):
        overrides["application_id"] = os.environ[APPLICATION_ID_ENV]
    if os.environ.get(API_KEY_ENV):
        overrides["api_key"] = os.environ[API_KEY_ENV]
    return config.model_copy(update=overrides)
