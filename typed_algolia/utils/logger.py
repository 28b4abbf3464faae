# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Logging setup for typed_algolia.
"""

import logging
import sys
from typing import Optional

_FALLBACK_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_handler(output: str) -> logging.Handler:
    if output == "stdout":
        return logging.StreamHandler(sys.stdout)
    if output == "stderr":
        return logging.StreamHandler(sys.stderr)
    return logging.FileHandler(output)


def get_logger(
    name: str = "typed_algolia",
    format_string: Optional[str] = None,
    config=None,
) -> logging.Logger:
    """
    Return a logger configured from AlgoliaConfig.

    Handlers are attached once per logger name; later calls return the
    already configured logger unchanged.

    Args:
        name: Logger name
        format_string: Custom format string (overrides config)
        config: AlgoliaConfig to read level, format and output from.
            Loaded from the environment when omitted.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if config is None:
        try:
            from typed_algolia.utils.config import load_algolia_config

            config = load_algolia_config()
        except Exception:
            config = None

    if config is not None:
        level_name, log_format, output = config.log_level, config.log_format, config.log_output
    else:
        level_name, log_format, output = "WARNING", _FALLBACK_FORMAT, "stderr"

    handler = _build_handler(output)
    handler.setFormatter(logging.Formatter(format_string or log_format))
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(getattr(logging, level_name.upper(), logging.WARNING))
    return logger


def redact(secret: Optional[str]) -> str:
    """Mask a credential for log output, keeping the last four characters."""
    if not secret:
        return "<unset>"
    if len(secret) <= 4:
        return "****"
    return "****" + secret[-4:]
