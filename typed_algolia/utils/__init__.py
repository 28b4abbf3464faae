# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from .async_utils import run_async
from .logger import get_logger, redact

__all__ = ["get_logger", "redact", "run_async"]
