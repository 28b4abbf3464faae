# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
typed_algolia - a typed client for the Algolia search API.

Typed search parameters and index settings in, typed hits out.
"""

from importlib.metadata import PackageNotFoundError, version

from typed_algolia.client import AsyncIndex, Client, SyncIndex
from typed_algolia.exceptions import (
    AlgoliaError,
    ConfigurationError,
    DecodeError,
    InvalidObjectError,
    TransportError,
)
from typed_algolia.index import (
    AroundRadius,
    Distinct,
    IgnorePlurals,
    IndexSettings,
    QueryType,
    SearchParameters,
    SearchResult,
    TypoTolerance,
)

try:
    __version__ = version("typed-algolia")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    "AlgoliaError",
    "AroundRadius",
    "AsyncIndex",
    "Client",
    "ConfigurationError",
    "DecodeError",
    "Distinct",
    "IgnorePlurals",
    "IndexSettings",
    "InvalidObjectError",
    "QueryType",
    "SearchParameters",
    "SearchResult",
    "SyncIndex",
    "TransportError",
    "TypoTolerance",
]
