# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Parameter model, wire codecs and result records for an index."""

from typed_algolia.index.codec import (
    AlternativesAsExact,
    AroundRadius,
    Distinct,
    ExactOnSingleWordQuery,
    IgnorePlurals,
    MinProximity,
    QueryType,
    RemoveStopWords,
    RemoveWordsIfNoResults,
    SortFacetValuesBy,
    StringOrStringList,
    TypoTolerance,
)
from typed_algolia.index.query import (
    SearchParameters,
    SearchParametersBuilder,
    coerce_search_parameters,
    search_body,
)
from typed_algolia.index.settings import IndexSettings, IndexSettingsBuilder
from typed_algolia.index.types import (
    AddObjectResult,
    BatchOperationResult,
    DeleteIndexResult,
    DeleteObjectResult,
    HitCodec,
    SearchResult,
    UpdateOperationResult,
    decode_result,
)

__all__ = [
    "AddObjectResult",
    "AlternativesAsExact",
    "AroundRadius",
    "BatchOperationResult",
    "DeleteIndexResult",
    "DeleteObjectResult",
    "Distinct",
    "ExactOnSingleWordQuery",
    "HitCodec",
    "IgnorePlurals",
    "IndexSettings",
    "IndexSettingsBuilder",
    "MinProximity",
    "QueryType",
    "RemoveStopWords",
    "RemoveWordsIfNoResults",
    "SearchParameters",
    "SearchParametersBuilder",
    "SearchResult",
    "SortFacetValuesBy",
    "StringOrStringList",
    "TypoTolerance",
    "UpdateOperationResult",
    "coerce_search_parameters",
    "decode_result",
    "search_body",
]
