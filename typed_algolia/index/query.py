# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Search query parameters.

See https://www.algolia.com/doc/api-reference/search-api-parameters/ for the
meaning of every parameter. The search endpoint does not take the parameters
as a JSON object: it expects a single ``params`` field holding them
URL-encoded, e.g. ``{"params": "query=foo&page=1"}``.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union
from urllib.parse import urlencode

from typed_algolia.index.aggregate import ParameterBuilder, ParameterSet, param
from typed_algolia.index.codec import (
    BOOLEAN,
    INTEGER,
    NUMBER,
    STRING,
    STRING_LIST,
    AlternativesAsExact,
    AroundRadius,
    Distinct,
    ExactOnSingleWordQuery,
    IgnorePlurals,
    ListOf,
    MinProximity,
    QueryType,
    RemoveWordsIfNoResults,
    SortFacetValuesBy,
    StringOrStringList,
    TypoTolerance,
    VariantCodec,
)

FILTER_CLAUSES = ListOf(VariantCodec(StringOrStringList))


@dataclass(frozen=True)
class SearchParameters(ParameterSet):
    """Parameters of a single search request. Every field is optional."""

    # search
    query: Optional[str] = param("query", STRING)

    # attributes
    attributes_to_retrieve: Optional[Sequence[str]] = param("attributesToRetrieve", STRING_LIST)
    restrict_searchable_attributes: Optional[Sequence[str]] = param(
        "restrictSearchableAttributes", STRING_LIST
    )

    # filtering
    filters: Optional[str] = param("filters", STRING)
    facet_filters: Optional[Sequence[StringOrStringList]] = param("facetFilters", FILTER_CLAUSES)
    optional_filters: Optional[Sequence[StringOrStringList]] = param(
        "optionalFilters", FILTER_CLAUSES
    )
    numeric_filters: Optional[Sequence[str]] = param("numericFilters", STRING_LIST)
    tag_filters: Optional[StringOrStringList] = param(
        "tagFilters", VariantCodec(StringOrStringList)
    )
    sum_or_filters_scores: Optional[bool] = param("sumOrFiltersScores", BOOLEAN)

    # faceting
    facets: Optional[Sequence[str]] = param("facets", STRING_LIST)
    max_values_per_facet: Optional[int] = param("maxValuesPerFacet", INTEGER)
    faceting_after_distinct: Optional[bool] = param("facetingAfterDistinct", BOOLEAN)
    sort_facet_values_by: Optional[SortFacetValuesBy] = param(
        "sortFacetValuesBy", VariantCodec(SortFacetValuesBy)
    )

    # highlighting-snippeting
    attributes_to_highlight: Optional[Sequence[str]] = param("attributesToHighlight", STRING_LIST)
    attributes_to_snippet: Optional[Sequence[str]] = param("attributesToSnippet", STRING_LIST)
    highlight_pre_tag: Optional[str] = param("highlightPreTag", STRING)
    highlight_post_tag: Optional[str] = param("highlightPostTag", STRING)
    snippet_ellipsis_text: Optional[str] = param("snippetEllipsisText", STRING)
    restrict_highlight_and_snippet_arrays: Optional[bool] = param(
        "restrictHighlightAndSnippetArrays", BOOLEAN
    )

    # pagination
    page: Optional[int] = param("page", INTEGER)
    hits_per_page: Optional[int] = param("hitsPerPage", INTEGER)
    offset: Optional[int] = param("offset", INTEGER)
    length: Optional[int] = param("length", INTEGER)

    # typos
    min_word_size_for_1_typo: Optional[int] = param("minWordSizefor1Typo", INTEGER)
    min_word_size_for_2_typos: Optional[int] = param("minWordSizefor2Typo", INTEGER)
    typo_tolerance: Optional[TypoTolerance] = param("typoTolerance", VariantCodec(TypoTolerance))
    allow_typos_on_numeric_tokens: Optional[bool] = param("allowTyposOnNumericTokens", BOOLEAN)
    disable_typo_tolerance_on_attributes: Optional[Sequence[str]] = param(
        "disableTypoToleranceOnAttributes", STRING_LIST
    )

    # geo-search
    around_lat_lng: Optional[str] = param("aroundLatLng", STRING)
    around_lat_lng_via_ip: Optional[bool] = param("aroundLatLngViaIP", BOOLEAN)
    around_radius: Optional[AroundRadius] = param("aroundRadius", VariantCodec(AroundRadius))
    around_precision: Optional[int] = param("aroundPrecision", INTEGER)
    minimum_around_radius: Optional[int] = param("minimumAroundRadius", INTEGER)
    inside_bounding_box: Optional[Sequence[float]] = param("insideBoundingBox", ListOf(NUMBER))
    inside_polygon: Optional[Sequence[float]] = param("insidePolygon", ListOf(NUMBER))

    # languages
    ignore_plurals: Optional[IgnorePlurals] = param("ignorePlurals", VariantCodec(IgnorePlurals))
    remove_stop_words: Optional[IgnorePlurals] = param(
        "removeStopWords", VariantCodec(IgnorePlurals)
    )
    query_languages: Optional[Sequence[str]] = param("queryLanguages", STRING_LIST)

    # query-strategy
    query_type: Optional[QueryType] = param("queryType", VariantCodec(QueryType))
    remove_words_if_no_results: Optional[RemoveWordsIfNoResults] = param(
        "removeWordsIfNoResults", VariantCodec(RemoveWordsIfNoResults)
    )
    advanced_syntax: Optional[bool] = param("advancedSyntax", BOOLEAN)
    optional_words: Optional[Sequence[str]] = param("optionalWords", STRING_LIST)
    disable_exact_on_attributes: Optional[Sequence[str]] = param(
        "disableExactOnAttributes", STRING_LIST
    )
    exact_on_single_word_query: Optional[ExactOnSingleWordQuery] = param(
        "exactOnSingleWordQuery", VariantCodec(ExactOnSingleWordQuery)
    )
    alternatives_as_exact: Optional[Sequence[AlternativesAsExact]] = param(
        "alternativesAsExact", ListOf(VariantCodec(AlternativesAsExact))
    )

    # query-rules
    enable_rules: Optional[bool] = param("enableRules", BOOLEAN)
    rule_contexts: Optional[Sequence[str]] = param("ruleContexts", STRING_LIST)

    # personalization
    enable_personalization: Optional[bool] = param("enablePersonalization", BOOLEAN)
    user_token: Optional[str] = param("userToken", STRING)

    # advanced
    distinct: Optional[Distinct] = param("distinct", VariantCodec(Distinct))
    get_ranking_info: Optional[bool] = param("getRankingInfo", BOOLEAN)
    click_analytics: Optional[bool] = param("clickAnalytics", BOOLEAN)
    analytics: Optional[bool] = param("analytics", BOOLEAN)
    analytics_tags: Optional[Sequence[str]] = param("analyticsTags", STRING_LIST)
    synonyms: Optional[bool] = param("synonyms", BOOLEAN)
    replace_synonyms_in_highlight: Optional[bool] = param(
        "replaceSynonymsInHighlight", BOOLEAN
    )
    min_proximity: Optional[MinProximity] = param("minProximity", VariantCodec(MinProximity))
    response_fields: Optional[Sequence[str]] = param("responseFields", STRING_LIST)
    max_facet_hits: Optional[int] = param("maxFacetHits", INTEGER)
    percentile_computation: Optional[bool] = param("percentileComputation", BOOLEAN)

    @classmethod
    def from_query(cls, text: str) -> "SearchParameters":
        """Parameters carrying only the query text."""
        return cls(query=text)

    @classmethod
    def builder(cls) -> "SearchParametersBuilder":
        return SearchParametersBuilder()

    def to_query_string(self) -> str:
        """URL-encode the set parameters as ``key=value`` pairs joined by ``&``."""
        return urlencode([(wire, _query_value(raw)) for wire, raw in self.to_dict().items()])


class SearchParametersBuilder(ParameterBuilder):
    """Incremental construction of ``SearchParameters``."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        super().__init__(SearchParameters, values)


def _query_value(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (int, float)):
        return str(raw)
    return json.dumps(raw, separators=(",", ":"), ensure_ascii=False)


def coerce_search_parameters(
    query: Union[str, SearchParameters, None],
) -> SearchParameters:
    """Accept a plain search string wherever SearchParameters are expected."""
    if query is None:
        return SearchParameters()
    if isinstance(query, SearchParameters):
        return query
    if isinstance(query, str):
        return SearchParameters.from_query(query)
    raise TypeError(f"expected a str or SearchParameters, got {type(query).__name__}")


def search_body(query: Union[str, SearchParameters, None]) -> Dict[str, str]:
    """Request body of the search endpoint: ``{"params": "<url-encoded>"}``."""
    return {"params": coerce_search_parameters(query).to_query_string()}
