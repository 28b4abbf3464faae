# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Persistent index settings.

Sent and received as a plain JSON object; unset fields are left out of the
body entirely. See https://www.algolia.com/doc/api-reference/settings-api-parameters/.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

from typed_algolia.index.aggregate import ParameterBuilder, ParameterSet, param
from typed_algolia.index.codec import (
    BOOLEAN,
    INTEGER,
    STRING,
    STRING_LIST,
    AlternativesAsExact,
    Distinct,
    ExactOnSingleWordQuery,
    IgnorePlurals,
    ListOf,
    MapOf,
    MinProximity,
    QueryType,
    RemoveWordsIfNoResults,
    SortFacetValuesBy,
    TypoTolerance,
    VariantCodec,
)


@dataclass(frozen=True)
class IndexSettings(ParameterSet):
    """Index settings. Every field is optional."""

    # attributes
    searchable_attributes: Optional[Sequence[str]] = param("searchableAttributes", STRING_LIST)
    attributes_for_faceting: Optional[Sequence[str]] = param("attributesForFaceting", STRING_LIST)
    unretrievable_attributes: Optional[Sequence[str]] = param("unretrievableAttributes", STRING_LIST)
    attributes_to_retrieve: Optional[Sequence[str]] = param("attributesToRetrieve", STRING_LIST)

    # ranking
    ranking: Optional[Sequence[str]] = param("ranking", STRING_LIST)
    custom_ranking: Optional[Sequence[str]] = param("customRanking", STRING_LIST)
    replicas: Optional[Sequence[str]] = param("replicas", STRING_LIST)

    # faceting
    max_values_per_facet: Optional[int] = param("maxValuesPerFacet", INTEGER)
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
    hits_per_page: Optional[int] = param("hitsPerPage", INTEGER)
    pagination_limited_to: Optional[int] = param("paginationLimitedTo", INTEGER)

    # typos
    min_word_size_for_1_typo: Optional[int] = param("minWordSizefor1Typo", INTEGER)
    min_word_size_for_2_typos: Optional[int] = param("minWordSizefor2Typo", INTEGER)
    typo_tolerance: Optional[TypoTolerance] = param("typoTolerance", VariantCodec(TypoTolerance))
    allow_typos_on_numeric_tokens: Optional[bool] = param("allowTyposOnNumericTokens", BOOLEAN)
    disable_typo_tolerance_on_attributes: Optional[Sequence[str]] = param(
        "disableTypoToleranceOnAttributes", STRING_LIST
    )
    disable_typo_tolerance_on_words: Optional[Sequence[str]] = param(
        "disableTypoToleranceOnWords", STRING_LIST
    )
    separators_to_index: Optional[str] = param("separatorsToIndex", STRING)

    # languages
    ignore_plurals: Optional[IgnorePlurals] = param("ignorePlurals", VariantCodec(IgnorePlurals))
    remove_stop_words: Optional[IgnorePlurals] = param(
        "removeStopWords", VariantCodec(IgnorePlurals)
    )
    camel_case_attributes: Optional[Sequence[str]] = param("camelCaseAttributes", STRING_LIST)
    decompounded_attributes: Optional[Mapping[str, Sequence[str]]] = param(
        "decompoundedAttributes", MapOf(STRING_LIST)
    )
    keep_diacritics_on_characters: Optional[str] = param("keepDiacriticsOnCharacters", STRING)
    query_languages: Optional[Sequence[str]] = param("queryLanguages", STRING_LIST)

    # query-strategy
    query_type: Optional[QueryType] = param("queryType", VariantCodec(QueryType))
    remove_words_if_no_results: Optional[RemoveWordsIfNoResults] = param(
        "removeWordsIfNoResults", VariantCodec(RemoveWordsIfNoResults)
    )
    advanced_syntax: Optional[bool] = param("advancedSyntax", BOOLEAN)
    optional_words: Optional[Sequence[str]] = param("optionalWords", STRING_LIST)
    disable_prefix_on_attributes: Optional[Sequence[str]] = param(
        "disablePrefixOnAttributes", STRING_LIST
    )
    disable_exact_on_attributes: Optional[Sequence[str]] = param(
        "disableExactOnAttributes", STRING_LIST
    )
    exact_on_single_word_query: Optional[ExactOnSingleWordQuery] = param(
        "exactOnSingleWordQuery", VariantCodec(ExactOnSingleWordQuery)
    )
    alternatives_as_exact: Optional[Sequence[AlternativesAsExact]] = param(
        "alternativesAsExact", ListOf(VariantCodec(AlternativesAsExact))
    )
    enable_rules: Optional[bool] = param("enableRules", BOOLEAN)

    # performance
    numeric_attributes_for_filtering: Optional[Sequence[str]] = param(
        "numericAttributesForFiltering", STRING_LIST
    )
    allow_compression_of_integer_array: Optional[bool] = param(
        "allowCompressionOfIntegerArray", BOOLEAN
    )

    # advanced
    attribute_for_distinct: Optional[str] = param("attributeForDistinct", STRING)
    distinct: Optional[Distinct] = param("distinct", VariantCodec(Distinct))
    replace_synonyms_in_highlight: Optional[bool] = param(
        "replaceSynonymsInHighlight", BOOLEAN
    )
    min_proximity: Optional[MinProximity] = param("minProximity", VariantCodec(MinProximity))
    response_fields: Optional[Sequence[str]] = param("responseFields", STRING_LIST)
    max_facet_hits: Optional[int] = param("maxFacetHits", INTEGER)

    @classmethod
    def builder(cls) -> "IndexSettingsBuilder":
        return IndexSettingsBuilder()


class IndexSettingsBuilder(ParameterBuilder):
    """Incremental construction of ``IndexSettings``."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        super().__init__(IndexSettings, values)
