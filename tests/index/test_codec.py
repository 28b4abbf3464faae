# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the polymorphic parameter codecs."""

import pytest

from typed_algolia.exceptions import DecodeError
from typed_algolia.index import (
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
from typed_algolia.index.codec import (
    INTEGER,
    NUMBER,
    STRING_LIST,
    Codec,
    FrozenMap,
    MapOf,
    describe_unexpected,
)


class TestAroundRadius:
    """aroundRadius: "all" or meters"""

    def test_encode_all(self):
        assert AroundRadius.ALL.encode() == "all"

    def test_encode_radius(self):
        assert AroundRadius.radius(20).encode() == 20

    def test_decode(self):
        assert AroundRadius.decode("all") is AroundRadius.ALL
        assert AroundRadius.decode(20) == AroundRadius.radius(20)
        assert AroundRadius.decode(0).meters == 0

    def test_decode_unknown_string(self):
        with pytest.raises(DecodeError) as exc_info:
            AroundRadius.decode("unknown")
        assert str(exc_info.value) == 'expected "all", got "unknown"'

    @pytest.mark.parametrize("raw", [True, 1.5, -1, None, [20]])
    def test_decode_wrong_shape(self, raw):
        with pytest.raises(DecodeError, match="expected all or radius in meters"):
            AroundRadius.decode(raw)

    def test_is_all(self):
        assert AroundRadius.ALL.is_all
        assert not AroundRadius.radius(5).is_all

    def test_repr(self):
        assert repr(AroundRadius.ALL) == "AroundRadius.ALL"
        assert repr(AroundRadius.radius(7)) == "AroundRadius.radius(7)"


class TestTypoTolerance:
    """typoTolerance: bool, "min" or "strict" """

    @pytest.mark.parametrize(
        "variant, wire",
        [
            (TypoTolerance.ENABLED, True),
            (TypoTolerance.DISABLED, False),
            (TypoTolerance.MIN, "min"),
            (TypoTolerance.STRICT, "strict"),
        ],
    )
    def test_wire_shape(self, variant, wire):
        assert variant.encode() == wire
        assert type(variant.encode()) is type(wire)
        assert TypoTolerance.decode(wire) is variant

    def test_decode_unknown_string(self):
        with pytest.raises(DecodeError) as exc_info:
            TypoTolerance.decode("unknown")
        assert str(exc_info.value) == 'expected "min" or "strict", got "unknown"'

    def test_integer_is_not_a_bool(self):
        with pytest.raises(DecodeError) as exc_info:
            TypoTolerance.decode(1)
        assert str(exc_info.value) == "invalid type: integer `1`, expected a bool or String"

    def test_decode_accepts_variant(self):
        assert TypoTolerance.decode(TypoTolerance.MIN) is TypoTolerance.MIN


class TestIgnorePlurals:
    """ignorePlurals / removeStopWords: bool or ISO code list"""

    def test_encode_languages(self):
        assert IgnorePlurals.for_languages("fr").encode() == ["fr"]

    def test_encode_flags(self):
        assert IgnorePlurals.ENABLED.encode() is True
        assert IgnorePlurals.DISABLED.encode() is False

    def test_decode_languages(self):
        decoded = IgnorePlurals.decode(["fr", "en"])
        assert decoded == IgnorePlurals.for_languages("fr", "en")
        assert decoded.languages == ("fr", "en")

    def test_for_languages_accepts_a_list(self):
        assert IgnorePlurals.for_languages(["de", "nl"]) == IgnorePlurals.for_languages("de", "nl")

    def test_decode_flags(self):
        assert IgnorePlurals.decode(True) == IgnorePlurals.ENABLED
        assert IgnorePlurals.decode(False) == IgnorePlurals.DISABLED
        assert IgnorePlurals.ENABLED.languages is None

    def test_decode_string(self):
        with pytest.raises(DecodeError) as exc_info:
            IgnorePlurals.decode("unknown")
        assert (
            str(exc_info.value)
            == 'invalid type: string "unknown", expected a bool or a list of ISO codes'
        )

    def test_decode_non_string_code(self):
        with pytest.raises(DecodeError, match="expected a string"):
            IgnorePlurals.decode(["fr", 3])

    def test_empty_language_list(self):
        assert IgnorePlurals.decode([]).encode() == []

    def test_remove_stop_words_shares_shapes(self):
        assert RemoveStopWords.decode(["en"]).encode() == ["en"]

    def test_repr(self):
        assert repr(IgnorePlurals.ENABLED) == "IgnorePlurals.ENABLED"
        assert repr(IgnorePlurals.for_languages("fr")) == "IgnorePlurals.for_languages(['fr'])"


class TestWireEnums:
    """Closed string enumerations"""

    @pytest.mark.parametrize(
        "enum_type",
        [
            SortFacetValuesBy,
            QueryType,
            RemoveWordsIfNoResults,
            ExactOnSingleWordQuery,
            AlternativesAsExact,
        ],
    )
    def test_every_literal_round_trips(self, enum_type):
        for member in enum_type:
            assert enum_type.decode(member.encode()) is member

    def test_literals(self):
        assert QueryType.PREFIX_LAST.encode() == "prefixLast"
        assert RemoveWordsIfNoResults.ALL_OPTIONS.encode() == "allOptions"
        assert AlternativesAsExact.MULTI_WORDS_SYNONYM.encode() == "multiWordsSynonym"
        assert SortFacetValuesBy.ALPHA.encode() == "alpha"

    def test_unknown_variant(self):
        with pytest.raises(DecodeError) as exc_info:
            SortFacetValuesBy.decode("size")
        assert str(exc_info.value) == (
            "invalid value: unknown SortFacetValuesBy variant: size, "
            "expected a string for SortFacetValuesBy"
        )

    def test_matching_is_case_sensitive(self):
        with pytest.raises(DecodeError, match="unknown QueryType variant: PrefixLast"):
            QueryType.decode("PrefixLast")

    def test_non_string(self):
        with pytest.raises(DecodeError, match="invalid type: integer `1`"):
            QueryType.decode(1)


class TestRankedEnums:
    """distinct and minProximity are sent as bare integers"""

    def test_distinct(self):
        assert Distinct.decode(2) is Distinct.TWO
        assert Distinct.THREE.encode() == 3
        assert type(Distinct.THREE.encode()) is int

    def test_distinct_out_of_range(self):
        with pytest.raises(DecodeError) as exc_info:
            Distinct.decode(4)
        assert str(exc_info.value) == "invalid value: 4, expected one of: 0, 1, 2, 3"

    def test_min_proximity_range(self):
        assert [member.encode() for member in MinProximity] == [1, 2, 3, 4, 5, 6, 7]
        with pytest.raises(DecodeError, match="expected one of: 1, 2, 3, 4, 5, 6, 7"):
            MinProximity.decode(0)

    def test_bool_rejected(self):
        with pytest.raises(DecodeError, match="boolean `true`"):
            Distinct.decode(True)


class TestStringOrStringList:
    def test_single(self):
        clause = StringOrStringList.decode("brand:Apple")
        assert not clause.is_list
        assert clause.encode() == "brand:Apple"

    def test_list(self):
        clause = StringOrStringList.decode(["brand:Apple", "brand:Samsung"])
        assert clause.is_list
        assert clause.encode() == ["brand:Apple", "brand:Samsung"]

    def test_wrong_shape(self):
        with pytest.raises(DecodeError, match="expected a string or a list of strings"):
            StringOrStringList.decode({"brand": "Apple"})


class TestFieldCodecs:
    def test_integer_rejects_negative(self):
        with pytest.raises(DecodeError, match="invalid value: integer `-3`"):
            INTEGER.decode(-3)

    def test_integer_rejects_bool(self):
        with pytest.raises(DecodeError, match="boolean `false`"):
            INTEGER.decode(False)

    def test_number_accepts_float(self):
        assert NUMBER.decode(47.3) == 47.3

    @pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf")])
    def test_number_rejects_non_finite(self, raw):
        with pytest.raises(DecodeError, match="expected a finite number"):
            NUMBER.decode(raw)

    def test_string_list(self):
        assert STRING_LIST.decode(("a", "b")) == ("a", "b")
        assert STRING_LIST.decode(["a", "b"]) == ("a", "b")
        assert STRING_LIST.encode(("a", "b")) == ["a", "b"]
        with pytest.raises(DecodeError, match="expected a sequence"):
            STRING_LIST.decode("a")

    def test_map_of_lists(self):
        codec = MapOf(STRING_LIST)
        decoded = codec.decode({"de": ["name"]})
        assert decoded == {"de": ("name",)}
        assert codec.encode(decoded) == {"de": ["name"]}
        with pytest.raises(DecodeError, match="invalid type: sequence, expected a map"):
            codec.decode([])

    def test_map_is_read_only_and_hashable(self):
        decoded = MapOf(STRING_LIST).decode({"de": ["name"]})
        with pytest.raises(TypeError):
            decoded["fi"] = ("title",)
        assert hash(decoded) == hash(MapOf(STRING_LIST).decode({"de": ("name",)}))
        assert isinstance(decoded, FrozenMap)

    def test_codec_base_is_abstract(self):
        with pytest.raises(TypeError):
            Codec()


@pytest.mark.parametrize(
    "raw, described",
    [
        (None, "null"),
        (True, "boolean `true`"),
        (5, "integer `5`"),
        (1.5, "floating point `1.5`"),
        ("x", 'string "x"'),
        ([], "sequence"),
        ({}, "map"),
    ],
)
def test_describe_unexpected(raw, described):
    assert describe_unexpected(raw) == described
