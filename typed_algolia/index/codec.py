# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Wire codecs for search and settings parameters.

The search service accepts several parameters in more than one JSON shape
(``typoTolerance`` may be a bool or a string, ``ignorePlurals`` a bool or a
list of ISO codes, ``aroundRadius`` the string ``"all"`` or an integer).
Each such parameter is modelled as its own type with a ``decode`` classmethod
that selects the variant from the shape of the wire value, and an ``encode``
method that produces the canonical wire shape back.

``decode`` accepts already-typed values unchanged, so aggregates can be built
from either the typed variants or their raw wire form.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from typed_algolia.exceptions import DecodeError


def describe_unexpected(raw: Any) -> str:
    """Describe a wire value by its JSON token category."""
    if raw is None:
        return "null"
    if isinstance(raw, bool):
        return f"boolean `{'true' if raw else 'false'}`"
    if isinstance(raw, int):
        return f"integer `{raw}`"
    if isinstance(raw, float):
        return f"floating point `{raw}`"
    if isinstance(raw, str):
        return f'string "{raw}"'
    if isinstance(raw, (list, tuple)):
        return "sequence"
    if isinstance(raw, dict):
        return "map"
    return f"value of type {type(raw).__name__}"


def invalid_type(raw: Any, expected: str) -> DecodeError:
    return DecodeError(f"invalid type: {describe_unexpected(raw)}, expected {expected}")


def _string_items(raw: Any) -> Tuple[str, ...]:
    for item in raw:
        if not isinstance(item, str):
            raise invalid_type(item, "a string")
    return tuple(raw)


# ============= Closed enumerations =============


class WireEnum(str, Enum):
    """Closed set of string literals, matched exactly on decode."""

    @classmethod
    def decode(cls, raw: Any) -> "WireEnum":
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise invalid_type(raw, f"a string for {cls.__name__}")
        try:
            return cls(raw)
        except ValueError:
            raise DecodeError(
                f"invalid value: unknown {cls.__name__} variant: {raw}, "
                f"expected a string for {cls.__name__}"
            ) from None

    def encode(self) -> str:
        return self.value


class RankedEnum(IntEnum):
    """Small closed integer range, sent on the wire as the raw integer."""

    @classmethod
    def decode(cls, raw: Any) -> "RankedEnum":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise invalid_type(raw, f"an integer for {cls.__name__}")
        try:
            return cls(raw)
        except ValueError:
            members = ", ".join(str(member.value) for member in cls)
            raise DecodeError(f"invalid value: {raw}, expected one of: {members}") from None

    def encode(self) -> int:
        return int(self.value)


class SortFacetValuesBy(WireEnum):
    COUNT = "count"
    ALPHA = "alpha"


class QueryType(WireEnum):
    PREFIX_LAST = "prefixLast"
    PREFIX_ALL = "prefixAll"
    PREFIX_NONE = "prefixNone"


class RemoveWordsIfNoResults(WireEnum):
    NONE = "none"
    LAST_WORDS = "lastWords"
    FIRST_WORDS = "firstWords"
    ALL_OPTIONS = "allOptions"


class ExactOnSingleWordQuery(WireEnum):
    ATTRIBUTE = "attribute"
    NONE = "none"
    WORD = "word"


class AlternativesAsExact(WireEnum):
    IGNORE_PLURALS = "ignorePlurals"
    SINGLE_WORD_SYNONYM = "singleWordSynonym"
    MULTI_WORDS_SYNONYM = "multiWordsSynonym"


class Distinct(RankedEnum):
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3


class MinProximity(RankedEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7


# ============= Polymorphic values =============


class TypoTolerance(Enum):
    """``true`` / ``false`` / ``"min"`` / ``"strict"``."""

    ENABLED = True
    DISABLED = False
    MIN = "min"
    STRICT = "strict"

    @classmethod
    def decode(cls, raw: Any) -> "TypoTolerance":
        if isinstance(raw, cls):
            return raw
        # bool is checked first: 1 == True would otherwise match ENABLED
        if isinstance(raw, bool):
            return cls.ENABLED if raw else cls.DISABLED
        if isinstance(raw, str):
            if raw == "min":
                return cls.MIN
            if raw == "strict":
                return cls.STRICT
            raise DecodeError(f'expected "min" or "strict", got "{raw}"')
        raise invalid_type(raw, "a bool or String")

    def encode(self) -> Union[bool, str]:
        return self.value


@dataclass(frozen=True)
class IgnorePlurals:
    """Enabled, disabled, or enabled for an explicit list of ISO language codes.

    Also used for ``removeStopWords``, which accepts the same shapes.
    """

    value: Union[bool, Tuple[str, ...]] = True

    ENABLED: ClassVar["IgnorePlurals"]
    DISABLED: ClassVar["IgnorePlurals"]

    def __post_init__(self):
        if isinstance(self.value, bool):
            return
        if not isinstance(self.value, (list, tuple)):
            raise invalid_type(self.value, "a bool or a list of ISO codes")
        object.__setattr__(self, "value", _string_items(self.value))

    @classmethod
    def for_languages(cls, *codes: Union[str, List[str]]) -> "IgnorePlurals":
        if len(codes) == 1 and isinstance(codes[0], (list, tuple)):
            codes = tuple(codes[0])
        return cls(tuple(codes))

    @property
    def languages(self) -> Optional[Tuple[str, ...]]:
        return None if isinstance(self.value, bool) else self.value

    @classmethod
    def decode(cls, raw: Any) -> "IgnorePlurals":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool):
            return cls.ENABLED if raw else cls.DISABLED
        if isinstance(raw, (list, tuple)):
            return cls(_string_items(raw))
        raise invalid_type(raw, "a bool or a list of ISO codes")

    def encode(self) -> Union[bool, List[str]]:
        if isinstance(self.value, bool):
            return self.value
        return list(self.value)

    def __repr__(self) -> str:
        if self.value is True:
            return f"{type(self).__name__}.ENABLED"
        if self.value is False:
            return f"{type(self).__name__}.DISABLED"
        return f"{type(self).__name__}.for_languages({list(self.value)!r})"


IgnorePlurals.ENABLED = IgnorePlurals(True)
IgnorePlurals.DISABLED = IgnorePlurals(False)

RemoveStopWords = IgnorePlurals


@dataclass(frozen=True)
class AroundRadius:
    """Either ``"all"`` or a radius in meters."""

    meters: Optional[int] = None

    ALL: ClassVar["AroundRadius"]

    def __post_init__(self):
        if self.meters is None:
            return
        if isinstance(self.meters, bool) or not isinstance(self.meters, int) or self.meters < 0:
            raise invalid_type(self.meters, "all or radius in meters")

    @classmethod
    def radius(cls, meters: int) -> "AroundRadius":
        return cls(meters)

    @property
    def is_all(self) -> bool:
        return self.meters is None

    @classmethod
    def decode(cls, raw: Any) -> "AroundRadius":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            if raw == "all":
                return cls.ALL
            raise DecodeError(f'expected "all", got "{raw}"')
        if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
            return cls(raw)
        raise invalid_type(raw, "all or radius in meters")

    def encode(self) -> Union[str, int]:
        return "all" if self.meters is None else self.meters

    def __repr__(self) -> str:
        if self.meters is None:
            return "AroundRadius.ALL"
        return f"AroundRadius.radius({self.meters})"


AroundRadius.ALL = AroundRadius()


@dataclass(frozen=True)
class StringOrStringList:
    """A filter clause: one string, or a list of strings OR-ed together."""

    value: Union[str, Tuple[str, ...]]

    def __post_init__(self):
        if isinstance(self.value, str):
            return
        if not isinstance(self.value, (list, tuple)):
            raise invalid_type(self.value, "a string or a list of strings")
        object.__setattr__(self, "value", _string_items(self.value))

    @property
    def is_list(self) -> bool:
        return not isinstance(self.value, str)

    @classmethod
    def decode(cls, raw: Any) -> "StringOrStringList":
        if isinstance(raw, cls):
            return raw
        return cls(raw)

    def encode(self) -> Union[str, List[str]]:
        if isinstance(self.value, str):
            return self.value
        return list(self.value)


# ============= Field codecs =============


class Codec(ABC):
    """Decode a raw wire value into its in-memory form and back."""

    @abstractmethod
    def decode(self, raw: Any) -> Any:
        """Return the in-memory form of ``raw`` or raise DecodeError."""

    def encode(self, value: Any) -> Any:
        return value


class Scalar(Codec):
    def __init__(self, types: tuple, expecting: str, non_negative: bool = False):
        self.types = types
        self.expecting = expecting
        self.non_negative = non_negative

    def decode(self, raw: Any) -> Any:
        if isinstance(raw, bool) and bool not in self.types:
            raise invalid_type(raw, self.expecting)
        if not isinstance(raw, self.types):
            raise invalid_type(raw, self.expecting)
        if self.non_negative and raw < 0:
            raise DecodeError(f"invalid value: integer `{raw}`, expected {self.expecting}")
        if isinstance(raw, float) and not math.isfinite(raw):
            raise DecodeError(f"invalid value: floating point `{raw}`, expected a finite number")
        return raw


STRING = Scalar((str,), "a string")
BOOLEAN = Scalar((bool,), "a boolean")
INTEGER = Scalar((int,), "an unsigned integer", non_negative=True)
NUMBER = Scalar((int, float), "a number")


class ListOf(Codec):
    def __init__(self, item: Codec):
        self.item = item

    def decode(self, raw: Any) -> Tuple[Any, ...]:
        if not isinstance(raw, (list, tuple)):
            raise invalid_type(raw, "a sequence")
        return tuple(self.item.decode(element) for element in raw)

    def encode(self, value: Sequence[Any]) -> List[Any]:
        return [self.item.encode(element) for element in value]


class FrozenMap(Mapping):
    """Read-only, hashable string-keyed map. Values must be hashable."""

    __slots__ = ("_data",)

    def __init__(self, data: Dict[str, Any]):
        self._data = dict(data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenMap({self._data!r})"


class MapOf(Codec):
    def __init__(self, item: Codec):
        self.item = item

    def decode(self, raw: Any) -> "FrozenMap":
        if not isinstance(raw, Mapping):
            raise invalid_type(raw, "a map")
        return FrozenMap({str(key): self.item.decode(value) for key, value in raw.items()})

    def encode(self, value: Mapping) -> Dict[str, Any]:
        return {key: self.item.encode(element) for key, element in value.items()}


class VariantCodec(Codec):
    """Codec for any type exposing ``decode`` (classmethod) and ``encode``."""

    def __init__(self, variant_type: type):
        self.variant_type = variant_type

    def decode(self, raw: Any) -> Any:
        return self.variant_type.decode(raw)

    def encode(self, value: Any) -> Any:
        return value.encode()


STRING_LIST = ListOf(STRING)
