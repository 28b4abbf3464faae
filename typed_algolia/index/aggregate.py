# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Shared machinery for flat records of optional wire parameters.

A parameter set is a frozen dataclass whose fields all default to ``None``
(unset). Each field carries its wire name and codec in the dataclass field
metadata; serialization walks the fields in declaration order and omits the
unset ones.
"""

import dataclasses
from typing import Any, Dict, Iterator, Optional, Tuple, Type, TypeVar

from typed_algolia.exceptions import DecodeError
from typed_algolia.index.codec import Codec, invalid_type

P = TypeVar("P", bound="ParameterSet")


def param(wire: str, codec: Codec) -> Any:
    """Declare an optional parameter sent as ``wire`` and converted by ``codec``."""
    return dataclasses.field(default=None, metadata={"wire": wire, "codec": codec})


class ParameterSet:
    """Base class for frozen dataclasses built from ``param`` fields."""

    def __post_init__(self):
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            try:
                decoded = f.metadata["codec"].decode(value)
            except DecodeError as exc:
                raise exc.for_field(f.metadata["wire"]) from None
            object.__setattr__(self, f.name, decoded)

    # ============= Introspection =============

    @classmethod
    def wire_names(cls) -> Dict[str, str]:
        """Mapping of attribute name to wire name, in declaration order."""
        return {f.name: f.metadata["wire"] for f in dataclasses.fields(cls)}

    def iter_set(self) -> Iterator[Tuple[dataclasses.Field, Any]]:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is not None:
                yield f, value

    def is_empty(self) -> bool:
        return next(self.iter_set(), None) is None

    # ============= Serialization =============

    def to_dict(self) -> Dict[str, Any]:
        """Wire-keyed dict of the set fields only."""
        return {f.metadata["wire"]: f.metadata["codec"].encode(value) for f, value in self.iter_set()}

    @classmethod
    def from_dict(cls: Type[P], data: Dict[str, Any]) -> P:
        """Decode a wire-keyed dict. Keys that are not modelled are ignored."""
        if not isinstance(data, dict):
            raise invalid_type(data, f"a map for {cls.__name__}")
        by_wire = {f.metadata["wire"]: f.name for f in dataclasses.fields(cls)}
        values = {}
        for key, raw in data.items():
            name = by_wire.get(key)
            if name is None or raw is None:
                continue
            values[name] = raw
        return cls(**values)

    # ============= Incremental construction =============

    def replace(self: P, **changes: Any) -> P:
        return dataclasses.replace(self, **changes)

    @classmethod
    def builder(cls) -> "ParameterBuilder":
        return ParameterBuilder(cls)

    def to_builder(self) -> "ParameterBuilder":
        builder = self.builder()
        for f, value in self.iter_set():
            builder.set(**{f.name: value})
        return builder


class ParameterBuilder:
    """Chainable setters for a ``ParameterSet``.

    Every field of the target type is available as a method taking the new
    value and returning the builder::

        params = SearchParameters.builder().query("Bernardo").page(1).build()

    Values are validated when ``build()`` is called.
    """

    def __init__(self, target: Type[ParameterSet], values: Optional[Dict[str, Any]] = None):
        self._target = target
        self._names = {f.name for f in dataclasses.fields(target)}
        self._values: Dict[str, Any] = {}
        if values:
            self.set(**values)

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._names:
            raise AttributeError(
                f"{type(self).__name__} has no parameter {name!r} "
                f"for {self._target.__name__}"
            )

        def setter(value: Any) -> "ParameterBuilder":
            self._values[name] = value
            return self

        return setter

    def set(self, **values: Any) -> "ParameterBuilder":
        unknown = sorted(set(values) - self._names)
        if unknown:
            raise AttributeError(f"unknown parameters for {self._target.__name__}: {unknown}")
        self._values.update(values)
        return self

    def unset(self, name: str) -> "ParameterBuilder":
        self._values.pop(name, None)
        return self

    def build(self) -> ParameterSet:
        return self._target(**self._values)
