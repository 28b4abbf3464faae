# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Result records returned by the search service.

Decoding is strict: timestamps, task ids and object ids must be present and
correctly typed. Timestamps are normalized to UTC.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Generic, List, Type, TypeVar, Union

from pydantic import (
    AfterValidator,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from typed_algolia.exceptions import DecodeError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def _to_utc(value: datetime) -> datetime:
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[AwareDatetime, AfterValidator(_to_utc)]


class WireModel(BaseModel):
    """Immutable record populated from camelCase wire keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class AddObjectResult(WireModel):
    created_at: UtcDatetime = Field(alias="createdAt")
    task_id: StrictInt = Field(alias="taskID")
    object_id: StrictStr = Field(alias="objectID")


class UpdateOperationResult(WireModel):
    updated_at: UtcDatetime = Field(alias="updatedAt")
    task_id: StrictInt = Field(alias="taskID")


class DeleteObjectResult(WireModel):
    deleted_at: UtcDatetime = Field(alias="deletedAt")
    task_id: StrictInt = Field(alias="taskID")


class DeleteIndexResult(WireModel):
    deleted_at: UtcDatetime = Field(alias="deletedAt")
    task_id: StrictInt = Field(alias="taskID")


class BatchOperationResult(WireModel):
    task_id: StrictInt = Field(alias="taskID")
    object_ids: List[StrictStr] = Field(alias="objectIDs")


class SearchResult(WireModel, Generic[T]):
    """One page of search results. ``hits`` are decoded as the caller's type."""

    hits: List[T]
    nb_hits: StrictInt = Field(alias="nbHits")
    page: StrictInt
    nb_pages: StrictInt = Field(alias="nbPages")
    hits_per_page: StrictInt = Field(alias="hitsPerPage")
    processing_time_ms: StrictInt = Field(alias="processingTimeMS")
    exhaustive_nb_hits: StrictBool = Field(alias="exhaustiveNbHits")
    query: StrictStr
    params: StrictStr


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def decode_result(model: Type[M], body: Union[str, bytes]) -> M:
    """Decode a JSON response body into ``model``, raising DecodeError on mismatch."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            f"invalid {model.__name__} response: {_describe_validation_error(exc)}"
        ) from exc


class HitCodec(Generic[T]):
    """Converts between the caller's record type and its JSON representation.

    ``hit_type`` may be anything pydantic can validate: a BaseModel subclass,
    a dataclass, a TypedDict, or plain ``dict``.
    """

    def __init__(self, hit_type: Type[T] = dict):
        self.hit_type = hit_type
        self._adapter = TypeAdapter(hit_type)
        self._result_model = SearchResult[hit_type]

    def decode(self, body: Union[str, bytes]) -> T:
        try:
            return self._adapter.validate_json(body)
        except ValidationError as exc:
            raise DecodeError(
                f"invalid {getattr(self.hit_type, '__name__', 'object')} response: "
                f"{_describe_validation_error(exc)}"
            ) from exc

    def decode_search_result(self, body: Union[str, bytes]) -> SearchResult[T]:
        return decode_result(self._result_model, body)

    def encode(self, obj: T) -> Any:
        return self._adapter.dump_python(obj, mode="json", by_alias=True)
