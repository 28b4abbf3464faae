# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Blocking index handle.

Wraps AsyncIndex; every call runs on the shared background event loop.
"""

from typing import Generic, List, Optional, Sequence, Type, Union

import httpx

from typed_algolia.client.base import T
from typed_algolia.client.http import DEFAULT_TIMEOUT, AsyncIndex
from typed_algolia.index import (
    AddObjectResult,
    BatchOperationResult,
    DeleteIndexResult,
    DeleteObjectResult,
    IndexSettings,
    SearchParameters,
    SearchResult,
    UpdateOperationResult,
)
from typed_algolia.utils import run_async


class SyncIndex(Generic[T]):
    """Blocking counterpart of AsyncIndex with the same operations.

    Examples:
        index = Client().init_index("movies", hit_type=Movie)
        result = index.search("Bernardo")
        index.close()
    """

    def __init__(
        self,
        name: str,
        application_id: str,
        api_key: str,
        hit_type: Type[T] = dict,
        *,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._async_index: AsyncIndex[T] = AsyncIndex(
            name,
            application_id,
            api_key,
            hit_type,
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def wrap(cls, async_index: AsyncIndex[T]) -> "SyncIndex[T]":
        index = cls.__new__(cls)
        index._async_index = async_index
        return index

    @property
    def name(self) -> str:
        return self._async_index.name

    @property
    def hit_type(self) -> Type[T]:
        return self._async_index.hit_type

    # ============= Lifecycle =============

    def initialize(self) -> None:
        run_async(self._async_index.initialize())

    def close(self) -> None:
        run_async(self._async_index.close())

    def __enter__(self) -> "SyncIndex[T]":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ============= Search =============

    def search(self, query: Union[str, SearchParameters, None] = None) -> SearchResult[T]:
        return run_async(self._async_index.search(query))

    # ============= Objects =============

    def get_object(
        self, object_id: str, attributes_to_retrieve: Optional[Sequence[str]] = None
    ) -> T:
        return run_async(self._async_index.get_object(object_id, attributes_to_retrieve))

    def add_object(self, obj: T) -> AddObjectResult:
        return run_async(self._async_index.add_object(obj))

    def add_objects(self, objects: Sequence[T]) -> BatchOperationResult:
        return run_async(self._async_index.add_objects(objects))

    def update_object(self, obj: T) -> UpdateOperationResult:
        return run_async(self._async_index.update_object(obj))

    def update_objects(self, objects: Sequence[T]) -> BatchOperationResult:
        return run_async(self._async_index.update_objects(objects))

    def delete_object(self, object_id: str) -> DeleteObjectResult:
        return run_async(self._async_index.delete_object(object_id))

    # ============= Settings =============

    def get_settings(self) -> IndexSettings:
        return run_async(self._async_index.get_settings())

    def set_settings(
        self, settings: IndexSettings, forward_to_replicas: bool = False
    ) -> UpdateOperationResult:
        return run_async(self._async_index.set_settings(settings, forward_to_replicas))

    # ============= Index management =============

    def copy_to(self, destination: str, scope: Optional[List[str]] = None) -> UpdateOperationResult:
        return run_async(self._async_index.copy_to(destination, scope))

    def move_to(self, destination: str) -> UpdateOperationResult:
        return run_async(self._async_index.move_to(destination))

    def delete(self) -> DeleteIndexResult:
        return run_async(self._async_index.delete())

    def __repr__(self) -> str:
        return f"SyncIndex(name={self.name!r})"
