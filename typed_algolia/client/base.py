# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Abstract index interface.

Defines the operations AsyncIndex implements against the REST API.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Sequence, TypeVar, Union

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

T = TypeVar("T")


class BaseIndex(ABC, Generic[T]):
    """Operations on a single named index whose records are of type ``T``."""

    # ============= Lifecycle =============

    @abstractmethod
    async def initialize(self) -> None:
        """Open the underlying connection pool."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection pool."""
        ...

    # ============= Search =============

    @abstractmethod
    async def search(self, query: Union[str, SearchParameters, None] = None) -> SearchResult[T]:
        """Run a search. A plain string is treated as the query text."""
        ...

    # ============= Objects =============

    @abstractmethod
    async def get_object(
        self, object_id: str, attributes_to_retrieve: Optional[Sequence[str]] = None
    ) -> T:
        """Fetch one record by objectID."""
        ...

    @abstractmethod
    async def add_object(self, obj: T) -> AddObjectResult:
        """Add a record; the service assigns the objectID."""
        ...

    @abstractmethod
    async def add_objects(self, objects: Sequence[T]) -> BatchOperationResult:
        ...

    @abstractmethod
    async def update_object(self, obj: T) -> UpdateOperationResult:
        """Replace the record whose objectID is carried by ``obj``."""
        ...

    @abstractmethod
    async def update_objects(self, objects: Sequence[T]) -> BatchOperationResult:
        ...

    @abstractmethod
    async def delete_object(self, object_id: str) -> DeleteObjectResult:
        ...

    # ============= Settings =============

    @abstractmethod
    async def get_settings(self) -> IndexSettings:
        ...

    @abstractmethod
    async def set_settings(
        self, settings: IndexSettings, forward_to_replicas: bool = False
    ) -> UpdateOperationResult:
        ...

    # ============= Index management =============

    @abstractmethod
    async def copy_to(
        self, destination: str, scope: Optional[List[str]] = None
    ) -> UpdateOperationResult:
        """Copy this index (or only the listed ``scope`` parts) to ``destination``."""
        ...

    @abstractmethod
    async def move_to(self, destination: str) -> UpdateOperationResult:
        """Rename this index to ``destination``, overwriting it."""
        ...

    @abstractmethod
    async def delete(self) -> DeleteIndexResult:
        ...

    # ============= Context manager =============

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
