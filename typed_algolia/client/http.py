# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Async index handle talking to the Algolia REST API over httpx."""

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, Union
from urllib.parse import quote

import httpx

from typed_algolia.client.base import BaseIndex, T
from typed_algolia.exceptions import (
    DecodeError,
    InvalidArgumentError,
    InvalidObjectError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitedError,
    TransportError,
    UnauthenticatedError,
    UnavailableError,
)
from typed_algolia.index import (
    AddObjectResult,
    BatchOperationResult,
    DeleteIndexResult,
    DeleteObjectResult,
    HitCodec,
    IndexSettings,
    SearchParameters,
    SearchResult,
    UpdateOperationResult,
    decode_result,
    search_body,
)
from typed_algolia.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

# HTTP status to exception class mapping
STATUS_TO_EXCEPTION = {
    400: InvalidArgumentError,
    401: UnauthenticatedError,
    403: PermissionDeniedError,
    404: NotFoundError,
    429: RateLimitedError,
}


def default_base_url(application_id: str) -> str:
    return f"https://{application_id}-dsn.algolia.net/1"


def _segment(value: str) -> str:
    return quote(value, safe="")


class AsyncIndex(BaseIndex[T]):
    """Async handle on one index.

    Hits and objects are converted to and from ``hit_type`` (any type pydantic
    can validate; ``dict`` by default).

    Examples:
        async with AsyncIndex("movies", app_id, api_key, hit_type=Movie) as index:
            result = await index.search("Bernardo")
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
        self.name = name
        self._application_id = application_id
        self._api_key = api_key
        self._base_url = (base_url or default_base_url(application_id)).rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._codec: HitCodec[T] = HitCodec(hit_type)
        self._http: Optional[httpx.AsyncClient] = None

    @property
    def hit_type(self) -> Type[T]:
        return self._codec.hit_type

    # ============= Lifecycle =============

    async def initialize(self) -> None:
        """Create the HTTP client. Called implicitly by the first request."""
        if self._http is not None:
            return
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "x-algolia-application-id": self._application_id,
                "x-algolia-api-key": self._api_key,
            },
            timeout=self._timeout,
            transport=self._transport,
        )

    async def close(self) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None

    # ============= Internal Helpers =============

    @property
    def _index_path(self) -> str:
        return f"/indexes/{_segment(self.name)}"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        params: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        if self._http is None:
            await self.initialize()
        logger.debug("%s %s%s", method, self._base_url, path)
        try:
            response = await self._http.request(method, path, json=json_body, params=params)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(f"{method} {path} failed: {e}") from e
        self._handle_response(response)
        return response

    def _handle_response(self, response: httpx.Response) -> None:
        """Raise the TransportError subclass matching a non-2xx response."""
        if response.is_success:
            return
        status = response.status_code
        message = f"HTTP {status}"
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            message = str(data["message"])
        elif response.text:
            message = f"HTTP {status}: {response.text}"
        logger.warning(
            "%s %s -> %s: %s", response.request.method, response.request.url.path, status, message
        )

        exc_class = STATUS_TO_EXCEPTION.get(status)
        if exc_class is None:
            if status >= 500:
                raise UnavailableError(message, status_code=status)
            raise TransportError(message, status_code=status)
        raise exc_class(message, status_code=status)

    @staticmethod
    def _json_object(response: httpx.Response) -> Dict[str, Any]:
        try:
            data = json.loads(response.content)
        except ValueError as e:
            raise DecodeError(f"invalid JSON response: {e}") from e
        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object response, got {type(data).__name__}")
        return data

    def _object_id_of(self, obj: T) -> Tuple[str, Dict[str, Any]]:
        body = self._codec.encode(obj)
        object_id = body.get("objectID") if isinstance(body, dict) else None
        if not isinstance(object_id, str) or not object_id:
            raise InvalidObjectError("objects sent for update must carry a string objectID")
        return object_id, body

    # ============= Search =============

    async def search(self, query: Union[str, SearchParameters, None] = None) -> SearchResult[T]:
        response = await self._request(
            "POST", f"{self._index_path}/query", json_body=search_body(query)
        )
        return self._codec.decode_search_result(response.content)

    # ============= Objects =============

    async def get_object(
        self, object_id: str, attributes_to_retrieve: Optional[Sequence[str]] = None
    ) -> T:
        params = None
        if attributes_to_retrieve is not None:
            params = {"attributesToRetrieve": ",".join(attributes_to_retrieve)}
        response = await self._request(
            "GET", f"{self._index_path}/{_segment(object_id)}", params=params
        )
        return self._codec.decode(response.content)

    async def add_object(self, obj: T) -> AddObjectResult:
        response = await self._request("POST", self._index_path, json_body=self._codec.encode(obj))
        return decode_result(AddObjectResult, response.content)

    async def add_objects(self, objects: Sequence[T]) -> BatchOperationResult:
        requests = [{"action": "addObject", "body": self._codec.encode(obj)} for obj in objects]
        return await self._batch(requests)

    async def update_object(self, obj: T) -> UpdateOperationResult:
        object_id, body = self._object_id_of(obj)
        response = await self._request(
            "PUT", f"{self._index_path}/{_segment(object_id)}", json_body=body
        )
        return decode_result(UpdateOperationResult, response.content)

    async def update_objects(self, objects: Sequence[T]) -> BatchOperationResult:
        requests = []
        for obj in objects:
            _, body = self._object_id_of(obj)
            requests.append({"action": "updateObject", "body": body})
        return await self._batch(requests)

    async def _batch(self, requests: List[Dict[str, Any]]) -> BatchOperationResult:
        response = await self._request(
            "POST", f"{self._index_path}/batch", json_body={"requests": requests}
        )
        return decode_result(BatchOperationResult, response.content)

    async def delete_object(self, object_id: str) -> DeleteObjectResult:
        response = await self._request("DELETE", f"{self._index_path}/{_segment(object_id)}")
        return decode_result(DeleteObjectResult, response.content)

    # ============= Settings =============

    async def get_settings(self) -> IndexSettings:
        response = await self._request("GET", f"{self._index_path}/settings")
        return IndexSettings.from_dict(self._json_object(response))

    async def set_settings(
        self, settings: IndexSettings, forward_to_replicas: bool = False
    ) -> UpdateOperationResult:
        if not isinstance(settings, IndexSettings):
            raise TypeError(f"expected IndexSettings, got {type(settings).__name__}")
        response = await self._request(
            "PUT",
            f"{self._index_path}/settings",
            json_body=settings.to_dict(),
            params={"forwardToReplicas": "true" if forward_to_replicas else "false"},
        )
        return decode_result(UpdateOperationResult, response.content)

    # ============= Index management =============

    async def _operation(
        self, operation: str, destination: str, scope: Optional[List[str]] = None
    ) -> UpdateOperationResult:
        body: Dict[str, Any] = {"operation": operation, "destination": destination}
        if scope is not None:
            body["scope"] = list(scope)
        response = await self._request("POST", f"{self._index_path}/operation", json_body=body)
        return decode_result(UpdateOperationResult, response.content)

    async def copy_to(
        self, destination: str, scope: Optional[List[str]] = None
    ) -> UpdateOperationResult:
        return await self._operation("copy", destination, scope)

    async def move_to(self, destination: str) -> UpdateOperationResult:
        return await self._operation("move", destination)

    async def delete(self) -> DeleteIndexResult:
        response = await self._request("DELETE", self._index_path)
        return decode_result(DeleteIndexResult, response.content)

    def __repr__(self) -> str:
        return f"AsyncIndex(name={self.name!r}, application_id={self._application_id!r})"
