# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

"""Global test fixtures"""

import json
from typing import Any, Dict, List, Tuple

import httpx
import pytest
import pytest_asyncio
from pydantic import BaseModel

from typed_algolia.client import AsyncIndex
from typed_algolia.utils.config import config_loader

BERNARDO_RESPONSE = {
    "hits": [{"name": "Bernardo", "age": 32}],
    "nbHits": 1,
    "page": 0,
    "nbPages": 1,
    "hitsPerPage": 20,
    "processingTimeMS": 1,
    "exhaustiveNbHits": True,
    "query": "Bernardo",
    "params": "query=Bernardo",
}


class Person(BaseModel):
    name: str
    age: int


class FakeAlgolia:
    """Serves canned JSON responses per (method, path) and records every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.error: Exception = None

    def reply(self, method: str, path: str, body: Any, status: int = 200) -> "FakeAlgolia":
        self.routes[(method, path)] = (status, body)
        return self

    def fail_with(self, exc_type=httpx.ConnectError) -> "FakeAlgolia":
        self.error = exc_type
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("connection refused", request=request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Index does not exist", "status": 404})
        status, body = route
        if isinstance(body, (str, bytes)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the real environment, home config and .env files out of every test"""
    for var in ("ALGOLIA_APPLICATION_ID", "ALGOLIA_API_KEY", "ALGOLIA_CONFIG_FILE"):
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(config_loader, "DEFAULT_CONFIG_DIR", home)
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def fake_algolia() -> FakeAlgolia:
    return FakeAlgolia()


@pytest_asyncio.fixture
async def movies(fake_algolia: FakeAlgolia):
    """AsyncIndex on "movies" backed by the fake service, decoding hits as dicts"""
    index = AsyncIndex("movies", "APP", "KEY", transport=fake_algolia.transport)
    await index.initialize()
    yield index
    await index.close()


@pytest_asyncio.fixture
async def people(fake_algolia: FakeAlgolia):
    """AsyncIndex on "people" decoding hits as Person"""
    index = AsyncIndex("people", "APP", "KEY", Person, transport=fake_algolia.transport)
    await index.initialize()
    yield index
    await index.close()


@pytest.fixture
def bernardo_response() -> Dict[str, Any]:
    return json.loads(json.dumps(BERNARDO_RESPONSE))


@pytest.fixture
def person_type():
    return Person
