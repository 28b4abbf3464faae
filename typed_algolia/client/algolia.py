# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Entry point: credentials and index handles."""

from typing import Optional, Type

import httpx

from typed_algolia.client.base import T
from typed_algolia.client.http import AsyncIndex
from typed_algolia.client.sync_http import SyncIndex
from typed_algolia.exceptions import ConfigurationError
from typed_algolia.utils.config import (
    API_KEY_ENV,
    APPLICATION_ID_ENV,
    AlgoliaConfig,
    load_algolia_config,
)
from typed_algolia.utils.logger import get_logger, redact

logger = get_logger(__name__)


class Client:
    """Holds the application id / API key pair and opens index handles.

    Credentials are taken from the constructor arguments first, then from the
    ``ALGOLIA_APPLICATION_ID`` / ``ALGOLIA_API_KEY`` environment variables,
    then from the JSON config file (``~/.algolia/algolia.conf``).

    Examples:
        client = Client()
        index = client.init_index("movies", hit_type=Movie)

        client = Client().with_application_id("APP").with_api_key("KEY")
    """

    def __init__(
        self,
        application_id: Optional[str] = None,
        api_key: Optional[str] = None,
        config: Optional[AlgoliaConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if config is None:
            config = load_algolia_config()
        self.config = config
        self.application_id = application_id or config.application_id
        self.api_key = api_key or config.api_key
        self._transport = transport

    def with_application_id(self, application_id: str) -> "Client":
        return Client(application_id, self.api_key, self.config, self._transport)

    def with_api_key(self, api_key: str) -> "Client":
        return Client(self.application_id, api_key, self.config, self._transport)

    def _credentials(self):
        missing = []
        if not self.application_id:
            missing.append(APPLICATION_ID_ENV)
        if not self.api_key:
            missing.append(API_KEY_ENV)
        if missing:
            raise ConfigurationError(
                f"Missing Algolia credentials: set {' and '.join(missing)} "
                "or pass them to Client()",
                missing=missing,
            )
        return self.application_id, self.api_key

    def init_async_index(self, name: str, hit_type: Type[T] = dict) -> AsyncIndex[T]:
        """Open an async handle on index ``name``.

        Raises:
            ConfigurationError: If the application id or API key is missing.
        """
        application_id, api_key = self._credentials()
        logger.debug(
            "opening index %r for application %s (key %s)",
            name,
            application_id,
            redact(api_key),
        )
        return AsyncIndex(
            name,
            application_id,
            api_key,
            hit_type,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=self._transport,
        )

    def init_index(self, name: str, hit_type: Type[T] = dict) -> SyncIndex[T]:
        """Open a blocking handle on index ``name``.

        Raises:
            ConfigurationError: If the application id or API key is missing.
        """
        return SyncIndex.wrap(self.init_async_index(name, hit_type))

    def __repr__(self) -> str:
        return f"Client(application_id={self.application_id!r}, api_key={redact(self.api_key)!r})"
