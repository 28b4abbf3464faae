# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from typed_algolia.client.algolia import Client
from typed_algolia.client.base import BaseIndex
from typed_algolia.client.http import AsyncIndex
from typed_algolia.client.sync_http import SyncIndex

__all__ = ["AsyncIndex", "BaseIndex", "Client", "SyncIndex"]
