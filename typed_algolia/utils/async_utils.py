# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Runs AsyncIndex coroutines from blocking code.
"""

import asyncio
import atexit
import threading
from typing import Coroutine, Optional, TypeVar

T = TypeVar("T")


class _BackgroundLoop:
    """A single event loop served by a daemon thread.

    Every blocking call is submitted to the same loop so that an
    httpx.AsyncClient created by one call can be reused by the next.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None

    def _running(self) -> bool:
        return self._loop is not None and not self._loop.is_closed()

    def get(self) -> asyncio.AbstractEventLoop:
        if self._running():
            return self._loop
        with self._lock:
            if not self._running():
                self._loop = asyncio.new_event_loop()
                self._thread = threading.Thread(
                    target=self._loop.run_forever, name="typed-algolia-loop", daemon=True
                )
                self._thread.start()
                atexit.register(self.stop)
        return self._loop

    def stop(self) -> None:
        if self._running() and self._thread is not None:
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join(timeout=5)
            self._loop.close()
        self._loop = None
        self._thread = None


_background = _BackgroundLoop()


def run_async(coro: Coroutine[None, None, T]) -> T:
    """Block until ``coro`` completes on the shared background loop and return its result."""
    future = asyncio.run_coroutine_threadsafe(coro, _background.get())
    return future.result()
