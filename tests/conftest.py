"""Shared test fixtures.

HTTP is faked with ``httpx.MockTransport``; no test touches the network.
"""

from collections import defaultdict, deque
from collections.abc import Callable, Iterator
from typing import TypeAlias

import httpx
import pytest

from mastermind.lib.client import MastermindClient

BASE_URL = "https://mastermind.test"

Reply: TypeAlias = httpx.Response | Callable[[httpx.Request], httpx.Response]


class FakeServer:
    """Serves queued replies per path and records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: defaultdict[str, deque[Reply]] = defaultdict(deque)

    def reply(self, path: str, *replies: Reply) -> None:
        self._replies[path].extend(replies)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        pending = self._replies[request.url.path]
        if not pending:
            return httpx.Response(500, text=f"no reply queued for {request.url.path}")
        item = pending.popleft()
        if isinstance(item, httpx.Response):
            return item
        return item(request)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


def refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def lines(*values: str) -> Callable[[], str | None]:
    """Line reader yielding ``values`` then None (end of input)."""
    it: Iterator[str] = iter(values)
    return lambda: next(it, None)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def client(server: FakeServer) -> MastermindClient:
    """Unopened client wired to the fake server."""
    return MastermindClient(BASE_URL, transport=httpx.MockTransport(server.handler))


@pytest.fixture
def connection_refused() -> Callable[[httpx.Request], httpx.Response]:
    """Reply that fails at the transport layer."""
    return refuse_connection


@pytest.fixture
def player() -> Callable[..., Callable[[], str | None]]:
    """Factory for scripted player input."""
    return lines
