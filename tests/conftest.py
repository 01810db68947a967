"""Shared pytest fixtures for the detailed logger tests.

Requests are answered by ``httpx.MockTransport`` stubs so no network is
touched. The injected logger writes to an in-memory stream using a
``LEVEL: message`` layout that the assertions match against.
"""

import io
import logging

import httpx
import pytest

from detailed_logger.middleware.detailed_logger import (
    AsyncDetailedLoggerTransport,
    DetailedLoggerTransport,
)


class TestError(Exception):
    __test__ = False  # Not a test class


def _stub(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if request.method == "GET" and path == "/temaki":
        return httpx.Response(200, headers={"Content-Type": "text/plain"}, text="temaki")
    if request.method == "POST" and path == "/nigirizushi":
        return httpx.Response(
            200, headers={"Content-Type": "application/json"}, content=b'{"id":"1"}'
        )
    if request.method == "GET" and path == "/oaiso":
        code = request.url.params["c"]
        return httpx.Response(
            int(code), headers={"Content-Type": "application/json"}, text=code
        )
    if request.method == "GET" and path == "/error":
        raise TestError("An error occurred during the request")
    return httpx.Response(404)


async def _async_stub(request: httpx.Request) -> httpx.Response:
    return _stub(request)


@pytest.fixture
def log():
    """In-memory stream the test logger writes to."""
    return io.StringIO()


@pytest.fixture
def logger(log, request):
    """DEBUG-level logger writing ``LEVEL: message`` lines to ``log``."""
    test_logger = logging.Logger(f"test.{request.node.name}", level=logging.DEBUG)
    handler = logging.StreamHandler(log)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    test_logger.addHandler(handler)
    return test_logger


@pytest.fixture
def connection():
    """Factory for a client whose chain is detailed logger -> stub."""
    clients = []

    def _make(logger=None, *tags, handler=_stub):
        transport = DetailedLoggerTransport(httpx.MockTransport(handler), logger, tags)
        c = httpx.Client(base_url="http://sushi.com", transport=transport)
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def async_connection():
    """Async counterpart of ``connection``; callers close the client."""
    def _make(logger=None, *tags, handler=_async_stub):
        transport = AsyncDetailedLoggerTransport(
            httpx.MockTransport(handler), logger, tags
        )
        return httpx.AsyncClient(base_url="http://sushi.com", transport=transport)
    return _make
