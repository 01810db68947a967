"""Factories for httpx clients with the detailed logger in their chain."""

from typing import Optional

import httpx

from detailed_logger.middleware.detailed_logger import (
    AsyncDetailedLoggerTransport,
    DetailedLoggerTransport,
)


def create_client(
    logger=None,
    *tags: str,
    transport: Optional[httpx.BaseTransport] = None,
    **client_kwargs,
) -> httpx.Client:
    """Create an ``httpx.Client`` that logs every request it sends.

    Args:
        logger: Logger to write to. Defaults to a stdout logger.
        *tags: Labels prefixed to every line as ``[tag]``.
        transport: Transport to wrap. Defaults to ``httpx.HTTPTransport()``.
        **client_kwargs: Passed through to ``httpx.Client``.
    """
    wrapped = DetailedLoggerTransport(
        transport or httpx.HTTPTransport(), logger, tags
    )
    return httpx.Client(transport=wrapped, **client_kwargs)


def create_async_client(
    logger=None,
    *tags: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **client_kwargs,
) -> httpx.AsyncClient:
    """Async counterpart of :func:`create_client`."""
    wrapped = AsyncDetailedLoggerTransport(
        transport or httpx.AsyncHTTPTransport(), logger, tags
    )
    return httpx.AsyncClient(transport=wrapped, **client_kwargs)
