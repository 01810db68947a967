"""Request/response logging transports for httpx.

Each transport wraps the next transport in the chain and logs, in order:

  1. ``INFO``  ``<METHOD> <URL>``
  2. ``DEBUG`` request headers and body
  3. then either ``HTTP <status>`` (INFO for 1XX-3XX, WARN for 4XX/5XX)
     followed by a ``DEBUG`` dump of the response headers and body,
     or a single ``ERROR`` line if the wrapped transport raised.

Errors are always re-raised unchanged. The transports keep no per-request
state, so one instance may be shared across threads as long as the
injected logger is thread safe (``logging.Logger`` is).
"""

import logging
from typing import Iterable

import httpx

from detailed_logger.utils.formatting import dump_message, error_location
from detailed_logger.utils.log_helpers import (
    Severity,
    TaggedLogger,
    default_logger,
    severity_for_status,
)


class _DetailedLogger:
    """Log emission shared by the sync and async transports."""

    def __init__(self, logger=None, tags: Iterable[str] = ()):
        if logger is None:
            logger = default_logger()
        self.logger = TaggedLogger(logger, tags)

    @property
    def tags(self) -> tuple:
        return self.logger.tags

    @property
    def debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def _log_detail(self, message) -> None:
        # Built only when DEBUG would actually be emitted
        if self.debug_enabled:
            self.logger.debug("%r", dump_message(message))

    def log_request(self, request: httpx.Request) -> None:
        self.logger.info("%s %s", request.method, request.url)
        self._log_detail(request)

    def log_response(self, response: httpx.Response) -> None:
        severity = severity_for_status(response.status_code)
        self.logger.log(severity.value, "HTTP %d", response.status_code)
        self._log_detail(response)

    def log_error(self, exc: Exception) -> None:
        self.logger.log(
            Severity.error.value,
            "%s - %s (%s)",
            type(exc).__name__,
            exc,
            error_location(exc),
        )


class DetailedLoggerTransport(_DetailedLogger, httpx.BaseTransport):
    """Synchronous transport that logs around ``transport``."""

    def __init__(
        self,
        transport: httpx.BaseTransport,
        logger=None,
        tags: Iterable[str] = (),
    ):
        super().__init__(logger, tags)
        self.transport = transport

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.log_request(request)
        try:
            response = self.transport.handle_request(request)
        except Exception as exc:
            self.log_error(exc)
            raise
        if self.debug_enabled:
            try:
                response.read()
            except Exception as exc:
                # The caller never sees this response, so it is closed here
                response.close()
                self.log_error(exc)
                raise
        self.log_response(response)
        return response

    def close(self) -> None:
        self.transport.close()


class AsyncDetailedLoggerTransport(_DetailedLogger, httpx.AsyncBaseTransport):
    """Async twin of :class:`DetailedLoggerTransport`."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport,
        logger=None,
        tags: Iterable[str] = (),
    ):
        super().__init__(logger, tags)
        self.transport = transport

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.log_request(request)
        try:
            response = await self.transport.handle_async_request(request)
        except Exception as exc:
            self.log_error(exc)
            raise
        if self.debug_enabled:
            try:
                await response.aread()
            except Exception as exc:
                await response.aclose()
                self.log_error(exc)
                raise
        self.log_response(response)
        return response

    async def aclose(self) -> None:
        await self.transport.aclose()
