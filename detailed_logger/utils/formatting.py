"""Text dumps of httpx messages and errors for the DEBUG/ERROR lines."""

import logging
import traceback
from typing import Union

import httpx

logger = logging.getLogger(__name__)

STREAMING_PLACEHOLDER = "<streaming content>"


def format_headers(headers: httpx.Headers) -> str:
    """Render headers as ``Name: value`` lines in the order they were set.

    Uses the raw header list so the original name casing is kept.
    """
    encoding = headers.encoding
    return "\n".join(
        f"{name.decode(encoding)}: {value.decode(encoding)}"
        for name, value in headers.raw
    )


def _body_text(message: Union[httpx.Request, httpx.Response]) -> str:
    try:
        content = message.content
    except (httpx.RequestNotRead, httpx.ResponseNotRead):
        return STREAMING_PLACEHOLDER
    return content.decode("utf-8", errors="replace")


def dump_message(message: Union[httpx.Request, httpx.Response]) -> str:
    """Headers, a blank line, then the body.

    The blank line and body are left out when there is no body. Never
    raises: a message that cannot be rendered yields a placeholder.

    The failure itself is reported on this module's logger, not the
    injected one, so that diagnostic carries no tag prefix. The tagged
    DEBUG line still shows the placeholder.
    """
    try:
        text = format_headers(message.headers)
        body = _body_text(message)
        if body:
            text += f"\n\n{body}"
        return text
    except Exception as e:
        logger.debug("Could not format %s: %s", type(message).__name__, e)
        return f"<unable to format: {type(e).__name__}: {e}>"


def error_location(exc: BaseException) -> str:
    """Innermost traceback frame of ``exc`` as ``file:line:in `func```."""
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "unknown location"
    frame = frames[-1]
    return f"{frame.filename}:{frame.lineno}:in `{frame.name}`"
