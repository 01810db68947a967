"""Logger plumbing for the detailed logger transports.

Severity levels, status classification, tag prefixes, and the fallback
stdout logger used when the caller does not inject one.
"""

import logging
import sys
from enum import Enum
from typing import Iterable, Optional

from detailed_logger.config import Settings, get_settings


# ---- Severity ----

class Severity(int, Enum):
    debug = logging.DEBUG
    info = logging.INFO
    warn = logging.WARNING
    error = logging.ERROR


def severity_for_status(status_code: int) -> Severity:
    """Map an HTTP status code to the severity of its summary line.

    1XX-3XX are informational, 4XX and 5XX are warnings. Anything outside
    100-599 is also a warning so an odd upstream never breaks logging.
    """
    if 100 <= status_code < 400:
        return Severity.info
    return Severity.warn


# ---- Tags ----

class TaggedLogger(logging.LoggerAdapter):
    """Prefix every message with ``[tag1][tag2] ``.

    The tag list is frozen at construction. With no tags the message is
    passed through untouched.
    """

    def __init__(self, logger, tags: Iterable[str] = ()):
        super().__init__(logger, {})
        self.tags = tuple(str(tag) for tag in tags)
        self.prefix = "".join(f"[{tag}]" for tag in self.tags)

    def log(self, level, msg, *args, **kwargs):
        if self.prefix:
            # logging only %-merges when args are given
            prefix = self.prefix.replace("%", "%%") if args else self.prefix
            msg = f"{prefix} {msg}"
        super().log(level, msg, *args, **kwargs)


# ---- Default logger ----

def default_logger(settings: Optional[Settings] = None) -> logging.Logger:
    """Build a private logger writing to stdout.

    The logger is not registered with ``logging.getLogger`` and has no
    parent, so nothing leaks into (or out of) the root logger's config.
    """
    settings = settings or get_settings()
    logger = logging.Logger(settings.logger_name)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    return logger
