"""
=============================================================================
EVENT LOGGING
=============================================================================

The default after-filter: one access line per handled request, plus the
full traceback when the handler failed.

    GET /hello/Ada | Status: 200 | Params: {'name': 'Ada'}
    GET /boom | Status: 500 | Params: {}
    ERROR eventroute.access: Handler failed: GET /boom
    Traceback (most recent call last):
      ...
    RuntimeError: boom

=============================================================================
"""

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional

from ..config import RouterConfig

if TYPE_CHECKING:
    from ..context import RequestContext


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════
# Namespaced logger so access lines can be routed separately:
#   logging.getLogger("eventroute.access").addHandler(file_handler)
# ═══════════════════════════════════════════════════════════════════════════
logger = logging.getLogger("eventroute.access")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class EventLog:
    """
    Structured log entry for a handled request.

    method:  HTTP method
    path:    request path
    status:  response status
    params:  request parameters seen by the handler
    error:   "ExceptionType: message" when the handler failed
    """

    method: str
    path: str
    status: int
    params: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    @classmethod
    def from_context(cls, context: "RequestContext") -> "EventLog":
        error = context.error
        return cls(
            method=context.request.method,
            path=context.request.path,
            status=context.status,
            params=dict(context.params),
            error=f"{type(error).__name__}: {error}" if error is not None else None,
        )

    def to_dict(self) -> dict:
        """Dictionary form for JSON log aggregators."""
        entry = {
            "method": self.method,
            "path": self.path,
            "status": self.status,
            "params": self.params,
        }
        if self.error is not None:
            entry["error"] = self.error
        return entry

    def to_text(self) -> str:
        """Single human-readable line."""
        return f"{self.method} {self.path} | Status: {self.status} | Params: {self.params!r}"


def log_event(context: "RequestContext") -> None:
    """
    Log a completed request.

    Emits the access line at INFO, then, if the context captured an
    error, the error with its traceback at ERROR.
    """
    entry = EventLog.from_context(context)

    if context.config.log_format == "json":
        logger.info(json.dumps(entry.to_dict(), default=str))
    else:
        logger.info(entry.to_text())

    error = context.error
    if error is not None:
        logger.error(
            "Handler failed: %s %s",
            entry.method,
            entry.path,
            exc_info=(type(error), error, error.__traceback__),
        )


def configure_logging(config: Optional[RouterConfig] = None) -> None:
    """
    Configure logging from a RouterConfig.

    Sets up the root handler (if none exists yet) and the level of the
    "eventroute" logger tree.
    """
    config = config or RouterConfig()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("eventroute").setLevel(level)
