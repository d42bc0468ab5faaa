"""
=============================================================================
EVENTROUTE - HTTP Route Registry and Request Dispatch
=============================================================================

Matches parsed HTTP requests to registered routes ("events"), runs their
handlers inside a per-request context, runs after-filters and turns
handler exceptions into 500 responses. A static event serves files from
a directory.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        REQUEST FLOW                                 │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Host server parses bytes → Request(method, path, params, env)     │
    │        │                                                             │
    │        ▼                                                             │
    │   Router.lookup(verb, path)                                         │
    │        │   first registered event that matches,                     │
    │        │   else the "404" event, else the built-in not-found        │
    │        ▼                                                             │
    │   Event.dispatch(request)                                           │
    │        │   path params merged into request.params                   │
    │        │   RequestContext built                                     │
    │        │   handler(context), exceptions → context.error (500)       │
    │        │   after-filters run (log_event by default)                 │
    │        ▼                                                             │
    │   DispatchResult(context, error)                                    │
    │        │                                                             │
    │        ▼                                                             │
    │   Host writes context.status / headers / body to the wire           │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    eventroute/
    ├── __init__.py          # This file - package exports
    ├── app.py               # Process-wide default router + DSL functions
    ├── config.py            # RouterConfig dataclass
    ├── context.py           # RequestContext, View
    ├── errors.py            # Exception types
    ├── files/               # Built-in not-found / index pages
    ├── filters/
    │   ├── base.py          # AfterFilterChain
    │   └── logging.py       # log_event, EventLog, configure_logging
    ├── http/
    │   ├── request.py       # Request
    │   ├── status_codes.py  # HTTPStatus
    │   └── mime_types.py    # Extension → MIME type table
    └── routing/
        ├── pattern.py       # PathPattern
        ├── event.py         # Event, DispatchResult
        ├── static.py        # StaticEvent, FileStream
        └── registry.py      # Router

=============================================================================
QUICK START
=============================================================================

    from eventroute import Router, Request

    router = Router()

    @router.get("/hello/:name")
    def hello(context):
        return f"Hello, {context.params['name']}"

    context, error = router.dispatch(Request("GET", "/hello/Ada"))
    context.status   # 200
    context.body     # "Hello, Ada"

=============================================================================
"""

__version__ = "1.0.0"

from .config import RouterConfig
from .context import RequestContext, View
from .errors import EventRouteError, PatternSyntaxError, StaticFileError
from .filters import AfterFilterChain, configure_logging, log_event
from .http import HTTPStatus, Request
from .routing import (
    DispatchResult,
    Event,
    FileStream,
    PathPattern,
    Router,
    StaticEvent,
)

__all__ = [
    "__version__",
    "RouterConfig",
    "RequestContext",
    "View",
    "EventRouteError",
    "PatternSyntaxError",
    "StaticFileError",
    "AfterFilterChain",
    "configure_logging",
    "log_event",
    "HTTPStatus",
    "Request",
    "DispatchResult",
    "Event",
    "FileStream",
    "PathPattern",
    "Router",
    "StaticEvent",
]
