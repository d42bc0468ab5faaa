"""
=============================================================================
ERRORS
=============================================================================

Exception types raised by the routing engine.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      WHERE ERRORS GO                                │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Route not found       → not an exception at all. The router       │
    │                           falls back to a 404 event.                │
    │                                                                      │
    │   Handler raises        → caught by Event.dispatch, stored on the   │
    │                           context (status 500), never re-raised.    │
    │                                                                      │
    │   After-filter raises   → propagates. A broken filter is a          │
    │                           programming error, not a request error.   │
    │                                                                      │
    │   Bad route pattern     → PatternSyntaxError at registration time.  │
    │                                                                      │
    │   File vanishes while   → StaticFileError raised by the stream      │
    │   streaming               to the response writer.                   │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""


class EventRouteError(Exception):
    """
    Base class for all eventroute errors.

    Carries the HTTP status a response writer should use if the error
    escapes to the wire.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class PatternSyntaxError(EventRouteError, ValueError):
    """
    Raised when a route pattern cannot be compiled.

    Examples of malformed patterns:
        /users/:          (parameter sigil without a name)
        /files/*rest/raw  (wildcard not in last position)
        /a/:id/b/:id      (duplicate parameter name)
    """

    def __init__(self, message: str, pattern: str):
        super().__init__(f"{message} in pattern {pattern!r}", status_code=500)
        self.pattern = pattern


class StaticFileError(EventRouteError, OSError):
    """Raised when a static file cannot be read while it is being streamed."""

    def __init__(self, message: str, path: str):
        super().__init__(message, status_code=500)
        self.path = path
