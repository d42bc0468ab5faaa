"""
=============================================================================
INBOUND REQUEST
=============================================================================

The routing engine never parses raw HTTP. The host server (or a test)
hands it an already-parsed request exposing:

    method:   HTTP verb ("GET", "POST", ...)
    path:     request path without query string ("/users/42")
    params:   raw key/value parameters (query string + form body)
    env:      host environment mapping (session handle lives here)
    headers:  request headers (lowercase keys)

=============================================================================
REQUEST LIFECYCLE
=============================================================================

        Host server                Request                    Router
        (excluded)     ──build──►  dataclass    ──lookup──►   Event
           │                          │                          │
        parses the                 Request(                  merges path
        socket bytes                 method="GET",           params into
                                     path="/hello/Ada",      request.params
                                     params={"x": "1"},
                                     env={...})

The params dict is deliberately mutable: dispatch merges the route's
path parameters into it, path parameters winning on conflict.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any


DEFAULT_SESSION_KEY = "session"


@dataclass
class Request:
    """
    A pre-parsed HTTP request.

    Example:
        request = Request("GET", "/hello/Ada", params={"greeting": "hi"})
        request.method            # "GET"
        request.params["greeting"]  # "hi"
    """

    method: str                                               # GET, POST, ...
    path: str                                                 # /users/42
    params: Dict[str, str] = field(default_factory=dict)      # query + body params
    env: Dict[str, Any] = field(default_factory=dict)         # host environment
    headers: Dict[str, str] = field(default_factory=dict)     # lowercase names
    session_key: str = field(default=DEFAULT_SESSION_KEY, repr=False)

    def __post_init__(self) -> None:
        self.method = self.method.upper()
        # Header names are case-insensitive; normalize once here
        self.headers = {name.lower(): value for name, value in self.headers.items()}

    @property
    def session(self) -> Optional[Any]:
        """
        The session handle provided by the host, or None.

        The engine treats it as opaque: whatever object the host stored
        under ``env[session_key]`` is returned as-is.
        """
        return self.env.get(self.session_key)

    def get_param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a request parameter (path parameters included after dispatch)."""
        return self.params.get(name, default)

    def get_header(self, name: str, default: str = "") -> str:
        """Get a header value (case-insensitive lookup)."""
        return self.headers.get(name.lower(), default)
