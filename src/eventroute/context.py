"""
=============================================================================
REQUEST CONTEXT
=============================================================================

Per-request mutable state bridging the inbound request and the response
the host server eventually writes.

=============================================================================
CONTEXT STATE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     RequestContext                                  │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   status   int, 200 until someone sets it                           │
    │   body     value, lazily computed value, or a file stream           │
    │   headers  dict, merged (new keys overwrite existing ones)          │
    │   error    exception captured from the handler                      │
    │            (setting it forces status 500, it is never cleared)      │
    │   params   copy of request.params, taken once on first access       │
    │   views_dir  where named templates are read from                    │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

A context is created by Event.dispatch for exactly one request and is
only ever touched by that dispatch's call stack, so it needs no locking.

=============================================================================
HANDLER API
=============================================================================

Handlers receive the context as their only argument:

    @router.get("/hello/:name")
    def hello(context):
        context.header(**{"X-Greeting": "yes"})
        return f"Hello, {context.params['name']}"

    @router.post("/users")
    def create_user(context):
        context.status = HTTPStatus.CREATED
        context.body = "created"

=============================================================================
"""

import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from .config import RouterConfig
from .filters.logging import log_event as _log_event
from .http.request import Request
from .http.status_codes import HTTPStatus


@dataclass(frozen=True)
class View:
    """
    A named template reference.

    Passing View("index") where a body is expected makes the context read
    "{views_dir}/index.{ext}" instead of using the value literally.
    """
    name: str


def default_views_dir() -> str:
    """'views' next to the script the process was started with."""
    return os.path.join(os.path.dirname(sys.argv[0]) or ".", "views")


class RequestContext:
    """
    Mutable state of one request while it is being handled.

    Args:
        request: The inbound request.
        config: Router configuration (template root, ...).
    """

    def __init__(self, request: Request, config: Optional[RouterConfig] = None):
        self._request = request
        self._config = config or RouterConfig()
        self._status: Optional[int] = None
        self._body: Any = None
        self._body_factory: Optional[Callable[[], Any]] = None
        self._headers: Dict[str, str] = {}
        self._error: Optional[BaseException] = None
        self._params: Optional[Dict[str, str]] = None
        self._views_dir: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"<RequestContext {self._request.method} {self._request.path} "
            f"status={self.status}>"
        )

    # =========================================================================
    # REQUEST SIDE
    # =========================================================================

    @property
    def request(self) -> Request:
        return self._request

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def session(self) -> Optional[Any]:
        """Session handle the host stored in env under config.session_key."""
        return self._request.env.get(self._config.session_key)

    @property
    def params(self) -> Dict[str, str]:
        """
        Request parameters (path parameters included).

        Copied from the request on first access and memoized: later
        changes to request.params are not seen, and changes made here do
        not leak back into the request.
        """
        if self._params is None:
            self._params = {str(key): value for key, value in self._request.params.items()}
        return self._params

    # =========================================================================
    # RESPONSE SIDE
    # =========================================================================

    @property
    def status(self) -> int:
        """Response status, 200 unless set."""
        return self._status if self._status is not None else HTTPStatus.OK

    @status.setter
    def status(self, value: int) -> None:
        self._status = int(value)

    @property
    def body(self) -> Any:
        """
        Response body.

        A body installed with compute_body() is evaluated here, on first
        read, and the result replaces the factory. If the factory raises,
        it stays pending.
        """
        if self._body_factory is not None:
            self._body = self._body_factory()
            self._body_factory = None
        return self._body

    @body.setter
    def body(self, value: Any) -> None:
        self._body_factory = None
        self._body = value

    def compute_body(self, factory: Callable[[], Any]) -> None:
        """Set a body that is computed lazily on first read."""
        self._body = None
        self._body_factory = factory

    def evaluate_body(self) -> Any:
        """Run a pending compute_body() factory now and return the body."""
        return self.body

    @property
    def has_body(self) -> bool:
        """True once a body (value or factory) has been set explicitly."""
        return self._body is not None or self._body_factory is not None

    @property
    def headers(self) -> Dict[str, str]:
        """Response headers accumulated so far."""
        return self._headers

    def update_headers(
        self,
        headers: Optional[Mapping[str, str]] = None,
        **more: str
    ) -> Dict[str, str]:
        """
        Merge headers into the response (last write wins).

            context.update_headers({"Content-Type": "text/html"})
            context.header(Location="/login")
        """
        if headers:
            self._headers.update(headers)
        if more:
            self._headers.update(more)
        return self._headers

    header = update_headers

    @property
    def error(self) -> Optional[BaseException]:
        """The exception captured while handling the request, if any."""
        return self._error

    @error.setter
    def error(self, value: BaseException) -> None:
        if value is None:
            raise ValueError("A captured error cannot be cleared")
        self._error = value
        self.status = HTTPStatus.INTERNAL_SERVER_ERROR

    # =========================================================================
    # TEMPLATES
    # =========================================================================

    @property
    def views_dir(self) -> str:
        """Template root: per-context override, then config, then ./views."""
        return self._views_dir or self._config.views_dir or default_views_dir()

    @views_dir.setter
    def views_dir(self, value: str) -> None:
        self._views_dir = str(value)

    def determine_template(self, content: Any, ext: str) -> Any:
        """
        Resolve template content.

        A View is read from "{views_dir}/{name}.{ext}" as text; anything
        else is already the content and is returned unchanged.
        """
        if isinstance(content, View):
            path = "%s/%s.%s" % (self.views_dir, content.name, ext)
            with open(path, encoding="utf-8") as template:
                return template.read()
        return content

    def render(self, content: Any, ext: str = "html") -> Any:
        """Resolve content via determine_template() and use it as the body."""
        self.body = self.determine_template(content, ext)
        return self.body

    # =========================================================================
    # LOGGING
    # =========================================================================

    def log_event(self) -> None:
        """Log this request (the default after-filter)."""
        _log_event(self)
