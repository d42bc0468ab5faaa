"""
=============================================================================
EVENTS
=============================================================================

An event is a registered route: an HTTP verb, a path pattern and the
handler that answers it.

    Event("GET", "/hello/:name", hello)
            │          │           │
            │          │           └── action(context) -> optional body
            │          └── compiled once into a PathPattern
            └── upper-cased, must be a known HTTP method

=============================================================================
DISPATCH
=============================================================================

    dispatch(request)
        │
        ├── 1. recognize request.path, merge the path parameters into
        │      request.params (path parameters win on conflict)
        │
        ├── 2. build a fresh RequestContext
        │
        ├── 3. run action(context)
        │        ├── body not set by the handler → use its return value
        │        │                                 ("" if it returned None)
        │        └── handler raised → context.error = exc (status 500)
        │
        ├── 4. run every after-filter, in order, success or failure
        │
        └── 5. return DispatchResult(context, error)

Handler failures never escape dispatch. Filter failures always do.

Events hold no per-request state: path parameters are recognized again
on every dispatch, so one event can serve concurrent requests.

=============================================================================
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, NamedTuple, Optional

from ..config import RouterConfig
from ..context import RequestContext
from ..http.request import Request
from .pattern import PathPattern

if TYPE_CHECKING:
    from .registry import Router


logger = logging.getLogger(__name__)


METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")

# Handler: receives the context, may return the body
Action = Callable[[RequestContext], Any]


def normalize_verb(verb: str) -> str:
    """Upper-case a verb and check it is a known HTTP method."""
    normalized = verb.upper()
    if normalized not in METHODS:
        raise ValueError(f"Unsupported HTTP method: {verb!r}")
    return normalized


class DispatchResult(NamedTuple):
    """
    Outcome of a dispatch.

    Unpacks like a tuple:

        context, error = event.dispatch(request)
    """

    context: RequestContext
    error: Optional[Exception]

    @property
    def failed(self) -> bool:
        return self.error is not None


class Event:
    """
    A route: verb + path pattern + handler.

    Args:
        verb: HTTP method ("GET", "post", ...).
        path: Route pattern ("/users/:id", "/files/*path").
        action: Handler called with the context. None gives an empty body.
        router: Router the event belongs to. Provides the after-filters
                and configuration used at dispatch time.
        register: Append the event to the router's registry. False builds
                  a detached event (used for the not-found fallback).
        name: Optional name for reverse routing (Router.url_for).
    """

    def __init__(
        self,
        verb: str,
        path: str,
        action: Optional[Action] = None,
        router: Optional["Router"] = None,
        register: bool = True,
        name: Optional[str] = None,
    ):
        self.verb = normalize_verb(verb)
        self.path = path
        self.pattern = PathPattern.compile(path)
        self.action = action
        self.name = name
        self.router = router
        self.registered = False

        if router is not None and register:
            router.register(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.verb} {self.path}>"

    # =========================================================================
    # MATCHING
    # =========================================================================

    def recognize(self, path: str) -> Optional[Dict[str, str]]:
        """Path parameters if this event answers the path, else None."""
        return self.pattern.recognize(path)

    def matches(self, verb: str, path: str) -> bool:
        return self.verb == verb.upper() and self.recognize(path) is not None

    def path_params(self, path: str) -> Dict[str, str]:
        return self.pattern.recognize(path) or {}

    # =========================================================================
    # DISPATCH
    # =========================================================================

    @property
    def config(self) -> RouterConfig:
        return self.router.config if self.router is not None else RouterConfig()

    def dispatch(self, request: Request) -> DispatchResult:
        """
        Handle a request and return its context.

        Exceptions raised by the handler are captured into the context;
        exceptions raised by after-filters propagate.
        """
        request.params.update(self.path_params(request.path))
        context = RequestContext(request, self.config)
        error: Optional[Exception] = None

        try:
            self.execute(context)
        except Exception as exc:
            logger.debug("%r raised %s", self, type(exc).__name__)
            context.error = exc
            error = exc

        if self.router is not None:
            self.router.filters.run(context)

        return DispatchResult(context, error)

    def execute(self, context: RequestContext) -> None:
        """Run the handler and settle the body."""
        result = self.action(context) if self.action is not None else None
        if not context.has_body:
            context.body = result if result is not None else ""
        # compute_body() factories run here so their failures become a 500
        context.evaluate_body()

    def __call__(self, request: Request) -> RequestContext:
        """Dispatch and return only the context."""
        return self.dispatch(request).context
