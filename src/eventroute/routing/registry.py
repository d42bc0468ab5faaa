"""
=============================================================================
ROUTER (EVENT REGISTRY)
=============================================================================

Ordered registry of events plus the not-found fallback.

=============================================================================
LOOKUP
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        LOOKUP FLOW                                  │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   lookup("GET", "/users/123")                                       │
    │        │                                                             │
    │        ▼                                                             │
    │   Registered events, in registration order:                         │
    │   ┌────────────────────────────────────────────────────────┐        │
    │   │ GET  /health       → health                            │        │
    │   │ GET  /users/me     → current_user                      │        │
    │   │ GET  /users/:id    → get_user       ← FIRST MATCH WINS │        │
    │   │ GET  /users/*rest  → catch_all        (never reached)  │        │
    │   └────────────────────────────────────────────────────────┘        │
    │        │                                                             │
    │        │ no event matched?                                           │
    │        ▼                                                             │
    │   lookup("GET", "404")  → application's own not-found event         │
    │        │                                                             │
    │        │ none registered?                                            │
    │        ▼                                                             │
    │   built-in not-found event (status 404)                             │
    │        ├── GET /  → default index page                              │
    │        └── else   → not-found page                                  │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Registration order is match priority: register specific routes
(/users/me) before general ones (/users/:id). Events can be appended but
never removed one by one; reset() clears them all.

=============================================================================
CONCURRENCY
=============================================================================

Events live in an immutable tuple. register() and reset() build a new
tuple under a lock; lookup() reads whichever tuple is current without
locking. A lookup therefore sees every registration completed before it
started and never a half-applied one.

=============================================================================
"""

import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from ..config import RouterConfig
from ..context import RequestContext, View
from ..filters.base import AfterFilter, AfterFilterChain
from ..filters.logging import log_event
from ..http.request import Request
from ..http.status_codes import HTTPStatus
from .event import Action, DispatchResult, Event
from .static import StaticEvent


logger = logging.getLogger(__name__)


# Path of the application-defined not-found event
NOT_FOUND_PATH = "404"

# Pages of the built-in not-found event
BUILTIN_VIEWS_DIR = str(Path(__file__).resolve().parent.parent / "files")


def default_not_found(context: RequestContext) -> None:
    """Handler of the built-in not-found event."""
    context.status = HTTPStatus.NOT_FOUND
    context.views_dir = BUILTIN_VIEWS_DIR

    request = context.request
    if request.path == "/" and request.method == "GET":
        context.render(View("default_index"))
    else:
        context.render(View("not_found"))


class Router:
    """
    Ordered event registry with dispatch.

    =========================================================================
    USAGE
    =========================================================================

        router = Router()

        @router.get("/hello/:name")
        def hello(context):
            return f"Hello, {context.params['name']}"

        router.static("/static", "./public")

        context, error = router.dispatch(Request("GET", "/hello/Ada"))
        context.body   # "Hello, Ada"

    =========================================================================

    Args:
        config: Router configuration (validated here).
        install_default_filters: Start the after-filter chain with
            log_event, like an application would at load time.
    """

    def __init__(
        self,
        config: Optional[RouterConfig] = None,
        install_default_filters: bool = True,
    ):
        self.config = config or RouterConfig()
        self.config.validate()

        self._events: Tuple[Event, ...] = ()
        self._lock = threading.Lock()
        self.filters = AfterFilterChain()

        if install_default_filters:
            self.filters.append(log_event)

    # =========================================================================
    # REGISTRY
    # =========================================================================

    @property
    def events(self) -> Tuple[Event, ...]:
        """Registered events in registration (= priority) order."""
        return self._events

    def register(self, event: Event) -> Event:
        """
        Append an event. No duplicate detection: the first one wins.

        Raises:
            ValueError: The event is registered on another router.
        """
        with self._lock:
            if event.registered and event.router is not self:
                raise ValueError(f"{event!r} is already registered on another router")
            self._events = self._events + (event,)
            event.router = self
            event.registered = True

        logger.debug("Registered %s %s", event.verb, event.path)
        return event

    def reset(self) -> None:
        """
        Forget every registered event.

        After-filters are kept: they belong to the application, not to a
        particular set of routes.
        """
        with self._lock:
            events, self._events = self._events, ()

        for event in events:
            event.registered = False

        logger.debug("Router reset, %d events cleared", len(events))

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self):
        return iter(self._events)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def find(self, verb: str, path: str) -> Optional[Event]:
        """First registered event answering verb + path, or None."""
        verb = verb.upper()
        for event in self._events:
            if event.matches(verb, path):
                return event
        return None

    def lookup(self, verb: str, path: str) -> Event:
        """
        Event that should answer verb + path.

        Never returns None: when nothing matches, the application's
        "404" event or the built-in not-found event answers.
        """
        event = self.find(verb, path)
        if event is not None:
            return event
        return self.present_error()

    def present_error(self) -> Event:
        """
        The not-found event: application-defined GET "404", or built-in.

        The application's event is found by its declared path, so a
        catch-all such as "/:page" never takes over the not-found role.
        """
        for event in self._events:
            if event.verb == "GET" and event.path.strip("/") == NOT_FOUND_PATH:
                return event
        return self.not_found()

    def not_found(self) -> Event:
        """Build the built-in not-found event (not registered)."""
        return Event(
            "GET", "not_found", default_not_found, router=self, register=False
        )

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def dispatch(self, request: Request) -> DispatchResult:
        """Look up the event for a request and dispatch to it."""
        return self.lookup(request.method, request.path).dispatch(request)

    def __call__(self, request: Request) -> RequestContext:
        return self.dispatch(request).context

    # =========================================================================
    # AFTER-FILTERS
    # =========================================================================

    def after_attend(self, after_filter: AfterFilter) -> AfterFilter:
        """
        Run a filter on every context after its request is handled.

        Usable as a decorator:

            @router.after_attend
            def add_server_header(context):
                context.header(Server="eventroute")
        """
        return self.filters.append(after_filter)

    # =========================================================================
    # DECORATOR-STYLE REGISTRATION
    # =========================================================================
    #
    #     @router.get("/users/:id")
    #     def get_user(context):
    #         ...
    #
    # is equivalent to:
    #
    #     Event("GET", "/users/:id", get_user, router=router)
    #
    # =========================================================================

    def route(
        self,
        verb: str,
        path: str,
        name: Optional[str] = None,
    ) -> Callable[[Action], Action]:
        """Decorator registering a handler for verb + path."""
        def decorator(action: Action) -> Action:
            Event(verb, path, action, router=self, name=name)
            return action  # unchanged, so decorators can be stacked
        return decorator

    def get(self, path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
        """Register a GET handler."""
        return self.route("GET", path, name)

    def post(self, path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
        """Register a POST handler."""
        return self.route("POST", path, name)

    def put(self, path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
        """Register a PUT handler."""
        return self.route("PUT", path, name)

    def delete(self, path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
        """Register a DELETE handler."""
        return self.route("DELETE", path, name)

    def patch(self, path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
        """Register a PATCH handler."""
        return self.route("PATCH", path, name)

    def head(self, path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
        """Register a HEAD handler."""
        return self.route("HEAD", path, name)

    def options(self, path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
        """Register an OPTIONS handler."""
        return self.route("OPTIONS", path, name)

    def static(self, path: str, root: Union[str, Path]) -> StaticEvent:
        """Serve the files under root at the URL prefix path."""
        return StaticEvent(path, root, router=self)

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def url_for(self, name: str, **params: str) -> Optional[str]:
        """
        Build the path of a named event (reverse routing).

            @router.get("/users/:id", name="get_user")
            def get_user(context): ...

            router.url_for("get_user", id="123")   # "/users/123"

        Returns None if no event has that name.
        """
        for event in self._events:
            if event.name == name:
                return event.pattern.build(**params)
        return None

    def describe(self) -> str:
        """
        Table of registered events, for debugging.

              GET      /hello/:name
              GET      /static
        """
        return "\n".join(f"  {event.verb:8} {event.path}" for event in self._events)
