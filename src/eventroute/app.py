"""
=============================================================================
DEFAULT APPLICATION ROUTER
=============================================================================

Most applications need exactly one router. This module holds it and
exposes its registration methods as plain functions:

    from eventroute import app

    @app.get("/hello/:name")
    def hello(context):
        return f"Hello, {context.params['name']}"

    app.static("/static", "./public")

    # in the host server, per request:
    context = app.router()(request)

=============================================================================
LIFECYCLE
=============================================================================

    init(config)   replace the default router with a fresh one
    teardown()     same, with default configuration (use between tests)
    reset()        clear events only; after-filters stay installed

Register everything during startup, before the host starts dispatching
requests from multiple threads.

=============================================================================
"""

from pathlib import Path
from typing import Callable, Optional, Union

from .config import RouterConfig
from .filters.base import AfterFilter
from .http.request import Request
from .routing.event import Action, DispatchResult, Event
from .routing.registry import Router
from .routing.static import StaticEvent


_router = Router()


def router() -> Router:
    """The current default router."""
    return _router


def init(config: Optional[RouterConfig] = None, install_default_filters: bool = True) -> Router:
    """Install a fresh default router and return it."""
    global _router
    _router = Router(config, install_default_filters=install_default_filters)
    return _router


def teardown() -> None:
    """Discard the default router (events and filters) and start over."""
    init()


# =============================================================================
# REGISTRATION
# =============================================================================

def get(path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
    return _router.get(path, name)


def post(path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
    return _router.post(path, name)


def put(path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
    return _router.put(path, name)


def delete(path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
    return _router.delete(path, name)


def patch(path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
    return _router.patch(path, name)


def head(path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
    return _router.head(path, name)


def options(path: str, name: Optional[str] = None) -> Callable[[Action], Action]:
    return _router.options(path, name)


def static(path: str, root: Union[str, Path]) -> StaticEvent:
    return _router.static(path, root)


def after_attend(after_filter: AfterFilter) -> AfterFilter:
    return _router.after_attend(after_filter)


# =============================================================================
# LOOKUP / DISPATCH
# =============================================================================

def lookup(verb: str, path: str) -> Event:
    return _router.lookup(verb, path)


def dispatch(request: Request) -> DispatchResult:
    return _router.dispatch(request)


def reset() -> None:
    _router.reset()
