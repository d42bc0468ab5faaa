"""
=============================================================================
AFTER-FILTER CHAIN
=============================================================================

After-filters run on every context once its request has been handled,
whether the handler succeeded or failed.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      DISPATCH TIMELINE                              │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   handler(context)        may raise → captured into context.error   │
    │        │                                                             │
    │        ▼                                                             │
    │   filter_1(context)       e.g. log_event                            │
    │   filter_2(context)       e.g. add X-Request-ID header              │
    │   ...                     registration order, each exactly once     │
    │        │                                                             │
    │        ▼                                                             │
    │   context returned to the host                                      │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Unlike handlers, filters are trusted code: an exception raised by a
filter is NOT captured. It propagates out of dispatch as a programming
error.

=============================================================================
THE FILTER CONTRACT
=============================================================================

A filter is any callable taking the context and returning nothing:

    def add_server_header(context):
        context.header(Server="eventroute")

    router.after_attend(add_server_header)

Filters are appended while the application is being set up and are never
removed.

=============================================================================
"""

import logging
import threading
from typing import TYPE_CHECKING, Callable, Iterator, Tuple

if TYPE_CHECKING:
    from ..context import RequestContext


logger = logging.getLogger(__name__)


# A filter receives the completed context; its return value is ignored
AfterFilter = Callable[["RequestContext"], None]


class AfterFilterChain:
    """
    Ordered, append-only list of after-filters.

    The filters are kept in an immutable tuple that is replaced on every
    append, so run() iterates a consistent snapshot even if another thread
    appends at the same time.
    """

    def __init__(self) -> None:
        self._filters: Tuple[AfterFilter, ...] = ()
        self._lock = threading.Lock()

    def append(self, after_filter: AfterFilter) -> AfterFilter:
        """
        Add a filter to the end of the chain.

        Returns the filter unchanged, so this doubles as a decorator.
        """
        if not callable(after_filter):
            raise TypeError(f"After-filter must be callable, got {after_filter!r}")

        with self._lock:
            self._filters = self._filters + (after_filter,)

        logger.debug("Registered after-filter %s", _filter_name(after_filter))
        return after_filter

    def run(self, context: "RequestContext") -> None:
        """Run every filter against the context, in registration order."""
        for after_filter in self._filters:
            after_filter(context)

    @property
    def filters(self) -> Tuple[AfterFilter, ...]:
        return self._filters

    def __iter__(self) -> Iterator[AfterFilter]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __contains__(self, after_filter: object) -> bool:
        return after_filter in self._filters


def _filter_name(after_filter: AfterFilter) -> str:
    return getattr(after_filter, "__qualname__", None) or repr(after_filter)
