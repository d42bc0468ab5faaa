"""
After-filters: callables run against every completed request context.

    from eventroute.filters import log_event

    router.after_attend(log_event)   # installed by default on new routers
"""

from .base import AfterFilter, AfterFilterChain
from .logging import EventLog, log_event, configure_logging

__all__ = [
    "AfterFilter",
    "AfterFilterChain",
    "EventLog",
    "log_event",
    "configure_logging",
]
