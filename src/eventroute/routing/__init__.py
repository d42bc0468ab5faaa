"""
Routing: path patterns, events, static events and the router.

    pattern.py   PathPattern - compile "/users/:id", recognize paths
    event.py     Event - verb + pattern + handler, dispatch
    static.py    StaticEvent - files from a directory, FileStream body
    registry.py  Router - ordered events, lookup, not-found fallback
"""

from .pattern import PathPattern, Segment, SegmentType, compile_pattern, recognize
from .event import METHODS, DispatchResult, Event
from .static import FileStream, StaticEvent
from .registry import NOT_FOUND_PATH, Router

__all__ = [
    "PathPattern",
    "Segment",
    "SegmentType",
    "compile_pattern",
    "recognize",
    "METHODS",
    "DispatchResult",
    "Event",
    "FileStream",
    "StaticEvent",
    "NOT_FOUND_PATH",
    "Router",
]
