"""
=============================================================================
ROUTER CONFIGURATION
=============================================================================

Centralized configuration for a Router and the contexts it creates.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Per-context overrides                                          │
    │      └── context.views_dir = "/srv/app/templates"                   │
    │                                                                      │
    │   2. Explicit RouterConfig passed to Router(...)                    │
    │      └── Router(RouterConfig(static_chunk_size=65536))             │
    │                                                                      │
    │   3. Environment variables via RouterConfig.from_env()              │
    │      └── EVENTROUTE_LOG_LEVEL=DEBUG                                 │
    │                                                                      │
    │   4. Defaults (below)                                               │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .http.mime_types import DEFAULT_MIME_TYPE
from .http.request import DEFAULT_SESSION_KEY


LOG_FORMATS = ("text", "json")


@dataclass
class RouterConfig:
    """
    Configuration for a Router.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    TEMPLATES
    - views_dir

    STATIC FILES
    - static_chunk_size, default_mime_type

    REQUEST
    - session_key

    LOGGING
    - log_level, log_format

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # TEMPLATES
    # ─────────────────────────────────────────────────────────────────────

    views_dir: Optional[str] = None
    """
    Directory named templates are read from.
    None = "<directory of the entry-point script>/views".
    """

    # ─────────────────────────────────────────────────────────────────────
    # STATIC FILES
    # ─────────────────────────────────────────────────────────────────────

    static_chunk_size: int = 8192
    """
    Block size (bytes) used when streaming a static file.
    """

    default_mime_type: str = DEFAULT_MIME_TYPE
    """
    Content-Type sent for file extensions missing from the MIME table.
    """

    # ─────────────────────────────────────────────────────────────────────
    # REQUEST
    # ─────────────────────────────────────────────────────────────────────

    session_key: str = DEFAULT_SESSION_KEY
    """
    Key in request.env under which the host stores the session handle.
    RequestContext.session reads it; Request.session keeps its own key.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    log_format: str = "text"
    """
    Access log format: 'text' (one readable line) or 'json'.
    """

    @classmethod
    def from_env(cls) -> "RouterConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        EVENTROUTE_VIEWS_DIR     Template directory (default: script dir/views)
        EVENTROUTE_CHUNK_SIZE    Static file block size (default: 8192)
        EVENTROUTE_DEFAULT_MIME  Fallback Content-Type
        EVENTROUTE_SESSION_KEY   Session key in request env (default: session)
        EVENTROUTE_LOG_LEVEL     Logging level (default: INFO)
        EVENTROUTE_LOG_FORMAT    text or json (default: text)

        =====================================================================
        """
        return cls(
            views_dir=os.getenv("EVENTROUTE_VIEWS_DIR"),
            static_chunk_size=int(os.getenv("EVENTROUTE_CHUNK_SIZE", "8192")),
            default_mime_type=os.getenv("EVENTROUTE_DEFAULT_MIME", DEFAULT_MIME_TYPE),
            session_key=os.getenv("EVENTROUTE_SESSION_KEY", DEFAULT_SESSION_KEY),
            log_level=os.getenv("EVENTROUTE_LOG_LEVEL", "INFO"),
            log_format=os.getenv("EVENTROUTE_LOG_FORMAT", "text"),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Called when a Router is created, so a bad value fails at startup
        rather than on the first request that needs it.
        """
        if self.static_chunk_size < 1:
            raise ValueError(
                f"static_chunk_size must be >= 1, got {self.static_chunk_size}"
            )

        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"Invalid log_format: {self.log_format!r}. "
                f"Must be one of {', '.join(LOG_FORMATS)}."
            )

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Invalid log_level: {self.log_level!r}")

        if not self.default_mime_type:
            raise ValueError("default_mime_type must not be empty")
