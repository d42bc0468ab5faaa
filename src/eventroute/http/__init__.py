"""
=============================================================================
HTTP MODULE - Request Model, Status Codes, MIME Types
=============================================================================

The protocol-level pieces the routing engine consumes. None of them touch
a socket: parsing bytes off the wire is the host server's job.

    ┌─────────────────────────────────────────────────────────────────────┐
    │ REQUEST (request.py)                                                │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Pre-parsed inbound request: method, path, params, env, headers      │
    │                                                                      │
    │ Example:  Request("GET", "/hello/Ada", params={"lang": "en"})       │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ STATUS CODES (status_codes.py)                                      │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Example:  HTTPStatus.NOT_FOUND → 404, phrase="Not Found"            │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ MIME TYPES (mime_types.py)                                          │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Example:  "png" → image/png, unknown → application/octet-stream     │
    │                                                                      │
    │ Used by static events to set the Content-Type header                │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .request import Request
from .status_codes import HTTPStatus
from .mime_types import MIME_TYPES, DEFAULT_MIME_TYPE, get_mime_type

__all__ = [
    "Request",
    "HTTPStatus",
    "MIME_TYPES",
    "DEFAULT_MIME_TYPE",
    "get_mime_type",
]
