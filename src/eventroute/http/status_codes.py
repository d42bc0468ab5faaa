"""
HTTP status codes used by the routing engine.

The engine itself only ever produces three of these on its own:

    200 OK                     - default status of every context
    404 Not Found              - the not-found fallback event
    500 Internal Server Error  - a handler raised

The rest are here so handlers can write ``context.status = HTTPStatus.CREATED``
instead of magic numbers.
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes and reason phrases.

    Being an IntEnum, members compare equal to plain integers:

        >>> HTTPStatus.NOT_FOUND == 404
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    # 2xx SUCCESS
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204

    # 3xx REDIRECTION
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304

    # 4xx CLIENT ERRORS
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405

    # 5xx SERVER ERRORS
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    SERVICE_UNAVAILABLE = 503

    @property
    def phrase(self) -> str:
        """Reason phrase, e.g. 'Not Found' for 404."""
        return _PHRASES.get(self.value, self.name.replace("_", " ").title())

    @property
    def is_error(self) -> bool:
        """True for 4xx and 5xx codes."""
        return self.value >= 400


# Phrases whose spelling doesn't follow the enum member name
_PHRASES = {
    200: "OK",
}
