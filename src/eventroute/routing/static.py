"""
=============================================================================
STATIC EVENTS
=============================================================================

A static event serves files from a directory on disk.

    router.static("/static", "./public")

    GET /static/logo.png
        │
        ▼
    physical path:  ./public/logo.png      (route prefix → root directory)
        │
        ├── file exists  → this event answers
        └── missing      → lookup moves on to the next event

Matching is a filesystem existence check, not a pattern match: the event
answers exactly the paths under its prefix that name an existing file.

=============================================================================
RESPONSE
=============================================================================

No handler runs. Dispatch fills the context with:

    body            FileStream - yields the file in fixed-size chunks,
                    reopening it on every iteration
    Content-Type    from the MIME table (default for unknown extensions)
    Content-Length  file size in bytes

If the file disappears between lookup and dispatch, the stat fails and
the failure is captured like any handler error (status 500).

=============================================================================
SECURITY: PATH TRAVERSAL
=============================================================================

    GET /static/../../etc/passwd

The physical path is resolved (following .. and symlinks) and must stay
inside the root directory. Paths that escape it are never recognized.

=============================================================================
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Union

from ..context import RequestContext
from ..errors import StaticFileError
from ..http.mime_types import get_mime_type
from .event import Event

if TYPE_CHECKING:
    from .registry import Router


logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8192


class FileStream:
    """
    Lazy, restartable chunk producer over a file.

    Iterating opens the file, yields blocks of chunk_size bytes and closes
    it again, so the same stream can be iterated any number of times:

        for chunk in context.body:
            socket.sendall(chunk)
    """

    def __init__(self, path: Union[str, Path], chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.path = Path(path)
        self.chunk_size = chunk_size

    def __repr__(self) -> str:
        return f"<FileStream {self.path}>"

    def __iter__(self) -> Iterator[bytes]:
        try:
            with open(self.path, "rb") as file:
                while True:
                    chunk = file.read(self.chunk_size)
                    if not chunk:
                        break
                    yield chunk
        except OSError as exc:
            raise StaticFileError(f"Cannot read {self.path}: {exc}", str(self.path)) from exc

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    def read(self) -> bytes:
        """Whole file contents."""
        return b"".join(self)


class StaticEvent(Event):
    """
    GET event serving the files below root under the path prefix.

    Args:
        path: URL prefix, e.g. "/static".
        root: Directory the prefix maps to.
        router: Owning router.
        register: Append to the router's registry.

    Raises:
        ValueError: if root is not an existing directory.
    """

    def __init__(
        self,
        path: str,
        root: Union[str, Path],
        router: Optional["Router"] = None,
        register: bool = True,
    ):
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise ValueError(f"Static root directory does not exist: {root}")

        self.prefix = "/" + path.strip("/") if path.strip("/") else ""
        super().__init__("GET", path, None, router=router, register=register)

    def physical_path_for(self, path: str) -> Optional[Path]:
        """
        Map a request path onto the filesystem.

        Returns None when the path is not under this event's prefix or
        resolves outside the root directory.
        """
        if self.prefix and path != self.prefix and not path.startswith(self.prefix + "/"):
            return None

        relative = path[len(self.prefix):].lstrip("/")
        try:
            full_path = (self.root / relative).resolve()
        except (ValueError, OSError) as exc:
            logger.warning("Unresolvable static path %r: %s", path, exc)
            return None

        try:
            full_path.relative_to(self.root)
        except ValueError:
            logger.warning("Path traversal attempt: %s", path)
            return None

        return full_path

    def recognize(self, path: str) -> Optional[Dict[str, str]]:
        full_path = self.physical_path_for(path)
        if full_path is not None and full_path.is_file():
            return {}
        return None

    def path_params(self, path: str) -> Dict[str, str]:
        return {}

    def execute(self, context: RequestContext) -> None:
        full_path = self.physical_path_for(context.request.path)
        if full_path is None:
            raise StaticFileError(
                f"No static file for {context.request.path}", context.request.path
            )

        config = self.config
        size = full_path.stat().st_size
        context.body = FileStream(full_path, config.static_chunk_size)
        context.update_headers({
            "Content-Type": get_mime_type(full_path, default=config.default_mime_type),
            "Content-Length": str(size),
        })
