"""
=============================================================================
MIME TYPE LOOKUP
=============================================================================

Fixed extension → MIME type table used by static events to set the
Content-Type header.

Keys are lowercase extensions WITHOUT the leading dot:

    "png"  → "image/png"
    "html" → "text/html"

Extensions that are not in the table get DEFAULT_MIME_TYPE
("application/octet-stream", i.e. opaque bytes) unless the caller passes
its own default.

=============================================================================
"""

from pathlib import Path
from typing import Optional, Union


# =============================================================================
# MIME TYPE TABLE
# =============================================================================

MIME_TYPES = {
    # -------------------------------------------------------------------------
    # TEXT / DOCUMENTS
    # -------------------------------------------------------------------------
    "asc": "text/plain",
    "css": "text/css",
    "csv": "text/csv",
    "etx": "text/x-setext",
    "htm": "text/html",
    "html": "text/html",
    "js": "text/javascript",
    "json": "application/json",
    "md": "text/markdown",
    "rb": "text/plain",
    "rd": "text/plain",
    "rtf": "application/rtf",
    "sgm": "text/sgml",
    "sgml": "text/sgml",
    "txt": "text/plain",
    "xml": "text/xml",
    "pdf": "application/pdf",
    "doc": "application/msword",
    "dvi": "application/x-dvi",
    "xls": "application/vnd.ms-excel",
    "ppt": "application/vnd.ms-powerpoint",
    "ai": "application/postscript",
    "eps": "application/postscript",
    "ps": "application/postscript",

    # -------------------------------------------------------------------------
    # IMAGES
    # -------------------------------------------------------------------------
    "bmp": "image/bmp",
    "gif": "image/gif",
    "ico": "image/x-icon",
    "jpe": "image/jpeg",
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "pbm": "image/x-portable-bitmap",
    "pgm": "image/x-portable-graymap",
    "png": "image/png",
    "pnm": "image/x-portable-anymap",
    "ppm": "image/x-portable-pixmap",
    "ras": "image/x-cmu-raster",
    "svg": "image/svg+xml",        # SVG is XML, hence +xml
    "tif": "image/tiff",
    "tiff": "image/tiff",
    "webp": "image/webp",
    "xbm": "image/x-xbitmap",
    "xpm": "image/x-xpixmap",
    "xwd": "image/x-xwindowdump",

    # -------------------------------------------------------------------------
    # AUDIO / VIDEO
    # -------------------------------------------------------------------------
    "avi": "video/x-msvideo",
    "mov": "video/quicktime",
    "mp3": "audio/mpeg",
    "mp4": "video/mp4",
    "mpe": "video/mpeg",
    "mpeg": "video/mpeg",
    "mpg": "video/mpeg",
    "qt": "video/quicktime",
    "wav": "audio/wav",
    "webm": "video/webm",

    # -------------------------------------------------------------------------
    # CERTIFICATES
    # -------------------------------------------------------------------------
    "cer": "application/pkix-cert",
    "crl": "application/pkix-crl",
    "crt": "application/x-x509-ca-cert",

    # -------------------------------------------------------------------------
    # ARCHIVES / BINARIES
    # -------------------------------------------------------------------------
    "bin": "application/octet-stream",
    "class": "application/octet-stream",
    "dms": "application/octet-stream",
    "exe": "application/octet-stream",
    "gz": "application/gzip",
    "lha": "application/octet-stream",
    "lzh": "application/octet-stream",
    "tar": "application/x-tar",
    "zip": "application/zip",
}

# Fallback for extensions missing from the table
DEFAULT_MIME_TYPE = "application/octet-stream"


def extension_of(path: Union[str, Path]) -> str:
    """
    Lowercase extension of a path, without the dot.

        >>> extension_of("/public/logo.PNG")
        'png'
        >>> extension_of("Makefile")
        ''
    """
    return Path(path).suffix[1:].lower()


def get_mime_type(path: Union[str, Path], default: Optional[str] = None) -> str:
    """
    Get the MIME type for a file based on its extension.

    Args:
        path: File path or name with extension
        default: MIME type for unknown extensions
                 (DEFAULT_MIME_TYPE if not given)

    Examples:
        >>> get_mime_type("logo.png")
        'image/png'
        >>> get_mime_type("archive.xyz")
        'application/octet-stream'
    """
    return MIME_TYPES.get(extension_of(path), default or DEFAULT_MIME_TYPE)
