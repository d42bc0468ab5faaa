"""
=============================================================================
PATH PATTERNS
=============================================================================

Compiles route patterns and recognizes concrete request paths against them.

Supported segments:
- Literal:   /users, /api/health
- Parameter: /users/:id, /posts/:post_id/comments/:comment_id
- Wildcard:  /static/*filepath  (last segment only)

=============================================================================
MATCHING ALGORITHM
=============================================================================

Both the pattern and the path are split on "/" and compared segment by
segment:

    Pattern:  /users/:id/posts/*rest
    Path:     /users/42/posts/2024/06/hello
                 │     │   │      └──────┬──────┘
                 ▼     ▼   ▼             ▼
              equal  bind equal    bind remainder
                      id           rest = "2024/06/hello"

    Result:   {"id": "42", "rest": "2024/06/hello"}

Rules:
    literal    must be equal to the path segment
    :param     binds any NON-EMPTY segment, as the raw substring
    *wildcard  binds every remaining segment (at least one), joined by "/"

Without a wildcard the segment counts must be equal. Matching is purely
structural: no type coercion, no default values, no percent-decoding.

A compiled pattern is immutable, so one PathPattern can be shared by any
number of threads recognizing paths at the same time.

=============================================================================
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..errors import PatternSyntaxError


PARAM_SIGIL = ":"
WILDCARD_SIGIL = "*"
DEFAULT_WILDCARD_NAME = "wildcard"

_PARAM_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class SegmentType(Enum):
    """How a single pattern segment is matched."""
    LITERAL = "literal"     # /users - exact match required
    PARAM = "param"         # /:id - captures one path segment
    WILDCARD = "wildcard"   # /*filepath - captures everything remaining


@dataclass(frozen=True)
class Segment:
    """One compiled segment of a route pattern."""

    kind: SegmentType
    value: str          # literal text, or the parameter name

    def __str__(self) -> str:
        if self.kind is SegmentType.PARAM:
            return PARAM_SIGIL + self.value
        if self.kind is SegmentType.WILDCARD:
            return WILDCARD_SIGIL + self.value
        return self.value


def split_path(path: str) -> List[str]:
    """
    Split a path into segments, ignoring leading and trailing slashes.

        >>> split_path("/users/42/")
        ['users', '42']
        >>> split_path("/")
        []

    Interior empty segments ("/a//b") are kept, so they can never
    satisfy a parameter.
    """
    stripped = path.strip("/")
    return stripped.split("/") if stripped else []


@dataclass(frozen=True)
class PathPattern:
    """
    A compiled route pattern.

    Example:
        pattern = PathPattern.compile("/hello/:name")
        pattern.recognize("/hello/Ada")     # {"name": "Ada"}
        pattern.recognize("/goodbye/Ada")   # None
    """

    source: str
    segments: Tuple[Segment, ...]

    @classmethod
    def compile(cls, pattern: str) -> "PathPattern":
        """
        Compile a pattern string.

        Raises:
            PatternSyntaxError: for a sigil without a name (":" alone),
                an invalid parameter name, a wildcard that is not the
                last segment, or a parameter name used twice.
        """
        segments: List[Segment] = []
        seen_names = set()
        parts = [part for part in split_path(pattern) if part]

        for index, part in enumerate(parts):
            if part.startswith(PARAM_SIGIL):
                name = part[1:]
                if not name:
                    raise PatternSyntaxError("Unterminated parameter sigil", pattern)
                if not _PARAM_NAME.fullmatch(name):
                    raise PatternSyntaxError(f"Invalid parameter name {name!r}", pattern)
                kind = SegmentType.PARAM

            elif part.startswith(WILDCARD_SIGIL):
                name = part[1:] or DEFAULT_WILDCARD_NAME
                if not _PARAM_NAME.fullmatch(name):
                    raise PatternSyntaxError(f"Invalid wildcard name {name!r}", pattern)
                if index != len(parts) - 1:
                    raise PatternSyntaxError("Wildcard must be the last segment", pattern)
                kind = SegmentType.WILDCARD

            else:
                segments.append(Segment(SegmentType.LITERAL, part))
                continue

            if name in seen_names:
                raise PatternSyntaxError(f"Duplicate parameter name {name!r}", pattern)
            seen_names.add(name)
            segments.append(Segment(kind, name))

        return cls(source=pattern, segments=tuple(segments))

    @property
    def param_names(self) -> List[str]:
        """Names of all parameters, in pattern order."""
        return [
            seg.value for seg in self.segments
            if seg.kind is not SegmentType.LITERAL
        ]

    @property
    def has_wildcard(self) -> bool:
        return bool(self.segments) and self.segments[-1].kind is SegmentType.WILDCARD

    def recognize(self, path: str) -> Optional[Dict[str, str]]:
        """
        Match a concrete path.

        Returns:
            Mapping of parameter name → raw captured string on a match
            (an empty dict for a literal-only pattern), None otherwise.
        """
        parts = split_path(path)
        fixed = self.segments[:-1] if self.has_wildcard else self.segments

        if self.has_wildcard:
            # Wildcard needs at least one segment of its own
            if len(parts) <= len(fixed):
                return None
        elif len(parts) != len(fixed):
            return None

        params: Dict[str, str] = {}
        for segment, part in zip(fixed, parts):
            if segment.kind is SegmentType.LITERAL:
                if segment.value != part:
                    return None
            elif not part:
                return None
            else:
                params[segment.value] = part

        if self.has_wildcard:
            params[self.segments[-1].value] = "/".join(parts[len(fixed):])

        return params

    def matches(self, path: str) -> bool:
        """True if the path is recognized."""
        return self.recognize(path) is not None

    def build(self, **params: str) -> str:
        """
        Build a concrete path from parameter values (reverse routing).

            >>> PathPattern.compile("/users/:id").build(id="42")
            '/users/42'

        Raises:
            KeyError: if a parameter value is missing.
        """
        parts = []
        for segment in self.segments:
            if segment.kind is SegmentType.LITERAL:
                parts.append(segment.value)
            else:
                parts.append(str(params[segment.value]))
        return "/" + "/".join(parts)

    def __str__(self) -> str:
        return "/" + "/".join(str(seg) for seg in self.segments)


def compile_pattern(pattern: str) -> PathPattern:
    """Compile a route pattern (see PathPattern.compile)."""
    return PathPattern.compile(pattern)


def recognize(compiled: PathPattern, path: str) -> Optional[Dict[str, str]]:
    """Recognize a path against a compiled pattern (see PathPattern.recognize)."""
    return compiled.recognize(path)
