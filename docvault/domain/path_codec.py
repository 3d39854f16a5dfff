"""
Materialized path encoding for the folder tree.

A folder path is a sequence of labels joined by ``SEPARATOR``; every label
is the path-safe form of one folder identifier, root first. Paths are
opaque tokens: they are compared by equality and segment prefix, never
decoded back into identifiers.
"""

import re
from typing import List, Optional, Union
from uuid import UUID

SEPARATOR = "."

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")
_SEGMENT_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class InvalidPathSegment(ValueError):
    """Raised when an identifier or segment cannot be used in a path"""


def encode_segment(identifier: Union[UUID, str]) -> str:
    """
    Encode a folder (or tenant) identifier as one path label.

    Hyphens become underscores. Identifiers that already contain an
    underscore are rejected, otherwise two identifiers could share a label.

    Raises:
        InvalidPathSegment: identifier is empty or holds reserved characters
    """
    text = str(identifier) if isinstance(identifier, UUID) else identifier
    if not text or not _IDENTIFIER_PATTERN.match(text):
        raise InvalidPathSegment(f"Identifier cannot be encoded as a path segment: {identifier!r}")
    return text.replace("-", "_")


def compose_path(parent_path: Optional[str], own_segment: str) -> str:
    """Root folders (no parent path) get their own segment as the full path"""
    if not own_segment or not _SEGMENT_PATTERN.match(own_segment):
        raise InvalidPathSegment(f"Invalid path segment: {own_segment!r}")
    if parent_path is None:
        return own_segment
    return f"{parent_path}{SEPARATOR}{own_segment}"


def split_path(path: str) -> List[str]:
    return path.split(SEPARATOR)


def depth(path: str) -> int:
    """Number of segments; the tenant root has depth 1"""
    return len(split_path(path))


def ancestor_paths(path: str) -> List[str]:
    """Every prefix of ``path`` on a segment boundary, root first, ``path`` last"""
    segments = split_path(path)
    return [SEPARATOR.join(segments[: i + 1]) for i in range(len(segments))]


def is_descendant_or_self(path: str, pivot: str) -> bool:
    return path == pivot or path.startswith(pivot + SEPARATOR)
