from __future__ import annotations

"""
Dotted Path Handling.

Splits property paths into segments and walks them over a ValueNode tree.
Resolution only descends through mappings; sequences are never indexed.
"""

from typing import List, Optional

from proptree.domain.constants import DELIMITER_CHAR
from proptree.domain.errors import InvalidPathError
from proptree.domain.value_node import ValueNode


def split_path(path: str) -> Optional[List[str]]:
    """
    Split a dotted path into its segments.

    Args:
        path: Dotted property path, e.g. "server.http.port".

    Returns:
        Optional[List[str]]: The segments, or None when the path is empty
        or contains an empty segment.

    Raises:
        TypeError: If path is not a string.
    """
    if not isinstance(path, str):
        raise TypeError(f"Property path must be a string, got {type(path).__name__}")

    segments = path.split(DELIMITER_CHAR)
    if not all(segments):
        return None
    return segments


def require_segments(path: str) -> List[str]:
    """Split a path for a write, rejecting malformed input."""
    segments = split_path(path)
    if segments is None:
        raise InvalidPathError(path)
    return segments


def resolve(root: ValueNode, path: str) -> Optional[ValueNode]:
    """
    Find the live node designated by path.

    A malformed path resolves like a missing one.

    Returns:
        Optional[ValueNode]: The node inside root's tree, or None.
    """
    segments = split_path(path)
    if segments is None:
        return None

    node: Optional[ValueNode] = root
    for segment in segments:
        node = node.lookup(segment)
        if node is None:
            return None
    return node
