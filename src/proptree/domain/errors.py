from __future__ import annotations

"""
Property Tree Error Hierarchy.

A missing path is never an error: lookups report it as None, an empty
collection or the caller's default. The classes below cover the cases
where a node exists but cannot be used the way the caller asked.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from proptree.domain.value_node import NodeKind


class PropertyTreeError(Exception):
    """Base class for every error raised by proptree."""


class TypeMismatchError(PropertyTreeError, TypeError):
    """
    The node exists but its active variant cannot be read as the requested type.

    Attributes:
        expected: Name of the requested Python type.
        actual: Kind of the node that was found (None for unsupported values).
        path: Dotted path of the node, if the lookup went through one.
    """

    def __init__(
            self,
            expected: str,
            actual: Optional["NodeKind"],
            path: Optional[str] = None,
            detail: str = "",
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.path = path

        where = f" at '{path}'" if path else ""
        found = actual.value if actual is not None else "unsupported value"
        message = f"Cannot read {found} as '{expected}'{where}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class StructuralConflictError(PropertyTreeError, ValueError):
    """
    A write would overwrite a container or pass through a non-object node.

    Attributes:
        path: Dotted path given to the write.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to set value for '{path}': {reason}")


class InvalidPathError(PropertyTreeError, ValueError):
    """The path is empty or contains an empty segment."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid property path: '{path}'")
