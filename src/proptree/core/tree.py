from __future__ import annotations

"""
Property Tree.

Path-addressed, typed access to a ValueNode root. Lookups take dotted
paths ("server.http.port"); a missing path is reported as None, an empty
collection or the caller's default, never as an exception.

Every tree owns its root exclusively. Wrapping an existing node, projecting
a subtree or extracting a container always deep-copies, so changes made
through one tree are never visible through another.
"""

import logging
from typing import Any, Dict, List, Optional, TypeVar

from proptree.core.merge import merge_roots
from proptree.core.paths import require_segments, resolve
from proptree.domain.constants import DELIMITER_CHAR, NAME_KEY
from proptree.domain.errors import StructuralConflictError
from proptree.domain.value_node import NodeKind, ValueNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PropertyTree:
    """
    Hierarchical settings addressed by dotted paths.

    Example:
        >>> tree = PropertyTree({"server": {"port": 8080}})
        >>> tree.get("server.port", int)
        8080
        >>> tree.get("server.host", str) is None
        True
    """

    __slots__ = ("_root",)

    def __init__(self, value: Any = None) -> None:
        """
        Args:
            value: A scalar, a list/tuple, a string-keyed mapping (values may
                be ValueNode instances), a ValueNode, another PropertyTree,
                or None for an empty tree. The input is always copied.
        """
        if isinstance(value, PropertyTree):
            value = value._root
        self._root = ValueNode.from_python(value)

    @classmethod
    def from_node(cls, node: ValueNode) -> "PropertyTree":
        """Wrap a deep copy of an existing node."""
        return cls(node)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def kind(self) -> NodeKind:
        return self._root.kind

    def has_value(self) -> bool:
        return self._root.has_value

    def length(self) -> int:
        """
        Size of the root.

        Returns:
            int: Element count of a sequence, entry count of a mapping,
            character count of a string, 0 for everything else.
        """
        if self._root.kind is NodeKind.TEXT:
            return len(self._root.as_type(str))
        return self._root.length()

    def contains(self, path: str) -> bool:
        return resolve(self._root, path) is not None

    def __contains__(self, path: str) -> bool:
        return self.contains(path)

    # -------------------------------------------------------------------------
    # Typed access
    # -------------------------------------------------------------------------

    def get(self, path: str, expected: type) -> Optional[Any]:
        """
        Read the value at path as the given type.

        Args:
            path: Dotted property path.
            expected: bool, int, float, str, list, dict or ValueNode.

        Returns:
            Optional[Any]: The value, or None if the path does not exist.

        Raises:
            TypeMismatchError: If the node exists but holds another type.
        """
        node = resolve(self._root, path)
        if node is None:
            return None
        return node.as_type(expected, path)

    def value(self, expected: type) -> Any:
        """Read the root itself as the given type."""
        return self._root.as_type(expected)

    def value_or_else(self, default: T) -> T:
        """Read the root as type(default), or return default if the root is empty."""
        if self._root.is_empty:
            return default
        return self._root.as_type(type(default))

    def get_or_else(self, path: str, default: T) -> T:
        """
        Read the value at path as type(default), or return default if missing.

        The default also selects the type, so it cannot be None; use
        get(path, expected) when a missing value should read as None.

        Raises:
            TypeMismatchError: If the node exists but holds another type.
        """
        node = resolve(self._root, path)
        if node is None:
            return default
        return node.as_type(type(default), path)

    def sub(self, path: str) -> Optional["PropertyTree"]:
        """Return a copy of the subtree at path, or None."""
        node = resolve(self._root, path)
        if node is None:
            return None
        return PropertyTree(node)

    # -------------------------------------------------------------------------
    # Projection
    # -------------------------------------------------------------------------

    def as_array(self, path: str) -> List["PropertyTree"]:
        """
        View the node at path as a list of trees.

        A missing path gives an empty list and a non-sequence node a single
        tree. Scalar elements of a sequence are wrapped as {"name": element}
        so every item can be read like an object.
        """
        node = resolve(self._root, path)
        if node is None:
            return []
        if not node.is_sequence:
            return [PropertyTree(node)]
        return [_project(child) for child in node.elements()]

    def as_object(self, path: str) -> Dict[str, "PropertyTree"]:
        """
        View the node at path as a dict of trees.

        A missing path gives an empty dict and a non-mapping node a single
        entry under "name". Scalar values are wrapped as {"name": value}.
        """
        node = resolve(self._root, path)
        if node is None:
            return {}
        if not node.is_mapping:
            return {NAME_KEY: PropertyTree(node)}
        return {key: _project(child) for key, child in node.entries().items()}

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set(self, path: str, value: Any) -> None:
        """
        Write value at path, creating missing intermediate objects.

        Args:
            path: Dotted property path.
            value: Any value accepted by the ValueNode constructor.

        Raises:
            InvalidPathError: If path is empty or has an empty segment.
            StructuralConflictError: If the target is a list or object, or
                an intermediate node is a scalar. The tree is left unchanged.
        """
        segments = require_segments(path)
        new_node = ValueNode(value)

        node = self._root
        for depth, segment in enumerate(segments):
            if node.is_empty:
                node.assign(ValueNode.of_mapping({}))
            elif not node.is_mapping:
                parent = DELIMITER_CHAR.join(segments[:depth]) or "<root>"
                raise StructuralConflictError(path, f"'{parent}' is not an object")

            child = node.lookup(segment)
            if child is None:
                remaining = segments[depth + 1:]
                if remaining:
                    logger.debug(
                        "Creating path '%s' under '%s'",
                        DELIMITER_CHAR.join(remaining),
                        DELIMITER_CHAR.join(segments[:depth + 1]),
                    )
                node.entries()[segment] = _build_chain(remaining, new_node)
                return
            node = child

        if node.is_container:
            raise StructuralConflictError(path, f"the node is a {node.kind.value}, not a simple value")
        node.assign(new_node)

    def merge(self, source: "PropertyTree") -> "PropertyTree":
        """
        Merge source into this tree in place and return self.

        Objects merge key by key, existing values win over conflicting
        ones, and a list receives the whole source node as one new
        element (a source list is nested, not concatenated).
        """
        merge_roots(self._root, source._root.copy())
        return self

    def __ior__(self, source: "PropertyTree") -> "PropertyTree":
        if not isinstance(source, PropertyTree):
            return NotImplemented
        return self.merge(source)

    def __or__(self, source: "PropertyTree") -> "PropertyTree":
        if not isinstance(source, PropertyTree):
            return NotImplemented
        return PropertyTree(self).merge(source)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_python(self) -> Any:
        return self._root.to_python()

    def __str__(self) -> str:
        return str(self._root)

    def __repr__(self) -> str:
        return f"PropertyTree({self._root})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyTree):
            return NotImplemented
        return self._root == other._root

    __hash__ = None  # type: ignore[assignment]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _project(node: ValueNode) -> PropertyTree:
    if node.is_container:
        return PropertyTree(node)
    return PropertyTree({NAME_KEY: node})


def _build_chain(segments: List[str], leaf: ValueNode) -> ValueNode:
    """Nest leaf under single-entry mappings, innermost segment last."""
    node = leaf
    for segment in reversed(segments):
        node = ValueNode.wrap(segment, node)
    return node
