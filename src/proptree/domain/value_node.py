from __future__ import annotations

"""
Value Node Data Model.

Defines the closed tagged union that stores one configuration value or
container. Every node holds exactly one variant of NodeKind; containers
own their children and copies are always deep, so two nodes never share
a nested list or dict.
"""

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from proptree.domain.constants import INT32_RANGE, INT64_RANGE
from proptree.domain.errors import TypeMismatchError


# -----------------------------------------------------------------------------
# VARIANT TAGS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Active variant of a ValueNode."""
    BOOL = "bool"
    INT = "int"
    LONG = "long"
    DOUBLE = "double"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    EMPTY = "empty"


_CONTAINER_KINDS: FrozenSet[NodeKind] = frozenset({NodeKind.SEQUENCE, NodeKind.MAPPING})
_INTEGER_KINDS: FrozenSet[NodeKind] = frozenset({NodeKind.INT, NodeKind.LONG})

# Python target type -> variants it can be extracted from
_EXTRACTABLE: Dict[type, FrozenSet[NodeKind]] = {
    bool: frozenset({NodeKind.BOOL}),
    int: _INTEGER_KINDS,
    float: frozenset({NodeKind.DOUBLE}),
    str: frozenset({NodeKind.TEXT}),
    list: frozenset({NodeKind.SEQUENCE}),
    dict: frozenset({NodeKind.MAPPING}),
}


# -----------------------------------------------------------------------------
# NODE
# -----------------------------------------------------------------------------

class ValueNode:
    """
    Tagged union over bool, int (narrow or wide), float, str, list, dict and empty.

    The constructor accepts native Python values (nested lists, tuples and
    string-keyed mappings included) or another ValueNode, which is deep-copied.
    """

    __slots__ = ("_kind", "_value")

    def __init__(self, value: Any = None) -> None:
        self._kind, self._value = _convert(value)

    # -------------------------------------------------------------------------
    # Typed constructors
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "ValueNode":
        return cls._make(NodeKind.EMPTY, None)

    @classmethod
    def of_bool(cls, value: bool) -> "ValueNode":
        return cls._make(NodeKind.BOOL, bool(value))

    @classmethod
    def of_int(cls, value: int) -> "ValueNode":
        """Build an INT node, or a LONG node when the value exceeds 32 bits."""
        return cls._make(*_integer_variant(int(value)))

    @classmethod
    def of_long(cls, value: int) -> "ValueNode":
        _, number = _integer_variant(int(value))
        return cls._make(NodeKind.LONG, number)

    @classmethod
    def of_double(cls, value: float) -> "ValueNode":
        return cls._make(NodeKind.DOUBLE, float(value))

    @classmethod
    def of_text(cls, value: str) -> "ValueNode":
        return cls._make(NodeKind.TEXT, str(value))

    @classmethod
    def of_sequence(cls, items: Iterable[Any]) -> "ValueNode":
        return cls._make(NodeKind.SEQUENCE, [cls(item) for item in items])

    @classmethod
    def of_mapping(cls, entries: Mapping) -> "ValueNode":
        return cls._make(NodeKind.MAPPING, _convert_mapping(entries))

    @classmethod
    def from_python(cls, value: Any) -> "ValueNode":
        """Convert a native value, deep-copying any ValueNode found inside it."""
        return cls(value)

    @classmethod
    def wrap(cls, key: str, child: "ValueNode") -> "ValueNode":
        """
        Build a single-entry mapping that takes ownership of child.

        Unlike of_mapping, child is stored as is, not copied.
        """
        return cls._make(NodeKind.MAPPING, {key: child})

    @classmethod
    def _make(cls, kind: NodeKind, payload: Any) -> "ValueNode":
        node = cls.__new__(cls)
        node._kind = kind
        node._value = payload
        return node

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def is_empty(self) -> bool:
        return self._kind is NodeKind.EMPTY

    @property
    def has_value(self) -> bool:
        return self._kind is not NodeKind.EMPTY

    @property
    def is_sequence(self) -> bool:
        return self._kind is NodeKind.SEQUENCE

    @property
    def is_mapping(self) -> bool:
        return self._kind is NodeKind.MAPPING

    @property
    def is_container(self) -> bool:
        return self._kind in _CONTAINER_KINDS

    # -------------------------------------------------------------------------
    # Navigation (live references)
    # -------------------------------------------------------------------------

    def lookup(self, key: str) -> Optional["ValueNode"]:
        """
        Return the child stored under key, or None.

        The returned node is the live child, not a copy. Non-mapping nodes
        have no children and always return None.
        """
        if self._kind is not NodeKind.MAPPING:
            return None
        return self._value.get(key)

    def elements(self) -> List["ValueNode"]:
        """Live element list of a SEQUENCE node."""
        if self._kind is not NodeKind.SEQUENCE:
            raise TypeMismatchError("list", self._kind)
        return self._value

    def entries(self) -> Dict[str, "ValueNode"]:
        """Live entry dict of a MAPPING node."""
        if self._kind is not NodeKind.MAPPING:
            raise TypeMismatchError("dict", self._kind)
        return self._value

    def length(self) -> int:
        """Element count of a sequence, entry count of a mapping, else 0."""
        if self._kind in _CONTAINER_KINDS:
            return len(self._value)
        return 0

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def assign(self, other: "ValueNode") -> None:
        """Replace this node's content with other's, taking ownership of it."""
        self._kind = other._kind
        self._value = other._value

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def as_type(self, expected: type, path: Optional[str] = None) -> Any:
        """
        Extract the node's value as the requested Python type.

        Args:
            expected: bool, int, float, str, list, dict or ValueNode.
            path: Dotted path used in error messages.

        Returns:
            Any: The scalar value, or deep copies of the children for
            list and dict, or a deep copy of the node for ValueNode.

        Raises:
            TypeMismatchError: If the active variant does not match.
        """
        if expected is ValueNode:
            return self.copy()

        accepted = _EXTRACTABLE.get(expected)
        if accepted is None:
            detail = "unsupported target type"
            if expected is type(None):
                detail = "None cannot be used as a typed default, use get() instead"
            raise TypeMismatchError(
                getattr(expected, "__name__", repr(expected)),
                self._kind,
                path,
                detail,
            )
        if self._kind not in accepted:
            raise TypeMismatchError(expected.__name__, self._kind, path)

        if self._kind is NodeKind.SEQUENCE:
            return [child.copy() for child in self._value]
        if self._kind is NodeKind.MAPPING:
            return {key: child.copy() for key, child in self._value.items()}
        return self._value

    # -------------------------------------------------------------------------
    # Conversion & rendering
    # -------------------------------------------------------------------------

    def copy(self) -> "ValueNode":
        return ValueNode._make(self._kind, _copy_payload(self._kind, self._value))

    def to_python(self) -> Any:
        """Convert to plain lists, dicts and scalars (EMPTY becomes None)."""
        if self._kind is NodeKind.SEQUENCE:
            return [child.to_python() for child in self._value]
        if self._kind is NodeKind.MAPPING:
            return {key: child.to_python() for key, child in self._value.items()}
        return self._value

    def __str__(self) -> str:
        return json.dumps(self.to_python(), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"ValueNode({self._kind.value}, {self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueNode):
            return NotImplemented
        if self._kind in _INTEGER_KINDS and other._kind in _INTEGER_KINDS:
            return self._value == other._value
        return self._kind is other._kind and self._value == other._value

    __hash__ = None  # type: ignore[assignment]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _convert(value: Any) -> Tuple[NodeKind, Any]:
    """Map a Python value to a (kind, payload) pair, copying containers."""
    if value is None:
        return NodeKind.EMPTY, None
    if isinstance(value, ValueNode):
        return value._kind, _copy_payload(value._kind, value._value)
    # bool must be tested before int
    if isinstance(value, bool):
        return NodeKind.BOOL, value
    if isinstance(value, int):
        return _integer_variant(value)
    if isinstance(value, float):
        return NodeKind.DOUBLE, value
    if isinstance(value, str):
        return NodeKind.TEXT, value
    if isinstance(value, Mapping):
        return NodeKind.MAPPING, _convert_mapping(value)
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE, [ValueNode(item) for item in value]

    raise TypeMismatchError("ValueNode", None, detail=f"type '{type(value).__name__}' is not supported")


def _convert_mapping(entries: Mapping) -> Dict[str, ValueNode]:
    converted: Dict[str, ValueNode] = {}
    for key, item in entries.items():
        if not isinstance(key, str):
            raise TypeMismatchError(
                "ValueNode", None, detail=f"mapping key {key!r} is not a string"
            )
        converted[key] = ValueNode(item)
    return converted


def _integer_variant(value: int) -> Tuple[NodeKind, int]:
    if INT32_RANGE[0] <= value <= INT32_RANGE[1]:
        return NodeKind.INT, value
    if INT64_RANGE[0] <= value <= INT64_RANGE[1]:
        return NodeKind.LONG, value
    raise TypeMismatchError("ValueNode", None, detail=f"integer {value} exceeds 64 bits")


def _copy_payload(kind: NodeKind, payload: Any) -> Any:
    if kind is NodeKind.SEQUENCE:
        return [child.copy() for child in payload]
    if kind is NodeKind.MAPPING:
        return {key: child.copy() for key, child in payload.items()}
    return payload
