from __future__ import annotations

from .errors import (
    InvalidPathError,
    PropertyTreeError,
    StructuralConflictError,
    TypeMismatchError,
)
from .value_node import NodeKind, ValueNode

__all__ = [
    "InvalidPathError",
    "NodeKind",
    "PropertyTreeError",
    "StructuralConflictError",
    "TypeMismatchError",
    "ValueNode",
]
