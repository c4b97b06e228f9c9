from __future__ import annotations

"""
proptree: typed, dotted-path access to hierarchical configuration values.
"""

import logging

from proptree.core.tree import PropertyTree
from proptree.domain.errors import (
    InvalidPathError,
    PropertyTreeError,
    StructuralConflictError,
    TypeMismatchError,
)
from proptree.domain.value_node import NodeKind, ValueNode

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidPathError",
    "NodeKind",
    "PropertyTree",
    "PropertyTreeError",
    "StructuralConflictError",
    "TypeMismatchError",
    "ValueNode",
]
