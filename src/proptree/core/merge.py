from __future__ import annotations

"""
Recursive Tree Merge.

Folds a source tree into a destination tree in place. Existing destination
values always win over conflicting source values; sequences absorb the
source node as one trailing element.
"""

import logging

from proptree.domain.constants import DELIMITER_CHAR
from proptree.domain.value_node import NodeKind, ValueNode

logger = logging.getLogger(__name__)


def merge_roots(destination: ValueNode, source: ValueNode) -> None:
    """
    Merge source into destination.

    The source nodes are moved into the destination without copying, so
    callers must pass a tree they no longer use (usually a fresh copy).

    Args:
        destination: Root node mutated in place.
        source: Root node whose content is folded into destination.
    """
    if source.is_empty:
        return

    if destination.is_empty:
        logger.debug("Merge: destination is empty, adopting %s root", source.kind.value)
        destination.assign(source)
        return

    _merge_nodes(destination, source, "")


def _merge_nodes(destination: ValueNode, source: ValueNode, path: str) -> None:
    if destination.is_mapping and source.is_mapping:
        target = destination.entries()
        for key, child in source.entries().items():
            existing = target.get(key)
            if existing is None:
                target[key] = child
            else:
                _merge_nodes(existing, child, _join(path, key))
        return

    if destination.is_sequence:
        # Appended as a single element, never flattened
        destination.elements().append(source)
        return

    if source.kind is not NodeKind.EMPTY:
        logger.debug(
            "Merge: kept %s at '%s', discarded %s",
            destination.kind.value,
            path or "<root>",
            source.kind.value,
        )


def _join(prefix: str, key: str) -> str:
    return f"{prefix}{DELIMITER_CHAR}{key}" if prefix else key
