from __future__ import annotations

from .merge import merge_roots
from .paths import require_segments, resolve, split_path
from .tree import PropertyTree

__all__ = [
    "PropertyTree",
    "merge_roots",
    "require_segments",
    "resolve",
    "split_path",
]
