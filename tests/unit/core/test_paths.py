from __future__ import annotations

"""
Unit tests for dotted path handling.

Verifies:
1. Segment splitting and rejection of malformed paths.
2. Resolution through mappings only.
"""

import pytest

from proptree.core.paths import require_segments, resolve, split_path
from proptree.domain.errors import InvalidPathError
from proptree.domain.value_node import ValueNode


def test_split_path_segments() -> None:
    assert split_path("a") == ["a"]
    assert split_path("server.http.port") == ["server", "http", "port"]


@pytest.mark.parametrize("path", ["", ".", "a.", ".a", "a..b"])
def test_malformed_paths(path: str) -> None:
    assert split_path(path) is None
    with pytest.raises(InvalidPathError):
        require_segments(path)


def test_non_string_path_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        split_path(None)  # type: ignore[arg-type]


def test_resolve_returns_live_node() -> None:
    root = ValueNode({"a": {"b": 1}})
    node = resolve(root, "a.b")
    assert node is root.lookup("a").lookup("b")


def test_resolve_missing_and_malformed() -> None:
    root = ValueNode({"a": {"b": 1}, "list": [{"x": 1}]})
    assert resolve(root, "a.c") is None
    assert resolve(root, "a.b.c") is None
    assert resolve(root, "") is None
    assert resolve(root, "list.0") is None
    assert resolve(root, "list.x") is None


def test_resolve_on_scalar_root() -> None:
    assert resolve(ValueNode(3), "a") is None
