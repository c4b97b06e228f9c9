from __future__ import annotations

"""
Unit tests for array and object projections.

Verifies:
1. Scalars are wrapped under "name" inside lists and objects.
2. Non-list / non-object nodes become one-element projections.
3. Projected trees are independent copies.
"""

from proptree import PropertyTree


# -----------------------------------------------------------------------------
# as_array
# -----------------------------------------------------------------------------

def test_as_array_missing_path(settings_tree: PropertyTree) -> None:
    assert settings_tree.as_array("nothing.here") == []


def test_as_array_scalar_is_single_element() -> None:
    tree = PropertyTree({"services": "web"})
    items = tree.as_array("services")
    assert len(items) == 1
    assert items[0].value(str) == "web"


def test_as_array_mixed_sequence(settings_tree: PropertyTree) -> None:
    web, db, pair = settings_tree.as_array("services")

    assert web.get("name", str) == "web"
    assert db.get("name", str) == "db"
    assert db.get("port", int) == 5432
    assert pair.to_python() == ["a", "b"]


def test_as_array_object_is_single_element(settings_tree: PropertyTree) -> None:
    (http,) = settings_tree.as_array("server.http")
    assert http.get("port", int) == 8080


def test_as_array_empty_sequence(settings_tree: PropertyTree) -> None:
    assert settings_tree.as_array("tags") == []


def test_as_array_items_are_copies(settings_tree: PropertyTree) -> None:
    db = settings_tree.as_array("services")[1]
    db.set("port", 1)
    assert settings_tree.get("services", list)[1].lookup("port").as_type(int) == 5432


# -----------------------------------------------------------------------------
# as_object
# -----------------------------------------------------------------------------

def test_as_object_missing_path(settings_tree: PropertyTree) -> None:
    assert settings_tree.as_object("server.nothing") == {}


def test_as_object_scalar_is_wrapped_under_name(settings_tree: PropertyTree) -> None:
    assert settings_tree.as_object("timeout") == {"name": PropertyTree(30)}


def test_as_object_sequence_is_wrapped_under_name(settings_tree: PropertyTree) -> None:
    projected = settings_tree.as_object("services")
    assert list(projected) == ["name"]
    assert projected["name"].length() == 3


def test_as_object_mapping(settings_tree: PropertyTree) -> None:
    projected = settings_tree.as_object("server")

    assert set(projected) == {"http", "tls"}
    assert projected["http"].get("host", str) == "0.0.0.0"
    assert projected["tls"].to_python() == {"name": None}


def test_as_object_scalar_entries(settings_tree: PropertyTree) -> None:
    app = settings_tree.as_object("app")
    assert app["workers"] == PropertyTree({"name": 4})
    assert app["name"].get("name", str) == "gateway"


def test_as_object_values_are_copies(settings_tree: PropertyTree) -> None:
    http = settings_tree.as_object("server")["http"]
    http.set("host", "127.0.0.1")
    assert settings_tree.get("server.http.host", str) == "0.0.0.0"
