"""Tests for the get-or-create identifier registry."""

from toornament_sync.services.id_registry import IdRegistry


def test_first_id_is_zero():
    registry = IdRegistry()
    assert registry.get("abc") == 0


def test_ids_are_contiguous_in_first_seen_order():
    registry = IdRegistry()
    external_ids = ["618965416", "z", "a", "m", "x-1"]

    assigned = [registry.get(eid) for eid in external_ids]

    assert assigned == [0, 1, 2, 3, 4]
    assert len(registry) == 5


def test_requery_returns_same_id():
    registry = IdRegistry()
    first = registry("p1")
    registry("p2")
    registry("p3")

    assert registry("p1") == first
    assert registry("p1") == first
    assert len(registry) == 3


def test_call_and_get_share_key_space():
    registry = IdRegistry()
    assert registry("a") == 0
    assert registry.get("a") == 0
    assert registry.get("b") == 1
    assert registry("b") == 1


def test_mapping_snapshot():
    registry = IdRegistry()
    registry("b")
    registry("a")
    registry("b")

    assert registry.mapping() == {"b": 0, "a": 1}
    assert list(registry.mapping()) == ["b", "a"]


def test_mapping_snapshot_is_a_copy():
    registry = IdRegistry()
    registry("a")

    snapshot = registry.mapping()
    snapshot["a"] = 42
    snapshot["b"] = 7

    assert registry.mapping() == {"a": 0}
    # Unaffected by edits to the snapshot
    assert registry("b") == 1


def test_registries_do_not_share_key_space():
    stages = IdRegistry()
    matches = IdRegistry()

    assert stages("same") == 0
    assert matches("other") == 0
    assert matches("same") == 1
    assert stages("same") == 0


def test_empty_registry():
    registry = IdRegistry()
    assert registry.mapping() == {}
    assert len(registry) == 0
