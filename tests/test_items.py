import json

import pytest

from penguinroom.items import ItemCatalog, load_items


@pytest.fixture
def catalog(tmp_path):
    data = {
        "1": {"type": 2, "cost": 50, "bait": True, "patched": False},
        "7": {"type": 5, "cost": 120.0, "patched": True},
        "9": {"type": "hat", "cost": "cheap", "bait": "yes"},
        "5": 3,
    }
    path = tmp_path / "items.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return load_items(path)


def test_known_item_fields(catalog):
    assert catalog.exists(1)
    assert catalog.item_type(1) == 2
    assert catalog.cost(1) == 50
    assert catalog.is_bait(1) is True
    assert catalog.is_patched(1) is False


def test_integral_float_cost(catalog):
    assert catalog.cost(7) == 120
    assert catalog.is_patched(7) is True
    assert catalog.is_bait(7) is False


def test_unknown_item(catalog):
    assert not catalog.exists(2)
    assert catalog.item_type(2) == -1
    assert catalog.cost(2) == -1
    assert catalog.is_bait(2) is False
    assert catalog.is_patched(2) is False


def test_entry_that_is_not_an_object(catalog):
    assert catalog.exists(5)
    assert catalog.cost(5) == -1
    assert catalog.item_type(5) == -1


def test_non_numeric_fields_read_as_zero(catalog):
    assert catalog.item_type(9) == 0
    assert catalog.cost(9) == 0
    assert catalog.is_bait(9) is False


def test_contains_and_len(catalog):
    assert 1 in catalog
    assert 3 not in catalog
    assert len(catalog) == 4


def test_missing_file_gives_empty_catalog(tmp_path):
    empty = load_items(tmp_path / "absent.json")
    assert len(empty) == 0
    assert empty.cost(1) == -1


def test_invalid_json_gives_empty_catalog(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    assert len(load_items(path)) == 0


def test_top_level_array_gives_empty_catalog(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert not load_items(path).exists(0)


def test_catalog_from_mapping():
    built = ItemCatalog({"42": {"type": 3, "cost": 10}})
    assert built.item_type(42) == 3
    assert built.cost(42) == 10