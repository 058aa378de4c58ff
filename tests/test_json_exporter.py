# tests/test_json_exporter.py

from __future__ import annotations

import json

from drevo.exporter import dumps, to_json_compatible
from drevo.tree import get_ancestor_tree


def test_dataclasses_and_enums_become_plain_data(memory_store):
    data = to_json_compatible(memory_store.brief_of(3))
    assert data["sex"] == 1
    assert data["first_name"] == "Петр"
    assert data["photo"] == "3#1.jpg"


def test_nested_tree(memory_store):
    data = json.loads(dumps(get_ancestor_tree(memory_store, 5)))
    assert [child["id"] for child in data["children"]] == [3, 4]


def test_cyrillic_kept_readable(memory_store):
    assert "Иван" in dumps(memory_store.brief_of(1))
