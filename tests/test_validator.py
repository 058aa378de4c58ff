# tests/test_validator.py

from __future__ import annotations

from drevo.models import Person
from drevo.store import PersonStore, PhotoIndex
from drevo.validation import validate


def test_clean_family_only_misses_photos(memory_store):
    result = validate(memory_store)

    assert result.counts == {"no_photo": 3}
    assert sorted(i.person_id for i in result.issues) == [2, 4, 5]
    assert result.issues[0].message == "Нет фотографий"


def test_every_issue_type():
    store = PersonStore(
        [
            Person(id=1, first_name=" ", last_name=""),
            Person(id=2, first_name="?", last_name="Иванов", spouse_ids=[3, 50], children_ids=[4, 60]),
            Person(id=3, first_name="Мария", spouse_ids=[]),
            Person(id=4, first_name="Петр"),
        ],
        photos=PhotoIndex.from_filenames(["1#1.jpg", "2#1.jpg", "3#1.jpg", "4#1.jpg"]),
    )
    result = validate(store)
    found = {(i.type, i.person_id, i.message) for i in result.issues}

    assert ("empty_name", 1, "Пустое имя и фамилия") in found
    assert ("unknown_person", 2, "Содержит '?' в имени") in found
    assert ("missing_reciprocal_spouse", 2, "Супруг 3 не ссылается обратно") in found
    assert ("orphan_spouse", 2, "Супруг 50 не найден") in found
    assert ("missing_reciprocal_parent", 2, "Ребёнок 4 не указывает родителем") in found
    assert ("orphan_child", 2, "Ребёнок 60 не найден") in found
    assert ("isolated", 1, "Нет связей ни с кем") in found
    assert ("isolated", 3, "Нет связей ни с кем") in found
    assert ("isolated", 4, "Нет связей ни с кем") in found
    assert result.counts["isolated"] == 3
    assert "no_photo" not in result.counts


def test_validation_does_not_modify_store(memory_store, family_csv):
    validate(memory_store)
    assert memory_store.export_to_csv() == family_csv
