# tests/test_service.py

from __future__ import annotations

import pytest

from drevo.core.exceptions import ImportRejectedError, MirrorError
from drevo.core.service import GenealogyService, NullMirror


class RecordingMirror(NullMirror):
    def __init__(self):
        self.calls = []

    def upsert_person(self, person):
        self.calls.append(("upsert_person", person.id))

    def delete_person(self, person_id):
        self.calls.append(("delete_person", person_id))

    def add_spouse(self, person_id, spouse_id):
        self.calls.append(("add_spouse", person_id, spouse_id))

    def save_favorites(self, slots):
        self.calls.append(("save_favorites", list(slots)))

    def replace_population(self, persons):
        self.calls.append(("replace_population", sorted(persons)))


class FailingMirror(NullMirror):
    def upsert_person(self, person):
        raise MirrorError("database is down")


def test_create_person_links_to_parents(store):
    mirror = RecordingMirror()
    service = GenealogyService(store, mirror)

    person = service.create_person(first_name="Ольга", last_name="Иванова", sex=0, father_id=3, mother_id=4)

    assert person.id == 6
    assert store.get_person(6) is person
    assert 6 in store.get_person(3).children_ids
    assert 6 in store.get_person(4).children_ids
    assert mirror.calls == [("upsert_person", 6)]


def test_create_person_rejects_unknown_fields(store):
    with pytest.raises(ValueError):
        GenealogyService(store).create_person(first_name="Ольга", nickname="Оля")


def test_update_person_relinks_changed_parent(store):
    service = GenealogyService(store)
    updated = service.update_person(5, father_id=1, first_name="Алёша")

    assert updated.first_name == "Алёша"
    assert (updated.father_id, updated.mother_id) == (1, 4)
    assert 5 not in store.get_person(3).children_ids
    assert 5 in store.get_person(1).children_ids
    assert 5 in store.get_person(4).children_ids


def test_rejected_update_keeps_parents_and_skips_mirror(store):
    mirror = RecordingMirror()
    service = GenealogyService(store, mirror)

    with pytest.raises(ValueError):
        service.update_person(5, father_id=1, bogus="x")
    with pytest.raises(ValueError):
        service.update_person(5, mother_id=2, sex=7)

    person = store.get_person(5)
    assert (person.father_id, person.mother_id) == (3, 4)
    assert 5 in store.get_person(3).children_ids
    assert 5 not in store.get_person(1).children_ids
    assert 5 not in store.get_person(2).children_ids
    assert mirror.calls == []


def test_update_unknown_person(store):
    assert GenealogyService(store).update_person(999, first_name="x") is None


def test_delete_person(store):
    mirror = RecordingMirror()
    service = GenealogyService(store, mirror)

    assert service.delete_person(4)
    assert not service.delete_person(4)
    assert mirror.calls == [("delete_person", 4)]


def test_relations_and_favorites_are_mirrored(store):
    mirror = RecordingMirror()
    service = GenealogyService(store, mirror)

    service.add_spouse(5, 2)
    assert service.add_favorite(3) == 1
    assert service.remove_favorite(999) == -1

    assert mirror.calls == [
        ("add_spouse", 5, 2),
        ("save_favorites", [5, 3, 1]),
    ]


def test_set_parents_through_service(store):
    service = GenealogyService(store)
    person = service.set_parents(5, 0, 2)
    assert (person.father_id, person.mother_id) == (0, 2)
    assert 5 in store.get_person(2).children_ids
    assert service.set_parents(999, 1, 2) is None


def test_child_relations(store):
    service = GenealogyService(store)
    service.add_child(2, 5)
    assert 5 in store.get_person(2).children_ids
    service.remove_child(2, 5)
    assert 5 not in store.get_person(2).children_ids
    service.remove_spouse(1, 2)
    assert store.get_person(1).spouse_ids == []


def test_mirror_failure_keeps_memory_change(store):
    service = GenealogyService(store, FailingMirror())
    person = service.create_person(first_name="Ольга")
    assert store.get_person(person.id) is person


def test_import_csv_replaces_population(store):
    mirror = RecordingMirror()
    service = GenealogyService(store, mirror)

    result = service.import_csv("7;1;Новый;Человек;;;;;;;;;;;;;\nмусор")

    assert result.skipped == 1
    assert store.get_person_count() == 1
    assert store.get_favorites() == []
    assert mirror.calls == [("replace_population", [7])]
    assert service.summary() == {"persons": 1, "favorites": 0}


def test_import_of_nothing_is_rejected(store):
    service = GenealogyService(store)
    with pytest.raises(ImportRejectedError):
        service.import_csv("не csv вовсе")
    assert store.get_person_count() == 5
