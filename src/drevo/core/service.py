"""
Mutation orchestration for the person store.

Every write goes through ``GenealogyService``: the in-memory store is updated
first, then the change is handed to a ``DurableMirror``. A mirror failure is
logged with its traceback and the in-memory change stays in place; the next
successful write of the same record brings the durable copy back in line.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol

from drevo.codecs.csv_codec import parse_persons_csv_string
from drevo.core.exceptions import ImportRejectedError, MirrorError
from drevo.logging import get_logger
from drevo.models import CsvParseResult, Person
from drevo.store import PersonStore

log = get_logger("service")


# -----------------------------
# Durable mirror protocol
# -----------------------------

class DurableMirror(Protocol):
    """Write-behind target for store mutations. Implementations raise ``MirrorError``."""

    def upsert_person(self, person: Person) -> None: ...

    def delete_person(self, person_id: int) -> None: ...

    def add_spouse(self, person_id: int, spouse_id: int) -> None: ...

    def remove_spouse(self, person_id: int, spouse_id: int) -> None: ...

    def add_child(self, parent_id: int, child_id: int) -> None: ...

    def remove_child(self, parent_id: int, child_id: int) -> None: ...

    def save_favorites(self, slots: List[int]) -> None: ...

    def replace_population(self, persons: Mapping[int, Person]) -> None: ...


class NullMirror:
    """Mirror that persists nothing (memory-only operation)."""

    def upsert_person(self, person: Person) -> None:
        pass

    def delete_person(self, person_id: int) -> None:
        pass

    def add_spouse(self, person_id: int, spouse_id: int) -> None:
        pass

    def remove_spouse(self, person_id: int, spouse_id: int) -> None:
        pass

    def add_child(self, parent_id: int, child_id: int) -> None:
        pass

    def remove_child(self, parent_id: int, child_id: int) -> None:
        pass

    def save_favorites(self, slots: List[int]) -> None:
        pass

    def replace_population(self, persons: Mapping[int, Person]) -> None:
        pass


# -----------------------------
# Service
# -----------------------------

class GenealogyService:
    def __init__(self, store: PersonStore, mirror: Optional[DurableMirror] = None) -> None:
        self.store = store
        self.mirror: DurableMirror = mirror or NullMirror()

    def _mirror(self, operation: str, *args: Any) -> bool:
        try:
            getattr(self.mirror, operation)(*args)
        except MirrorError:
            log.exception("Mirror %s%r failed; in-memory change kept", operation, args)
            return False
        return True

    # ---- persons ----

    def create_person(self, **fields: Any) -> Person:
        """Insert a new record under the next free id and attach it to its parents."""
        checked = self.store.check_fields(fields)

        with self.store.write():
            person = Person(id=self.store.get_next_id(), **checked)
            person.spouse_ids = []
            person.children_ids = []
            self.store.add_person(person)
            if person.father_id:
                self.store.add_child_relation(person.father_id, person.id)
            if person.mother_id:
                self.store.add_child_relation(person.mother_id, person.id)

        log.info("Created person %d (%s)", person.id, person.full_name)
        self._mirror("upsert_person", person)
        return person

    def update_person(self, person_id: int, **fields: Any) -> Optional[Person]:
        """
        Change scalar fields. A changed ``father_id``/``mother_id`` moves the
        person between parents' ``children_ids`` as well.

        The update is checked in full before anything changes: a rejected
        update raises ``ValueError`` and leaves the store as it was.
        """
        checked = self.store.check_fields(fields)

        with self.store.write():
            existing = self.store.get_person(person_id)
            if existing is None:
                return None

            father_id = checked.pop("father_id", existing.father_id) or 0
            mother_id = checked.pop("mother_id", existing.mother_id) or 0
            if (father_id, mother_id) != (existing.father_id, existing.mother_id):
                self.store.set_parents(person_id, father_id, mother_id)

            updated = self.store.update_person(person_id, **checked)

        log.info("Updated person %d", person_id)
        self._mirror("upsert_person", updated)
        return updated

    def delete_person(self, person_id: int) -> bool:
        if not self.store.remove_person(person_id):
            return False
        log.info("Deleted person %d", person_id)
        self._mirror("delete_person", person_id)
        return True

    # ---- relations ----

    def add_spouse(self, person_id: int, spouse_id: int) -> None:
        self.store.add_spouse_relation(person_id, spouse_id)
        self._mirror("add_spouse", person_id, spouse_id)

    def remove_spouse(self, person_id: int, spouse_id: int) -> None:
        self.store.remove_spouse_relation(person_id, spouse_id)
        self._mirror("remove_spouse", person_id, spouse_id)

    def add_child(self, parent_id: int, child_id: int) -> None:
        self.store.add_child_relation(parent_id, child_id)
        self._mirror("add_child", parent_id, child_id)

    def remove_child(self, parent_id: int, child_id: int) -> None:
        self.store.remove_child_relation(parent_id, child_id)
        self._mirror("remove_child", parent_id, child_id)

    def set_parents(self, child_id: int, father_id: int, mother_id: int) -> Optional[Person]:
        self.store.set_parents(child_id, father_id, mother_id)
        person = self.store.get_person(child_id)
        if person is not None:
            self._mirror("upsert_person", person)
        return person

    # ---- favorites ----

    def add_favorite(self, person_id: int) -> int:
        slot = self.store.add_favorite(person_id)
        if slot >= 0:
            self._mirror("save_favorites", self.store.get_favorites())
        return slot

    def remove_favorite(self, person_id: int) -> int:
        slot = self.store.remove_favorite(person_id)
        if slot >= 0:
            self._mirror("save_favorites", self.store.get_favorites())
        return slot

    # ---- bulk ----

    def import_csv(self, content: str) -> CsvParseResult:
        """Replace the whole population with the rows of ``content``. Favorites are cleared."""
        result = parse_persons_csv_string(content)
        if not result.persons:
            raise ImportRejectedError("CSV is empty or has no valid person rows")

        self.store.replace_population(result.persons, favorites=[])
        log.info("Imported %d person(s), %d row(s) skipped", len(result.persons), result.skipped)
        self._mirror("replace_population", dict(result.persons))
        return result

    def summary(self) -> Dict[str, int]:
        return {
            "persons": self.store.get_person_count(),
            "favorites": sum(1 for slot in self.store.get_favorites() if slot),
        }
