# src/drevo/store/graph_store.py

from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from drevo.codecs.csv_codec import (
    export_to_csv,
    parse_favorites_csv,
    parse_persons_csv,
)
from drevo.codecs.gedcom_writer import export_to_gedcom
from drevo.config import DEFAULT_FAVORITES_CAPACITY, DEFAULT_TREE_MAX_DEPTH, DrevoConfig
from drevo.dates import calculate_age, get_zodiac
from drevo.logging import get_logger
from drevo.models import PERSON_FIELDS, Person, PersonBrief, PersonCard, Sex

from .bio import BioDirectory
from .locking import ReadWriteLock
from .photos import PhotoIndex

log = get_logger("graph_store")


class PersonStore:
    """
    In-memory person graph: an id-keyed map plus favorites and photo indexes.

    Relations are plain ids and may dangle or form cycles; nothing here
    assumes a DAG. Every public read holds the shared side of ``lock`` and
    every mutation the exclusive side, so a mutation is never observed half
    applied. Mirroring changes to durable storage is the caller's job (see
    ``drevo.core.service``).
    """

    def __init__(
        self,
        persons: Union[Mapping[int, Person], Iterable[Person], None] = None,
        favorites: Optional[List[int]] = None,
        photos: Optional[PhotoIndex] = None,
        bio: Optional[BioDirectory] = None,
        favorites_capacity: int = DEFAULT_FAVORITES_CAPACITY,
        tree_max_depth: int = DEFAULT_TREE_MAX_DEPTH,
    ) -> None:
        self.lock = ReadWriteLock()
        self._persons: Dict[int, Person] = self._as_map(persons)
        self.favorites_capacity = favorites_capacity
        self._favorites: List[int] = list(favorites or [])[:favorites_capacity]
        self.photos = photos or PhotoIndex()
        self.bio = bio or BioDirectory(None)
        self.tree_max_depth = tree_max_depth

    @staticmethod
    def _as_map(persons: Union[Mapping[int, Person], Iterable[Person], None]) -> Dict[int, Person]:
        if persons is None:
            return {}
        if isinstance(persons, Mapping):
            return dict(persons)
        return {p.id: p for p in persons}

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    @classmethod
    def from_csv(
        cls,
        csv_path: Union[str, Path],
        favorites_path: Union[str, Path, None] = None,
        media_path: Union[str, Path, None] = None,
        info_path: Union[str, Path, None] = None,
        **kwargs: Any,
    ) -> "PersonStore":
        """Bootstrap a store from the population CSV and its side directories."""
        parsed = parse_persons_csv(csv_path)
        favorites = parse_favorites_csv(favorites_path) if favorites_path else []
        return cls(
            persons=parsed.persons,
            favorites=favorites,
            photos=PhotoIndex.scan(media_path),
            bio=BioDirectory(info_path),
            **kwargs,
        )

    @classmethod
    def from_config(cls, config: DrevoConfig) -> "PersonStore":
        csv_path = config.resolve_path("data_csv")
        if csv_path is None:
            raise ValueError("config paths.data_csv is not set")
        return cls.from_csv(
            csv_path,
            favorites_path=config.resolve_path("favorites_csv"),
            media_path=config.resolve_path("media_dir"),
            info_path=config.resolve_path("info_dir"),
            favorites_capacity=config.favorites_capacity,
            tree_max_depth=config.tree_max_depth,
        )

    # ------------------------------------------------------------------ #
    # Locking helpers
    # ------------------------------------------------------------------ #

    @contextmanager
    def read(self) -> Iterator[Mapping[int, Person]]:
        """Hold the shared lock and expose a read-only view of the person map."""
        with self.lock.read_locked():
            yield MappingProxyType(self._persons)

    @contextmanager
    def write(self) -> Iterator[None]:
        with self.lock.write_locked():
            yield

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #

    def get_person(self, person_id: int) -> Optional[Person]:
        if not person_id:
            return None
        with self.lock.read_locked():
            return self._persons.get(person_id)

    def __contains__(self, person_id: object) -> bool:
        with self.lock.read_locked():
            return bool(person_id) and person_id in self._persons

    def __len__(self) -> int:
        return self.get_person_count()

    def get_person_count(self) -> int:
        with self.lock.read_locked():
            return len(self._persons)

    def iter_persons(self) -> List[Person]:
        """Snapshot of all records in map order."""
        with self.lock.read_locked():
            return list(self._persons.values())

    def get_next_id(self) -> int:
        with self.lock.read_locked():
            return max(self._persons, default=0) + 1

    # ------------------------------------------------------------------ #
    # Projections
    # ------------------------------------------------------------------ #

    def get_photos(self, person_id: int) -> List[str]:
        with self.lock.read_locked():
            return self.photos.get(person_id)

    def get_default_photo(self, person: Person) -> str:
        with self.lock.read_locked():
            return self.photos.default_photo(person.id, person.sex)

    def to_brief(self, person: Person, today: Optional[date] = None) -> PersonBrief:
        return PersonBrief(
            id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
            sex=person.sex,
            birth_day=person.birth_day,
            death_day=person.death_day,
            photo=self.get_default_photo(person),
            child_count=len(person.children_ids),
            age=calculate_age(person.birth_day, person.death_day, today),
        )

    def brief_of(self, person_id: int) -> Optional[PersonBrief]:
        person = self.get_person(person_id)
        return self.to_brief(person) if person else None

    def get_person_card(self, person_id: int) -> Optional[PersonCard]:
        with self.lock.read_locked():
            person = self._persons.get(person_id)
            if person is None:
                return None

            def briefs(ids: Iterable[int]) -> List[PersonBrief]:
                return [self.to_brief(self._persons[i]) for i in ids if i in self._persons]

            father = self._persons.get(person.father_id) if person.father_id else None
            mother = self._persons.get(person.mother_id) if person.mother_id else None
            photos = self.get_photos(person.id)
            zodiac = get_zodiac(person.birth_day)

            return PersonCard(
                person=person,
                father=self.to_brief(father) if father else None,
                mother=self.to_brief(mother) if mother else None,
                spouses=briefs(person.spouse_ids),
                children=briefs(person.children_ids),
                photos=photos or [self.get_default_photo(person)],
                age=calculate_age(person.birth_day, person.death_day),
                zodiac=str(zodiac) if zodiac else "",
                has_bio=self.bio.has(person.id, "open"),
                has_locked_bio=self.bio.has(person.id, "lock"),
            )

    def get_all_persons(self) -> List[PersonBrief]:
        with self.lock.read_locked():
            return [self.to_brief(p) for p in sorted(self._persons.values(), key=lambda p: p.id)]

    def get_persons_page(self, page: int = 1, limit: int = 50) -> Tuple[List[PersonBrief], int]:
        """One page of id-ordered briefs plus the total count. Pages start at 1."""
        page = max(page, 1)
        limit = max(limit, 1)
        everyone = self.get_all_persons()
        start = (page - 1) * limit
        return everyone[start:start + limit], len(everyone)

    def get_bio(self, person_id: int, kind: str = "open") -> Optional[str]:
        return self.bio.read(person_id, kind)

    # ------------------------------------------------------------------ #
    # Person mutations
    # ------------------------------------------------------------------ #

    def add_person(self, person: Person) -> None:
        """Insert (or overwrite) a record. Callers assign ids via ``get_next_id``."""
        with self.lock.write_locked():
            self._persons[person.id] = person
        log.debug("Added person %d", person.id)

    @staticmethod
    def check_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate an update and return it with values converted.

        Raises ``ValueError`` for unknown field names or a ``sex`` that is not
        0 or 1. Nothing is changed when it raises.
        """
        unknown = set(fields) - PERSON_FIELDS
        if unknown:
            raise ValueError(f"Unknown person field(s): {sorted(unknown)}")

        checked = dict(fields)
        if "sex" in checked:
            checked["sex"] = Sex(checked["sex"])
        return checked

    def update_person(self, person_id: int, **fields: Any) -> Optional[Person]:
        """
        Overwrite scalar fields of a record in place.

        The whole update is checked before any field is written, so a rejected
        update leaves the record untouched. Relation consistency is not
        handled here (use ``set_parents`` and the relation methods for that).
        """
        checked = self.check_fields(fields)

        with self.lock.write_locked():
            person = self._persons.get(person_id)
            if person is None:
                return None
            for name, value in checked.items():
                setattr(person, name, value)
        log.debug("Updated person %d: %s", person_id, sorted(fields))
        return person

    def remove_person(self, person_id: int) -> bool:
        """
        Delete a record and scrub every reference to it.

        Descendants are not deleted; they simply lose that parent.
        """
        with self.lock.write_locked():
            if person_id not in self._persons:
                return False

            for other in self._persons.values():
                if person_id in other.spouse_ids:
                    other.spouse_ids = [i for i in other.spouse_ids if i != person_id]
                if person_id in other.children_ids:
                    other.children_ids = [i for i in other.children_ids if i != person_id]
                if other.father_id == person_id:
                    other.father_id = 0
                if other.mother_id == person_id:
                    other.mother_id = 0

            del self._persons[person_id]
            self.photos.drop_person(person_id)
            self._favorites = [0 if slot == person_id else slot for slot in self._favorites]

        log.debug("Removed person %d", person_id)
        return True

    def replace_population(self, persons: Mapping[int, Person], favorites: Optional[List[int]] = None) -> None:
        """Swap the whole population (CSV import). The photo index is kept."""
        with self.lock.write_locked():
            self._persons = dict(persons)
            self._favorites = list(favorites or [])[:self.favorites_capacity]
        log.info("Population replaced: %d person(s)", len(persons))

    # ------------------------------------------------------------------ #
    # Relation mutations
    # ------------------------------------------------------------------ #

    def add_spouse_relation(self, person_id: int, spouse_id: int) -> None:
        """Link both sides; a missing side is silently skipped."""
        with self.lock.write_locked():
            first = self._persons.get(person_id)
            second = self._persons.get(spouse_id)
            if first and spouse_id not in first.spouse_ids:
                first.spouse_ids.append(spouse_id)
            if second and person_id not in second.spouse_ids:
                second.spouse_ids.append(person_id)

    def remove_spouse_relation(self, person_id: int, spouse_id: int) -> None:
        with self.lock.write_locked():
            first = self._persons.get(person_id)
            second = self._persons.get(spouse_id)
            if first:
                first.spouse_ids = [i for i in first.spouse_ids if i != spouse_id]
            if second:
                second.spouse_ids = [i for i in second.spouse_ids if i != person_id]

    def add_child_relation(self, parent_id: int, child_id: int) -> None:
        """Append to the parent's children only; the child's parent ids are untouched."""
        with self.lock.write_locked():
            parent = self._persons.get(parent_id)
            if parent and child_id not in parent.children_ids:
                parent.children_ids.append(child_id)

    def remove_child_relation(self, parent_id: int, child_id: int) -> None:
        with self.lock.write_locked():
            parent = self._persons.get(parent_id)
            if parent:
                parent.children_ids = [i for i in parent.children_ids if i != child_id]

    def set_parents(self, child_id: int, father_id: int, mother_id: int) -> None:
        """Move a child from its current parents to new ones; ``0`` means no parent."""
        with self.lock.write_locked():
            child = self._persons.get(child_id)
            if child is None:
                return

            for old_parent_id in (child.father_id, child.mother_id):
                if old_parent_id:
                    self.remove_child_relation(old_parent_id, child_id)

            child.father_id = father_id or 0
            child.mother_id = mother_id or 0

            if child.father_id:
                self.add_child_relation(child.father_id, child_id)
            if child.mother_id:
                self.add_child_relation(child.mother_id, child_id)

        log.debug("Set parents of %d to father=%d mother=%d", child_id, father_id or 0, mother_id or 0)

    # ------------------------------------------------------------------ #
    # Photos
    # ------------------------------------------------------------------ #

    def add_photo(self, person_id: int, filename: Optional[str] = None) -> str:
        """Register a photo filename (generated as ``<id>#<next>.jpg`` when omitted)."""
        with self.lock.write_locked():
            name = filename or self.photos.next_filename(person_id)
            self.photos.add(person_id, name)
        return name

    def delete_photo(self, person_id: int, filename: str) -> bool:
        with self.lock.write_locked():
            return self.photos.remove(person_id, filename)

    # ------------------------------------------------------------------ #
    # Favorites
    # ------------------------------------------------------------------ #

    def get_favorites(self) -> List[int]:
        with self.lock.read_locked():
            return list(self._favorites)

    def add_favorite(self, person_id: int) -> int:
        """Put ``person_id`` in the lowest free slot. Returns the slot, or -1 when full."""
        with self.lock.write_locked():
            if person_id in self._favorites:
                return self._favorites.index(person_id)
            if 0 in self._favorites:
                slot = self._favorites.index(0)
                self._favorites[slot] = person_id
                return slot
            if len(self._favorites) < self.favorites_capacity:
                self._favorites.append(person_id)
                return len(self._favorites) - 1
            return -1

    def remove_favorite(self, person_id: int) -> int:
        with self.lock.write_locked():
            if person_id not in self._favorites:
                return -1
            slot = self._favorites.index(person_id)
            self._favorites[slot] = 0
            return slot

    def is_favorite(self, person_id: int) -> bool:
        with self.lock.read_locked():
            return bool(person_id) and person_id in self._favorites

    # ------------------------------------------------------------------ #
    # Export
    # ------------------------------------------------------------------ #

    def export_to_csv(self) -> str:
        with self.lock.read_locked():
            return export_to_csv(self._persons)

    def export_to_gedcom(self) -> str:
        with self.lock.read_locked():
            return export_to_gedcom(self._persons)
