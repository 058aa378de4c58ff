from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional


class Sex(IntEnum):
    """Binary sex as encoded in the population CSV (1 = male, anything else female)."""
    FEMALE = 0
    MALE = 1

    @classmethod
    def parse(cls, raw: object) -> "Sex":
        try:
            return cls.MALE if int(str(raw).strip()) == 1 else cls.FEMALE
        except ValueError:
            return cls.FEMALE


# -----------------------------
# Stored record
# -----------------------------

@dataclass(slots=True)
class Person:
    """
    One person record.

    Relation fields hold plain ids. ``0`` in ``father_id``/``mother_id`` means
    "unknown"; any id may also dangle (point at a person that does not exist).
    ``order_by_*`` are display hints only.
    """
    id: int
    sex: Sex = Sex.FEMALE
    first_name: str = ""
    last_name: str = ""
    father_id: int = 0
    mother_id: int = 0
    birth_place: str = ""
    birth_day: str = ""
    death_place: str = ""
    death_day: str = ""
    address: str = ""
    spouse_ids: List[int] = field(default_factory=list)
    children_ids: List[int] = field(default_factory=list)
    order_by_dad: int = 0
    order_by_mom: int = 0
    order_by_spouse: int = 0
    marry_day: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name}".strip()

    @property
    def is_alive(self) -> bool:
        return not self.death_day or not self.death_day.strip()

    @property
    def is_male(self) -> bool:
        return self.sex == Sex.MALE


# Field names callers may pass to ``update_person`` / ``create_person``.
PERSON_FIELDS = frozenset(Person.__dataclass_fields__) - {"id"}


# -----------------------------
# Derived views
# -----------------------------

@dataclass(slots=True)
class PersonBrief:
    id: int
    first_name: str
    last_name: str
    sex: Sex
    birth_day: str
    death_day: str
    photo: str
    child_count: int
    age: str


@dataclass(slots=True)
class PersonCard:
    person: Person
    father: Optional[PersonBrief]
    mother: Optional[PersonBrief]
    spouses: List[PersonBrief] = field(default_factory=list)
    children: List[PersonBrief] = field(default_factory=list)
    photos: List[str] = field(default_factory=list)
    age: str = ""
    zodiac: str = ""
    has_bio: bool = False
    has_locked_bio: bool = False


@dataclass(slots=True)
class TreeNode:
    id: int
    first_name: str
    last_name: str
    sex: Sex
    is_alive: bool
    photo: str
    children: List["TreeNode"] = field(default_factory=list)


@dataclass(slots=True)
class KinshipResult:
    person1: PersonBrief
    person2: PersonBrief
    common_ancestor: Optional[PersonBrief]
    path_from_person1: List[PersonBrief]
    path_from_person2: List[PersonBrief]
    relationship: str


@dataclass(slots=True)
class FamilyMember:
    person: PersonBrief
    relation: str
    # self | parents | siblings | children | grandchildren | greatGrandchildren
    category: str


@dataclass(slots=True)
class SearchResult:
    id: int
    first_name: str
    last_name: str
    sex: Sex
    birth_day: str
    death_day: str
    address: str
    age: str
    photo: str
    match_field: str


@dataclass(slots=True)
class StatsData:
    total_persons: int
    male_count: int
    female_count: int
    alive_count: int
    deceased_count: int
    age_distribution: Dict[str, int]
    longest_lived: List[PersonBrief]


@dataclass(slots=True)
class ValidationIssue:
    type: str
    person_id: int
    message: str


@dataclass(slots=True)
class ValidationResult:
    issues: List[ValidationIssue] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class EventItem:
    id: int
    first_name: str
    last_name: str
    sex: Sex
    birth_day: str
    death_day: str
    marry_day: str
    event_type: str  # birthday | memorial | wedding
    event_date: str  # DD.MM
    years_count: int
    days_until: int
    photo: str


@dataclass(slots=True)
class Zodiac:
    name: str
    icon: str

    def __str__(self) -> str:
        return f"{self.icon} {self.name}"


@dataclass(slots=True)
class CsvParseResult:
    """Outcome of a permissive CSV parse: the population plus how many rows were dropped."""
    persons: Dict[int, Person] = field(default_factory=dict)
    skipped: int = 0
