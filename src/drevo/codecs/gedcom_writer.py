"""
GEDCOM writer for exporting the person population to GEDCOM 5.5.1.

Export only: the store never reads GEDCOM back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Union

from drevo.dates import to_gedcom_date
from drevo.dates.parsing import GEDCOM_MONTHS
from drevo.logging import get_logger
from drevo.models import Person, Sex

log = get_logger("gedcom_writer")


@dataclass
class _Family:
    pointer: str
    members: List[int]
    children: List[int] = field(default_factory=list)


def individual_pointer(person_id: int) -> str:
    return f"@I{person_id}@"


class GEDCOMWriter:
    """Write a person population to GEDCOM format"""

    def __init__(self, source_name: str = "drevo"):
        self.source_name = source_name
        self.lines: List[str] = []
        self._persons: Dict[int, Person] = {}
        self._families: Dict[FrozenSet[int], _Family] = {}
        self._spouse_in: Dict[int, List[str]] = {}
        self._child_in: Dict[int, List[str]] = {}

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def render(self, persons: Union[Dict[int, Person], Iterable[Person]], now: Optional[datetime] = None) -> str:
        """Return the whole GEDCOM document as a string."""
        records = persons.values() if isinstance(persons, dict) else persons
        ordered = sorted(records, key=lambda p: p.id)

        self.lines = []
        self._persons = {p.id: p for p in ordered}
        self._families = {}
        self._spouse_in = {}
        self._child_in = {}
        self._collect_families(ordered)

        self._write_header(now or datetime.now())
        for person in ordered:
            self._write_individual(person)
        for family in self._families.values():
            self._write_family(family)
        self._write_trailer()

        log.info(
            "GEDCOM export: %d individual(s), %d famil(ies)",
            len(ordered),
            len(self._families),
        )
        return "\n".join(self.lines)

    def write_gedcom(self, persons: Union[Dict[int, Person], Iterable[Person]], output_file: Union[str, Path]) -> Path:
        """Render and save to ``output_file``."""
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(persons), encoding="utf-8")
        return path

    # ------------------------------------------------------------------ #
    # Family discovery
    # ------------------------------------------------------------------ #

    def _family_for(self, members: Iterable[int]) -> _Family:
        key = frozenset(members)
        family = self._families.get(key)
        if family is None:
            family = _Family(
                pointer=f"@F{len(self._families) + 1}@",
                members=sorted(key),
            )
            self._families[key] = family
            for member in family.members:
                self._spouse_in.setdefault(member, []).append(family.pointer)
        return family

    def _collect_families(self, ordered: List[Person]) -> None:
        # One family per distinct spousal pair, in order of first encounter.
        for person in ordered:
            for spouse_id in person.spouse_ids:
                if spouse_id == person.id or spouse_id not in self._persons:
                    continue
                self._family_for((person.id, spouse_id))

        # Children attach to the family formed by their resolvable parents.
        for person in ordered:
            parents = [
                pid for pid in (person.father_id, person.mother_id)
                if pid and pid != person.id and pid in self._persons
            ]
            if not parents:
                continue
            family = self._family_for(parents)
            if person.id not in family.children:
                family.children.append(person.id)
                self._child_in.setdefault(person.id, []).append(family.pointer)

    def _husband_and_wife(self, family: _Family) -> tuple[Optional[int], Optional[int]]:
        if len(family.members) == 1:
            only = family.members[0]
            if self._persons[only].sex == Sex.MALE:
                return only, None
            return None, only

        first, second = family.members
        if self._persons[second].sex == Sex.MALE and self._persons[first].sex != Sex.MALE:
            return second, first
        return first, second

    # ------------------------------------------------------------------ #
    # Record writers
    # ------------------------------------------------------------------ #

    def _write_header(self, now: datetime) -> None:
        """Write GEDCOM header"""
        self.lines.extend([
            "0 HEAD",
            f"1 SOUR {self.source_name}",
            "2 VERS 1.0",
            f"1 DATE {now.day:02d} {GEDCOM_MONTHS[now.month - 1]} {now.year}",
            "1 GEDC",
            "2 VERS 5.5.1",
            "2 FORM LINEAGE-LINKED",
            "1 CHAR UTF-8",
        ])

    def _write_event(self, tag: str, day: str, place: str) -> None:
        gedcom_date = to_gedcom_date(day)
        if not gedcom_date and not place:
            return
        self.lines.append(f"1 {tag}")
        if gedcom_date:
            self.lines.append(f"2 DATE {gedcom_date}")
        if place:
            self.lines.append(f"2 PLAC {place}")

    def _write_individual(self, person: Person) -> None:
        """Write an individual record"""
        self.lines.append(f"0 {individual_pointer(person.id)} INDI")

        name_parts = [part for part in (person.first_name, f"/{person.last_name}/") if part]
        self.lines.append(f"1 NAME {' '.join(name_parts)}")
        if person.first_name:
            self.lines.append(f"2 GIVN {person.first_name}")
        if person.last_name:
            self.lines.append(f"2 SURN {person.last_name}")

        self.lines.append(f"1 SEX {'M' if person.sex == Sex.MALE else 'F'}")

        self._write_event("BIRT", person.birth_day, person.birth_place)
        if not person.is_alive or person.death_place:
            self._write_event("DEAT", person.death_day, person.death_place)

        if person.address:
            self.lines.append("1 RESI")
            self.lines.append(f"2 ADDR {person.address}")

        for pointer in self._spouse_in.get(person.id, []):
            self.lines.append(f"1 FAMS {pointer}")
        for pointer in self._child_in.get(person.id, []):
            self.lines.append(f"1 FAMC {pointer}")

    def _write_family(self, family: _Family) -> None:
        """Write a family record"""
        self.lines.append(f"0 {family.pointer} FAM")

        husband, wife = self._husband_and_wife(family)
        if husband:
            self.lines.append(f"1 HUSB {individual_pointer(husband)}")
        if wife:
            self.lines.append(f"1 WIFE {individual_pointer(wife)}")

        for child_id in family.children:
            self.lines.append(f"1 CHIL {individual_pointer(child_id)}")

        if len(family.members) == 2:
            marry_day = next(
                (self._persons[m].marry_day for m in (husband, wife) if m and self._persons[m].marry_day),
                "",
            )
            gedcom_date = to_gedcom_date(marry_day)
            if gedcom_date:
                self.lines.append("1 MARR")
                self.lines.append(f"2 DATE {gedcom_date}")

    def _write_trailer(self) -> None:
        """Write GEDCOM trailer"""
        self.lines.append("0 TRLR")


def export_to_gedcom(persons: Union[Dict[int, Person], Iterable[Person]], now: Optional[datetime] = None) -> str:
    """Convenience wrapper: render a population with a fresh writer."""
    return GEDCOMWriter().render(persons, now=now)
