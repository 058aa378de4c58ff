# src/drevo/codecs/csv_codec.py

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

from drevo.core.exceptions import StoreLoadError
from drevo.logging import get_logger
from drevo.models import CsvParseResult, Person, Sex

log = get_logger("csv_codec")

FIELD_COUNT = 17
DELIMITER = ";"


class CsvRowError(ValueError):
    """Raised when a population line cannot be turned into a Person."""


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _int_or_zero(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def parse_ids(raw: str | None) -> List[int]:
    """
    Parse a whitespace-separated id list.

    Non-numeric and non-positive tokens are dropped, order is preserved.
    """
    if not raw or not raw.strip():
        return []
    ids: List[int] = []
    for token in raw.split():
        try:
            value = int(token)
        except ValueError:
            continue
        if value > 0:
            ids.append(value)
    return ids


def parse_csv_line(line: str, lineno: int = 0) -> Person:
    """
    Parse one 17-field population line.

    Field order:
        id;sex;lastName;firstName;fatherId;motherId;birthPlace;birthDay;
        deathPlace;deathDay;address;spouseIds;childrenIds;orderByDad;
        orderByMom;orderBySpouse;marryDay

    Extra trailing fields are ignored. Every field is trimmed.
    """
    fields = [f.strip() for f in line.rstrip("\r\n").split(DELIMITER)]
    if len(fields) < FIELD_COUNT:
        raise CsvRowError(
            f"Line {lineno}: expected {FIELD_COUNT} fields, got {len(fields)}"
        )

    try:
        person_id = int(fields[0])
    except ValueError:
        raise CsvRowError(f"Line {lineno}: id is not numeric -> {fields[0]!r}") from None
    if person_id <= 0:
        raise CsvRowError(f"Line {lineno}: id must be positive -> {person_id}")

    return Person(
        id=person_id,
        sex=Sex.parse(fields[1]),
        last_name=fields[2],
        first_name=fields[3],
        father_id=max(_int_or_zero(fields[4]), 0),
        mother_id=max(_int_or_zero(fields[5]), 0),
        birth_place=fields[6],
        birth_day=fields[7],
        death_place=fields[8],
        death_day=fields[9],
        address=fields[10],
        spouse_ids=parse_ids(fields[11]),
        children_ids=parse_ids(fields[12]),
        order_by_dad=_int_or_zero(fields[13]),
        order_by_mom=_int_or_zero(fields[14]),
        order_by_spouse=_int_or_zero(fields[15]),
        marry_day=fields[16],
    )


# ---------------------------------------------------------------------------
# Population parsing
# ---------------------------------------------------------------------------

def parse_persons_csv_string(content: str) -> CsvParseResult:
    """
    Parse a whole population.

    Permissive by contract: blank lines are ignored, malformed lines are
    counted in ``skipped`` and otherwise dropped. Never raises.
    """
    result = CsvParseResult()
    if content.startswith("\ufeff"):
        content = content[1:]

    for lineno, line in enumerate(content.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            person = parse_csv_line(line, lineno=lineno)
        except CsvRowError as exc:
            result.skipped += 1
            log.debug("Skipping CSV row: %s", exc)
            continue
        result.persons[person.id] = person

    if result.skipped:
        log.warning(
            "CSV parse dropped %d malformed row(s); kept %d person(s)",
            result.skipped,
            len(result.persons),
        )
    return result


def parse_persons_csv(path: Union[str, Path]) -> CsvParseResult:
    """Read and parse a UTF-8 population file."""
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StoreLoadError(f"Cannot read population file {file_path}: {exc}") from exc

    result = parse_persons_csv_string(content)
    log.info("Loaded %d person(s) from %s", len(result.persons), file_path)
    return result


def parse_favorites_csv(path: Union[str, Path]) -> List[int]:
    """
    Read the favorites file: a single line of ``;``-separated ids.

    A missing file means "no favorites". Empty slots (``0``) are preserved so
    slot numbers stay stable.
    """
    file_path = Path(path)
    if not file_path.is_file():
        return []
    content = file_path.read_text(encoding="utf-8").lstrip("\ufeff")
    first_line = content.split("\n", 1)[0].strip()
    slots: List[int] = []
    for token in first_line.split(DELIMITER):
        try:
            value = int(token.strip())
        except ValueError:
            continue
        if value >= 0:
            slots.append(value)
    return slots


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def _id_or_blank(value: int) -> str:
    return str(value) if value else ""


def format_csv_line(person: Person) -> str:
    return DELIMITER.join(
        [
            str(person.id),
            str(int(person.sex)),
            person.last_name,
            person.first_name,
            _id_or_blank(person.father_id),
            _id_or_blank(person.mother_id),
            person.birth_place,
            person.birth_day,
            person.death_place,
            person.death_day,
            person.address,
            " ".join(str(i) for i in person.spouse_ids),
            " ".join(str(i) for i in person.children_ids),
            str(person.order_by_dad),
            str(person.order_by_mom),
            str(person.order_by_spouse),
            person.marry_day,
        ]
    )


def export_to_csv(persons: Union[Dict[int, Person], Iterable[Person]]) -> str:
    """Serialize a population, sorted by id, one line per person."""
    records = persons.values() if isinstance(persons, dict) else persons
    return "\n".join(format_csv_line(p) for p in sorted(records, key=lambda p: p.id))


def export_favorites_csv(slots: Sequence[int]) -> str:
    return DELIMITER.join(str(s) for s in slots)
