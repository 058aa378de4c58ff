# src/drevo/validation/validator.py

from __future__ import annotations

from typing import Dict, List, Mapping

from drevo.logging import get_logger
from drevo.models import Person, ValidationIssue, ValidationResult
from drevo.store import PersonStore

log = get_logger("validator")


# -----------------------------
# Per-person checks
# -----------------------------

def _name_issues(person: Person) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    if not person.first_name.strip() and not person.last_name.strip():
        issues.append(ValidationIssue("empty_name", person.id, "Пустое имя и фамилия"))
    if "?" in person.first_name or "?" in person.last_name:
        issues.append(ValidationIssue("unknown_person", person.id, "Содержит '?' в имени"))
    return issues


def _spouse_issues(person: Person, persons: Mapping[int, Person]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for sid in person.spouse_ids:
        spouse = persons.get(sid)
        if spouse is None:
            issues.append(ValidationIssue("orphan_spouse", person.id, f"Супруг {sid} не найден"))
        elif person.id not in spouse.spouse_ids:
            issues.append(
                ValidationIssue("missing_reciprocal_spouse", person.id, f"Супруг {sid} не ссылается обратно")
            )
    return issues


def _child_issues(person: Person, persons: Mapping[int, Person]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for cid in person.children_ids:
        child = persons.get(cid)
        if child is None:
            issues.append(ValidationIssue("orphan_child", person.id, f"Ребёнок {cid} не найден"))
        elif person.id not in (child.father_id, child.mother_id):
            issues.append(
                ValidationIssue("missing_reciprocal_parent", person.id, f"Ребёнок {cid} не указывает родителем")
            )
    return issues


def _is_isolated(person: Person) -> bool:
    return not (person.father_id or person.mother_id or person.spouse_ids or person.children_ids)


# -----------------------------
# Public API
# -----------------------------

def validate(store: PersonStore) -> ValidationResult:
    """
    Referential-integrity report over the whole population.

    Issues come out grouped per person in store order; the store is not
    modified. ``counts`` only carries types that occurred.
    """
    issues: List[ValidationIssue] = []

    with store.read() as persons:
        for person in persons.values():
            issues.extend(_name_issues(person))
            issues.extend(_spouse_issues(person, persons))
            issues.extend(_child_issues(person, persons))
            if _is_isolated(person):
                issues.append(ValidationIssue("isolated", person.id, "Нет связей ни с кем"))
            if store.photos.count(person.id) == 0:
                issues.append(ValidationIssue("no_photo", person.id, "Нет фотографий"))

    counts: Dict[str, int] = {}
    for issue in issues:
        counts[issue.type] = counts.get(issue.type, 0) + 1

    log.info("Validation finished: %d issue(s) %s", len(issues), counts)
    return ValidationResult(issues=issues, counts=counts)
