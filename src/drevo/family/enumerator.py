# src/drevo/family/enumerator.py

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from drevo.models import FamilyMember, Person, Sex
from drevo.store import PersonStore

# category -> (male label, female label)
RELATION_LABELS: Dict[str, tuple[str, str]] = {
    "siblings": ("Брат", "Сестра"),
    "children": ("Сын", "Дочь"),
    "grandchildren": ("Внук", "Внучка"),
    "greatGrandchildren": ("Правнук", "Правнучка"),
}

SELF_LABEL = "Я"
FATHER_LABEL = "Отец"
MOTHER_LABEL = "Мать"


def _resolve(persons: Mapping[int, Person], ids: List[int]) -> List[Person]:
    return [persons[i] for i in ids if i in persons]


def _label(category: str, person: Person) -> str:
    male, female = RELATION_LABELS[category]
    return male if person.sex == Sex.MALE else female


def get_family(store: PersonStore, person_id: int) -> List[FamilyMember]:
    """
    Near relatives of ``person_id`` as one flat, categorised list.

    Order: self, father, mother, siblings (union of both parents' children,
    self excluded), children, grandchildren, great-grandchildren. Enumeration
    stops at great-grandchildren. Unknown id -> [].
    """
    with store.read() as persons:
        person = persons.get(person_id)
        if person is None:
            return []

        members: List[FamilyMember] = [
            FamilyMember(person=store.to_brief(person), relation=SELF_LABEL, category="self")
        ]

        def add(relative: Person, relation: str, category: str) -> None:
            members.append(FamilyMember(person=store.to_brief(relative), relation=relation, category=category))

        father: Optional[Person] = persons.get(person.father_id) if person.father_id else None
        mother: Optional[Person] = persons.get(person.mother_id) if person.mother_id else None
        if father:
            add(father, FATHER_LABEL, "parents")
        if mother:
            add(mother, MOTHER_LABEL, "parents")

        # dict keeps first-seen order while de-duplicating shared children
        sibling_ids: Dict[int, None] = {}
        for parent in (father, mother):
            if parent:
                sibling_ids.update(dict.fromkeys(parent.children_ids))
        sibling_ids.pop(person_id, None)
        for sibling in _resolve(persons, list(sibling_ids)):
            add(sibling, _label("siblings", sibling), "siblings")

        children = _resolve(persons, person.children_ids)
        for child in children:
            add(child, _label("children", child), "children")

        grandchildren = [gc for child in children for gc in _resolve(persons, child.children_ids)]
        for grandchild in grandchildren:
            add(grandchild, _label("grandchildren", grandchild), "grandchildren")

        for grandchild in grandchildren:
            for great in _resolve(persons, grandchild.children_ids):
                add(great, _label("greatGrandchildren", great), "greatGrandchildren")

        return members
