"""
Kinship resolution over father/mother edges.

Algorithm
---------
1. Breadth-first ancestor set for each subject (reflexive, depth 0 = self),
   keyed in dequeue order.
2. The common ancestor is the first id of subject 1's set, in that order,
   that also appears in subject 2's set. This favours the ancestor nearest to
   subject 1, not the one minimising combined distance; the asymmetry is
   intentional.
3. Shortest father/mother path from each subject to that ancestor, both ends
   included (a subject that *is* the ancestor has a path of length 1).
4. A label looked up from the two path lengths.

Two observable quirks are kept as-is:
  - asking about the same person twice yields paths ``[id]`` / ``[id]`` and
    the sibling label;
  - people with no common ancestor get empty paths, which the table reads as
    "the same person".
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Mapping, Optional, Tuple

from drevo.models import KinshipResult, Person
from drevo.store import PersonStore


# (path length 1, path length 2) -> label
RELATIONSHIP_LABELS: Dict[Tuple[int, int], str] = {
    (0, 0): "Один и тот же человек",
    (1, 1): "Брат/Сестра",
    (0, 1): "Родитель",
    (1, 0): "Ребёнок",
    (0, 2): "Дедушка/Бабушка",
    (2, 0): "Внук/Внучка",
    (1, 2): "Дядя/Тётя",
    (2, 1): "Племянник/Племянница",
    (2, 2): "Двоюродный брат/сестра",
}


def _parent_ids(persons: Mapping[int, Person], person_id: int) -> List[int]:
    person = persons.get(person_id)
    if person is None:
        return []
    return [pid for pid in (person.father_id, person.mother_id) if pid]


def ancestor_set(persons: Mapping[int, Person], person_id: int) -> Dict[int, int]:
    """
    All ids reachable over father/mother edges, including ``person_id`` itself.

    Keys are in BFS dequeue order; values are the minimum edge distance.
    Dangling parent ids are recorded but not expanded.
    """
    ancestors: Dict[int, int] = {}
    queue: Deque[Tuple[int, int]] = deque([(person_id, 0)])

    while queue:
        current, depth = queue.popleft()
        if current in ancestors:
            continue
        ancestors[current] = depth
        for parent_id in _parent_ids(persons, current):
            if parent_id not in ancestors:
                queue.append((parent_id, depth + 1))

    return ancestors


def find_common_ancestor(first: Dict[int, int], second: Dict[int, int]) -> Optional[int]:
    """First id of ``first`` (in discovery order) that is also in ``second``."""
    for ancestor_id in first:
        if ancestor_id in second:
            return ancestor_id
    return None


def path_to_ancestor(persons: Mapping[int, Person], from_id: int, to_id: int) -> List[int]:
    """Shortest id path ``from_id`` -> ``to_id`` over parent edges, ends inclusive; [] if none."""
    if from_id == to_id:
        return [from_id]

    visited = {from_id}
    came_from: Dict[int, int] = {}
    queue: Deque[int] = deque([from_id])

    while queue:
        current = queue.popleft()
        if current == to_id:
            path = [to_id]
            while path[-1] != from_id:
                path.append(came_from[path[-1]])
            path.reverse()
            return path

        for parent_id in _parent_ids(persons, current):
            if parent_id not in visited:
                visited.add(parent_id)
                came_from[parent_id] = current
                queue.append(parent_id)

    return []


def describe_relationship(length1: int, length2: int) -> str:
    """Relationship label from the two path lengths."""
    label = RELATIONSHIP_LABELS.get((length1, length2))
    if label:
        return label
    if length1 == 0:
        return f"Предок ({length2} поколений)"
    if length2 == 0:
        return f"Потомок ({length1} поколений)"
    return f"Родственники ({length1}/{length2} поколений от общего предка)"


def check_kinship(store: PersonStore, id1: int, id2: int) -> Optional[KinshipResult]:
    """How ``id1`` and ``id2`` are related; None when either id is unknown."""
    with store.read() as persons:
        first = persons.get(id1)
        second = persons.get(id2)
        if first is None or second is None:
            return None

        common_id = find_common_ancestor(ancestor_set(persons, id1), ancestor_set(persons, id2))

        path1: List[int] = []
        path2: List[int] = []
        if common_id is not None:
            path1 = path_to_ancestor(persons, id1, common_id)
            path2 = path_to_ancestor(persons, id2, common_id)

        common = persons.get(common_id) if common_id is not None else None

        # A dangling common ancestor id has no brief; such steps are skipped.
        return KinshipResult(
            person1=store.to_brief(first),
            person2=store.to_brief(second),
            common_ancestor=store.to_brief(common) if common else None,
            path_from_person1=[store.to_brief(persons[i]) for i in path1 if i in persons],
            path_from_person2=[store.to_brief(persons[i]) for i in path2 if i in persons],
            relationship=describe_relationship(len(path1), len(path2)),
        )
