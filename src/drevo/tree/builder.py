# src/drevo/tree/builder.py

from __future__ import annotations

from typing import Callable, List, Mapping, Optional

from drevo.models import Person, TreeNode
from drevo.store import PersonStore


def _resolve_depth(store: PersonStore, max_depth: Optional[int]) -> int:
    return store.tree_max_depth if max_depth is None else max_depth


def _build_node(
    store: PersonStore,
    persons: Mapping[int, Person],
    person: Person,
    depth: int,
    max_depth: int,
    next_ids: Callable[[Person], List[int]],
) -> TreeNode:
    children: List[TreeNode] = []
    # The depth cut-off is what keeps cyclic or erroneous data from recursing forever.
    if depth < max_depth:
        for next_id in next_ids(person):
            relative = persons.get(next_id) if next_id else None
            if relative is not None:
                children.append(
                    _build_node(store, persons, relative, depth + 1, max_depth, next_ids)
                )

    return TreeNode(
        id=person.id,
        first_name=person.first_name,
        last_name=person.last_name,
        sex=person.sex,
        is_alive=person.is_alive,
        photo=store.get_default_photo(person),
        children=children,
    )


def _parents(person: Person) -> List[int]:
    return [person.father_id, person.mother_id]


def _children(person: Person) -> List[int]:
    return list(person.children_ids)


def get_ancestor_tree(
    store: PersonStore,
    person_id: int,
    max_depth: Optional[int] = None,
) -> Optional[TreeNode]:
    """
    Ancestor subtree rooted at ``person_id``.

    Each node's ``children`` are its parents: father first, mother second,
    unknown or unresolved parents omitted. Expansion stops once a node sits
    ``max_depth`` levels below the root (default: the store's configured
    depth, 13). Returns None for an unknown id.
    """
    depth_limit = _resolve_depth(store, max_depth)
    with store.read() as persons:
        person = persons.get(person_id)
        if person is None:
            return None
        return _build_node(store, persons, person, 0, depth_limit, _parents)


def get_descendant_tree(
    store: PersonStore,
    person_id: int,
    max_depth: Optional[int] = None,
) -> Optional[TreeNode]:
    """Descendant subtree over ``children_ids`` (insertion order), same depth rule."""
    depth_limit = _resolve_depth(store, max_depth)
    with store.read() as persons:
        person = persons.get(person_id)
        if person is None:
            return None
        return _build_node(store, persons, person, 0, depth_limit, _children)


def count_nodes(node: Optional[TreeNode]) -> int:
    """Number of nodes in a built tree (0 for None)."""
    if node is None:
        return 0
    return 1 + sum(count_nodes(child) for child in node.children)
