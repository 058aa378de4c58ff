# src/drevo/search/engine.py

from __future__ import annotations

from typing import Callable, List, Tuple

from drevo.dates import calculate_age
from drevo.models import Person, SearchResult
from drevo.store import PersonStore

# Ordered: each name is replaced at most once, in this order. A longer form
# listed after a shorter one can therefore leave a fragment behind
# ("марта" -> ".03.а"); queries like that simply match less.
MONTH_TOKENS: Tuple[Tuple[str, str], ...] = (
    ("январь", ".01."), ("января", ".01."), ("янв", ".01."),
    ("февраль", ".02."), ("февраля", ".02."), ("фев", ".02."),
    ("март", ".03."), ("марта", ".03."), ("мар", ".03."),
    ("апрель", ".04."), ("апреля", ".04."), ("апр", ".04."),
    ("май", ".05."), ("мая", ".05."),
    ("июнь", ".06."), ("июня", ".06."), ("июн", ".06."),
    ("июль", ".07."), ("июля", ".07."), ("июл", ".07."),
    ("август", ".08."), ("августа", ".08."), ("авг", ".08."),
    ("сентябрь", ".09."), ("сентября", ".09."), ("сен", ".09."),
    ("октябрь", ".10."), ("октября", ".10."), ("окт", ".10."),
    ("ноябрь", ".11."), ("ноября", ".11."), ("ноя", ".11."),
    ("декабрь", ".12."), ("декабря", ".12."), ("дек", ".12."),
)


def normalize_search_query(query: str) -> str:
    """Lowercase, trim, and turn Russian month names into ``.MM.`` tokens."""
    normalized = (query or "").lower().strip()
    for name, token in MONTH_TOKENS:
        normalized = normalized.replace(name, token, 1)
    return normalized


# Tested in this order; the first hit decides ``match_field``.
MATCHERS: Tuple[Tuple[str, Callable[[Person, str], bool]], ...] = (
    ("id", lambda p, q: q == str(p.id)),
    (
        "name",
        lambda p, q: q in p.first_name.lower()
        or q in p.last_name.lower()
        or q in p.full_name.lower(),
    ),
    ("address", lambda p, q: q in p.address.lower()),
    ("birthPlace", lambda p, q: q in p.birth_place.lower()),
    ("birthDay", lambda p, q: q in p.birth_day.lower()),
    ("deathDay", lambda p, q: q in p.death_day.lower()),
    ("marryDay", lambda p, q: q in p.marry_day.lower()),
)


def match_field(person: Person, normalized_query: str) -> str:
    """Name of the first field matching, or "" when nothing does."""
    for field_name, matches in MATCHERS:
        if matches(person, normalized_query):
            return field_name
    return ""


def search(store: PersonStore, query: str) -> List[SearchResult]:
    """
    Substring search across id, names, address, birth place and dates.

    Each person is reported at most once, under the highest-priority field
    that matches. An empty (normalized) query matches nobody.
    """
    normalized = normalize_search_query(query)
    if not normalized:
        return []

    results: List[SearchResult] = []
    with store.read() as persons:
        for person in persons.values():
            field_name = match_field(person, normalized)
            if not field_name:
                continue
            results.append(
                SearchResult(
                    id=person.id,
                    first_name=person.first_name,
                    last_name=person.last_name,
                    sex=person.sex,
                    birth_day=person.birth_day,
                    death_day=person.death_day,
                    address=person.address,
                    age=calculate_age(person.birth_day, person.death_day),
                    photo=store.get_default_photo(person),
                    match_field=field_name,
                )
            )
    return results
