# src/drevo/stats/aggregator.py

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Tuple

from drevo.dates import calculate_age_number
from drevo.models import Person, Sex, StatsData
from drevo.store import PersonStore

# (label, inclusive lower bound), checked from the top down
AGE_BUCKETS: Tuple[Tuple[str, int], ...] = (
    ("100+", 100),
    ("90-99", 90),
    ("80-89", 80),
    ("70-79", 70),
    ("60-69", 60),
    ("50-59", 50),
    ("0-49", 0),
)

LONG_LIVED_AGE = 90
LONG_LIVED_LIMIT = 20


def age_bucket(age: int) -> Optional[str]:
    for label, lower in AGE_BUCKETS:
        if age >= lower:
            return label
    return None


def empty_distribution() -> Dict[str, int]:
    return {label: 0 for label, _ in reversed(AGE_BUCKETS)}


def get_stats(store: PersonStore, today: Optional[date] = None) -> StatsData:
    """Single pass over the population: sex, alive/deceased, age histogram, longest lived."""
    male = female = alive = deceased = 0
    distribution = empty_distribution()
    long_lived: List[Tuple[int, Person]] = []

    with store.read() as persons:
        for person in persons.values():
            if person.sex == Sex.MALE:
                male += 1
            else:
                female += 1

            if person.is_alive:
                alive += 1
            else:
                deceased += 1

            age = calculate_age_number(person.birth_day, person.death_day, today)
            bucket = age_bucket(age) if age >= 0 else None
            if bucket is None:
                continue
            distribution[bucket] += 1
            if age >= LONG_LIVED_AGE:
                long_lived.append((age, person))

        long_lived.sort(key=lambda item: item[0], reverse=True)

        return StatsData(
            total_persons=len(persons),
            male_count=male,
            female_count=female,
            alive_count=alive,
            deceased_count=deceased,
            age_distribution=distribution,
            longest_lived=[store.to_brief(p, today) for _, p in long_lived[:LONG_LIVED_LIMIT]],
        )
