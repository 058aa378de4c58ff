# tests/test_stats.py

from __future__ import annotations

from datetime import date

from drevo.models import Person
from drevo.stats import age_bucket, get_stats
from drevo.store import PersonStore

TODAY = date(2026, 1, 1)


def test_counts(memory_store):
    stats = get_stats(memory_store, today=TODAY)

    assert stats.total_persons == 5
    assert (stats.male_count, stats.female_count) == (3, 2)
    assert (stats.alive_count, stats.deceased_count) == (3, 2)


def test_age_distribution(memory_store):
    stats = get_stats(memory_store, today=TODAY)

    assert list(stats.age_distribution) == ["0-49", "50-59", "60-69", "70-79", "80-89", "90-99", "100+"]
    assert stats.age_distribution["0-49"] == 1
    assert stats.age_distribution["60-69"] == 2
    assert stats.age_distribution["70-79"] == 2
    assert sum(stats.age_distribution.values()) == 5
    assert stats.longest_lived == []


def test_bucket_edges():
    assert age_bucket(0) == "0-49"
    assert age_bucket(49) == "0-49"
    assert age_bucket(50) == "50-59"
    assert age_bucket(99) == "90-99"
    assert age_bucket(100) == "100+"


def test_longest_lived_sorted_and_capped():
    persons = [
        Person(id=i, birth_day="1900", death_day=str(1990 + i % 15))
        for i in range(1, 31)
    ]
    persons.append(Person(id=99, birth_day="", death_day=""))
    stats = get_stats(PersonStore(persons), today=TODAY)

    ages = [int(b.age.split()[0]) for b in stats.longest_lived]
    assert len(ages) == 20
    assert ages == sorted(ages, reverse=True)
    assert min(ages) >= 90
    assert sum(stats.age_distribution.values()) == 30
