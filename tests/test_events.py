# tests/test_events.py

from __future__ import annotations

from datetime import date

from drevo.events import days_until, get_events, get_person_today_events
from drevo.models import Person
from drevo.store import PersonStore


def _summary(events):
    return [(e.id, e.event_type, e.days_until, e.years_count) for e in events]


def test_upcoming_birthday_and_memorial(memory_store):
    events = get_events(memory_store, days=5, today=date(2026, 3, 13))

    assert _summary(events) == [
        (1, "memorial", 2, 26),
        (5, "birthday", 2, 35),
    ]
    assert events[0].event_date == "15.03"
    assert events[1].photo == "m.jpg"


def test_yesterday_is_reported_as_zero_days(memory_store):
    today = date(2026, 3, 16)

    with_yesterday = get_events(memory_store, days=5, include_yesterday=True, today=today)
    assert [(e.id, e.days_until) for e in with_yesterday] == [(1, 0), (5, 0)]

    assert get_events(memory_store, days=5, include_yesterday=False, today=today) == []


def test_wedding_reported_once_per_couple(memory_store):
    events = get_events(memory_store, days=5, today=date(2026, 6, 10))
    assert _summary(events) == [(1, "wedding", 2, 71)]


def test_sorted_by_days_until():
    store = PersonStore(
        [
            Person(id=1, birth_day="20.05.2000"),
            Person(id=2, birth_day="18.05.2000"),
            Person(id=3, death_day="19.05.2010", birth_day="1950"),
        ]
    )
    events = get_events(store, days=10, today=date(2026, 5, 17))
    assert [(e.id, e.days_until) for e in events] == [(2, 1), (3, 2), (1, 3)]


def test_year_only_and_invalid_dates_are_ignored():
    store = PersonStore(
        [
            Person(id=1, birth_day="2000"),
            Person(id=2, birth_day="31.04.2000"),
        ]
    )
    assert get_events(store, days=365, today=date(2026, 1, 1)) == []


def test_window_wraps_into_next_year():
    store = PersonStore([Person(id=1, birth_day="02.01.2000")])
    events = get_events(store, days=5, today=date(2026, 12, 30))
    assert [(e.id, e.days_until) for e in events] == [(1, 3)]


def test_leap_day_observed_on_28_february():
    assert days_until(29, 2, date(2027, 2, 27)) == 1
    assert days_until(29, 2, date(2028, 2, 27)) == 2

    person = Person(id=1, birth_day="29.02.1992")
    flags = get_person_today_events(person, today=date(2027, 2, 28))
    assert flags == {"birthday": True, "memorial": False, "wedding": False}


def test_person_today_events(memory_store):
    ivan = memory_store.get_person(1)
    assert get_person_today_events(ivan, today=date(2026, 6, 12)) == {
        "birthday": False,
        "memorial": False,
        "wedding": True,
    }
    assert get_person_today_events(ivan, today=date(2026, 3, 15))["memorial"]
