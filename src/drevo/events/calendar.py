"""
Upcoming family dates: birthdays, memorial days and wedding anniversaries.

Only full ``DD.MM.YYYY`` dates produce events. 29 February is observed on
28 February in non-leap years.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from drevo.dates import calculate_age_number, get_day_month, parse_date
from drevo.models import EventItem, Person
from drevo.store import PersonStore

DEFAULT_DAYS_AHEAD = 5


# -----------------------------
# Day arithmetic
# -----------------------------

def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _day_month(value: str) -> Optional[Tuple[int, int]]:
    # get_day_month only checks the shape; parse_date rejects "31.04.1990".
    dm = get_day_month(value)
    if dm is None or parse_date(value) is None:
        return None
    day, month = dm.split(".")
    return int(day), int(month)


def occurrence_in(year: int, day: int, month: int) -> date:
    """The date an anniversary of ``day.month`` falls on in ``year``."""
    if month == 2 and day == 29 and not _is_leap(year):
        day = 28
    return date(year, month, day)


def days_until(day: int, month: int, today: date) -> int:
    """Days from ``today`` to the next occurrence (0 when it is today)."""
    upcoming = occurrence_in(today.year, day, month)
    if upcoming < today:
        upcoming = occurrence_in(today.year + 1, day, month)
    return (upcoming - today).days


def was_yesterday(day: int, month: int, today: date) -> bool:
    yesterday = today - timedelta(days=1)
    return occurrence_in(yesterday.year, day, month) == yesterday


def _in_window(day: int, month: int, today: date, days: int, include_yesterday: bool) -> Optional[int]:
    """``days_until`` for an event inside the window, else None. Yesterday reports 0."""
    if include_yesterday and was_yesterday(day, month, today):
        return 0
    remaining = days_until(day, month, today)
    if remaining <= days:
        return remaining
    return None


def _years_since(value: str, today: date) -> int:
    parsed = parse_date(value)
    return today.year - parsed.year if parsed else 0


# -----------------------------
# Public API
# -----------------------------

def _event(store: PersonStore, person: Person, event_type: str, dm: Tuple[int, int],
           years: int, remaining: int) -> EventItem:
    day, month = dm
    return EventItem(
        id=person.id,
        first_name=person.first_name,
        last_name=person.last_name,
        sex=person.sex,
        birth_day=person.birth_day,
        death_day=person.death_day,
        marry_day=person.marry_day,
        event_type=event_type,
        event_date=f"{day:02d}.{month:02d}",
        years_count=years,
        days_until=remaining,
        photo=store.get_default_photo(person),
    )


def get_events(
    store: PersonStore,
    days: int = DEFAULT_DAYS_AHEAD,
    include_yesterday: bool = True,
    today: Optional[date] = None,
) -> List[EventItem]:
    """
    Birthdays, memorial days and wedding anniversaries within ``days`` of today.

    A wedding is reported once per couple, on the partner whose id is lower
    than all of their spouse ids. Sorted by ``days_until`` (stable on store
    order for ties).
    """
    today = today or date.today()
    events: List[EventItem] = []

    with store.read() as persons:
        for person in persons.values():
            birth = _day_month(person.birth_day)
            if birth:
                remaining = _in_window(*birth, today, days, include_yesterday)
                if remaining is not None:
                    age = calculate_age_number(person.birth_day, "", today)
                    events.append(_event(store, person, "birthday", birth, max(age, 0), remaining))

            death = _day_month(person.death_day)
            if death:
                remaining = _in_window(*death, today, days, include_yesterday)
                if remaining is not None:
                    years = _years_since(person.death_day, today)
                    events.append(_event(store, person, "memorial", death, years, remaining))

            wedding = _day_month(person.marry_day)
            if wedding and person.spouse_ids and person.id < min(person.spouse_ids):
                remaining = _in_window(*wedding, today, days, include_yesterday)
                if remaining is not None:
                    years = _years_since(person.marry_day, today)
                    events.append(_event(store, person, "wedding", wedding, years, remaining))

    events.sort(key=lambda e: e.days_until)
    return events


def get_person_today_events(person: Person, today: Optional[date] = None) -> Dict[str, bool]:
    """Which of the person's anniversaries fall on ``today``."""
    today = today or date.today()

    def is_today(value: str) -> bool:
        dm = _day_month(value)
        return dm is not None and occurrence_in(today.year, *dm) == today

    return {
        "birthday": is_today(person.birth_day),
        "memorial": is_today(person.death_day),
        "wedding": is_today(person.marry_day),
    }
