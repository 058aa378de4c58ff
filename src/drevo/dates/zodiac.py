# src/drevo/dates/zodiac.py

from __future__ import annotations

from typing import Optional, Tuple

from drevo.models import Zodiac

from .parsing import is_full_date, parse_date


# (name, icon, (from_month, from_day), (to_month, to_day)), both ends inclusive.
ZODIAC_SIGNS: Tuple[Tuple[str, str, Tuple[int, int], Tuple[int, int]], ...] = (
    ("Козерог", "♑", (12, 22), (1, 19)),
    ("Водолей", "♒", (1, 20), (2, 18)),
    ("Рыбы", "♓", (2, 19), (3, 20)),
    ("Овен", "♈", (3, 21), (4, 19)),
    ("Телец", "♉", (4, 20), (5, 20)),
    ("Близнецы", "♊", (5, 21), (6, 20)),
    ("Рак", "♋", (6, 21), (7, 22)),
    ("Лев", "♌", (7, 23), (8, 22)),
    ("Дева", "♍", (8, 23), (9, 22)),
    ("Весы", "♎", (9, 23), (10, 22)),
    ("Скорпион", "♏", (10, 23), (11, 21)),
    ("Стрелец", "♐", (11, 22), (12, 21)),
)


def get_zodiac(value: Optional[str]) -> Optional[Zodiac]:
    """Western zodiac sign for a full date; None for year-only or unknown dates."""
    if not is_full_date(value):
        return None
    parsed = parse_date(value)
    if parsed is None:
        return None

    month, day = parsed.month, parsed.day
    for name, icon, (from_m, from_d), (to_m, to_d) in ZODIAC_SIGNS:
        if (month == from_m and day >= from_d) or (month == to_m and day <= to_d):
            return Zodiac(name=name, icon=icon)
    return None
