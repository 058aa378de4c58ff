# src/drevo/dates/age.py

from __future__ import annotations

from datetime import date
from typing import Optional

from .parsing import parse_date


def year_word(n: int) -> str:
    """Russian noun agreement for a count of years: год / года / лет."""
    tail = abs(n) % 100
    last = tail % 10
    if 11 <= tail <= 14:
        return "лет"
    if last == 1:
        return "год"
    if 2 <= last <= 4:
        return "года"
    return "лет"


def calculate_age_number(
    birth_day: Optional[str],
    death_day: Optional[str],
    today: Optional[date] = None,
) -> int:
    """
    Completed years between birth and death (or ``today`` for the living).

    Returns -1 when the birth date does not parse, or when a death date is
    present but does not parse. The result may be negative for inverted data;
    callers decide what to do with that.
    """
    birth = parse_date(birth_day)
    if birth is None:
        return -1

    if death_day and death_day.strip():
        end = parse_date(death_day)
        if end is None:
            return -1
    else:
        end = today or date.today()

    years = end.year - birth.year
    if (end.month, end.day) < (birth.month, birth.day):
        years -= 1
    return years


def calculate_age(
    birth_day: Optional[str],
    death_day: Optional[str],
    today: Optional[date] = None,
) -> str:
    """Formatted age such as ``"21 год"``; empty when it cannot be computed."""
    years = calculate_age_number(birth_day, death_day, today)
    if years < 0:
        return ""
    return f"{years} {year_word(years)}"
