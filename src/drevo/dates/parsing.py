# src/drevo/dates/parsing.py

from __future__ import annotations

import re
from datetime import date
from typing import Optional


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Day and month may be one or two digits on input; zero padding is not significant.
FULL_DATE_RE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")
YEAR_ONLY_RE = re.compile(r"^(\d{4})$")

GEDCOM_MONTHS = [
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
]

RU_MONTHS_GENITIVE = [
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
]


def _full_parts(value: str) -> Optional[tuple[int, int, int]]:
    match = FULL_DATE_RE.match(value.strip())
    if not match:
        return None
    day, month, year = (int(g) for g in match.groups())
    return day, month, year


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a loosely formatted record date.

    Accepted forms:
      - ""           -> None (unknown)
      - "YYYY"       -> January 1st of that year
      - "D.M.YYYY"   -> that exact day (also "DD.MM.YYYY")

    Anything else, including impossible calendar days, degrades to None.
    """
    if not value or not value.strip():
        return None
    trimmed = value.strip()

    parts = _full_parts(trimmed)
    if parts:
        day, month, year = parts
        try:
            return date(year, month, day)
        except ValueError:
            return None

    year_match = YEAR_ONLY_RE.match(trimmed)
    if year_match:
        year = int(year_match.group(1))
        if year < 1:
            return None
        return date(year, 1, 1)

    return None


def is_full_date(value: Optional[str]) -> bool:
    """True only for the day-month-year form."""
    if not value:
        return False
    return FULL_DATE_RE.match(value.strip()) is not None


def get_day_month(value: Optional[str]) -> Optional[str]:
    """Zero-padded ``DD.MM`` of a full date, else None."""
    if not is_full_date(value):
        return None
    day, month, _ = _full_parts(value)  # type: ignore[misc]
    return f"{day:02d}.{month:02d}"


def format_date_ru(value: Optional[str]) -> str:
    """Human-readable Russian rendering: ``"1990 г."`` or ``"25 декабря 1990 г."``."""
    if not value or not value.strip():
        return ""
    trimmed = value.strip()

    if YEAR_ONLY_RE.match(trimmed):
        return f"{trimmed} г."

    parts = _full_parts(trimmed)
    if not parts or not 1 <= parts[1] <= 12:
        return trimmed
    day, month, year = parts
    return f"{day} {RU_MONTHS_GENITIVE[month - 1]} {year} г."


def to_gedcom_date(value: Optional[str]) -> str:
    """
    Rewrite a record date for GEDCOM: ``DD.MM.YYYY`` -> ``D MON YYYY``.

    Year-only dates pass through; unknown or unparseable dates become "".
    """
    if not value or not value.strip():
        return ""
    trimmed = value.strip()

    if YEAR_ONLY_RE.match(trimmed):
        return trimmed

    parts = _full_parts(trimmed)
    if not parts or not 1 <= parts[1] <= 12:
        return ""
    day, month, year = parts
    return f"{day} {GEDCOM_MONTHS[month - 1]} {year}"
