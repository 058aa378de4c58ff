"""
Date helpers for record strings (``""``, ``"YYYY"``, ``"D.M.YYYY"``):
parsing, age arithmetic, zodiac signs and GEDCOM date rewriting.
"""

from .age import calculate_age, calculate_age_number, year_word
from .parsing import (
    format_date_ru,
    get_day_month,
    is_full_date,
    parse_date,
    to_gedcom_date,
)
from .zodiac import get_zodiac

__all__ = [
    "calculate_age",
    "calculate_age_number",
    "format_date_ru",
    "get_day_month",
    "get_zodiac",
    "is_full_date",
    "parse_date",
    "to_gedcom_date",
    "year_word",
]
