# tests/test_dates.py

from __future__ import annotations

from datetime import date

from drevo.dates import (
    calculate_age,
    calculate_age_number,
    format_date_ru,
    get_day_month,
    get_zodiac,
    is_full_date,
    parse_date,
    to_gedcom_date,
    year_word,
)


def test_parse_full_date():
    assert parse_date("25.12.1990") == date(1990, 12, 25)


def test_parse_single_digit_day_and_month():
    assert parse_date("5.3.1990") == date(1990, 3, 5)


def test_parse_year_only_is_january_first():
    assert parse_date("1962") == date(1962, 1, 1)


def test_parse_rejects_garbage_and_impossible_days():
    assert parse_date("") is None
    assert parse_date("   ") is None
    assert parse_date(None) is None
    assert parse_date("около 1900") is None
    assert parse_date("31.04.1990") is None
    assert parse_date("29.02.1991") is None
    assert parse_date("0000") is None


def test_is_full_date():
    assert is_full_date("01.01.1930")
    assert not is_full_date("1930")
    assert not is_full_date("")


def test_get_day_month_is_zero_padded():
    assert get_day_month("5.3.1990") == "05.03"
    assert get_day_month("1990") is None


def test_age_of_deceased_uses_death_date():
    assert calculate_age_number("01.01.1930", "15.03.2000") == 70
    assert calculate_age("01.01.1930", "15.03.2000") == "70 лет"


def test_age_counts_completed_years_only():
    today = date(2026, 3, 14)
    assert calculate_age_number("15.03.1990", "", today) == 35
    assert calculate_age_number("14.03.1990", "", today) == 36


def test_age_unknown_when_dates_do_not_parse():
    assert calculate_age_number("", "") == -1
    assert calculate_age_number("01.01.1930", "когда-то") == -1
    assert calculate_age("", "") == ""


def test_year_word_agreement():
    assert year_word(1) == "год"
    assert year_word(21) == "год"
    assert year_word(3) == "года"
    assert year_word(44) == "года"
    assert year_word(5) == "лет"
    assert year_word(11) == "лет"
    assert year_word(12) == "лет"
    assert year_word(111) == "лет"
    assert year_word(0) == "лет"


def test_zodiac_boundaries():
    assert str(get_zodiac("20.07.1960")) == "♋ Рак"
    assert get_zodiac("31.12.1990").name == "Козерог"
    assert get_zodiac("19.01.1990").name == "Козерог"
    assert get_zodiac("20.01.1990").name == "Водолей"
    assert get_zodiac("1990") is None


def test_format_date_ru():
    assert format_date_ru("25.12.1990") == "25 декабря 1990 г."
    assert format_date_ru("1990") == "1990 г."
    assert format_date_ru("") == ""


def test_to_gedcom_date():
    assert to_gedcom_date("01.01.1930") == "1 JAN 1930"
    assert to_gedcom_date("15.3.2000") == "15 MAR 2000"
    assert to_gedcom_date("1962") == "1962"
    assert to_gedcom_date("весной") == ""
