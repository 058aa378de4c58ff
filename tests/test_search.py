# tests/test_search.py

from __future__ import annotations

from drevo.search import normalize_search_query, search


def test_normalize_lowercases_and_trims():
    assert normalize_search_query("  ИВАНОВ ") == "иванов"
    assert normalize_search_query("") == ""


def test_normalize_month_names():
    assert normalize_search_query("Января") == ".01."
    assert normalize_search_query("25 янв") == "25 .01."
    assert normalize_search_query("май") == ".05."


def test_normalize_leaves_fragment_when_shorter_form_comes_first():
    assert normalize_search_query("25 Марта") == "25 .03.а"
    assert normalize_search_query("январ") == ".01.ар"


def test_empty_query_matches_nobody(memory_store):
    assert search(memory_store, "") == []
    assert search(memory_store, "   ") == []


def test_name_search(memory_store):
    results = search(memory_store, "иван")
    assert [r.id for r in results] == [1, 2, 3, 4, 5]
    assert {r.match_field for r in results} == {"name"}


def test_full_name_search(memory_store):
    results = search(memory_store, "иванов петр")
    assert [r.id for r in results] == [3]


def test_id_wins_over_later_fields(memory_store):
    fields = {r.id: r.match_field for r in search(memory_store, "5")}
    assert fields == {1: "deathDay", 2: "birthDay", 5: "id"}


def test_month_name_matches_dates(memory_store):
    fields = {r.id: r.match_field for r in search(memory_store, "мар")}
    assert fields == {1: "deathDay", 5: "birthDay"}


def test_place_and_address(memory_store):
    assert {r.id: r.match_field for r in search(memory_store, "тула")} == {2: "birthPlace"}
    assert {r.id: r.match_field for r in search(memory_store, "ленина")} == {1: "address"}


def test_marry_day(memory_store):
    fields = {r.id: r.match_field for r in search(memory_store, "12.06")}
    assert fields == {1: "marryDay", 2: "marryDay"}


def test_result_carries_photo_and_age(memory_store):
    (ivan,) = [r for r in search(memory_store, "1") if r.id == 1]
    assert ivan.photo == "1#1.jpg"
    assert ivan.age == "70 лет"
