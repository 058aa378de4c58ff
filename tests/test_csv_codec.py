# tests/test_csv_codec.py

from __future__ import annotations

from pathlib import Path

import pytest

from drevo.codecs.csv_codec import (
    CsvRowError,
    export_favorites_csv,
    export_to_csv,
    parse_csv_line,
    parse_favorites_csv,
    parse_ids,
    parse_persons_csv,
    parse_persons_csv_string,
)
from drevo.core.exceptions import StoreLoadError
from drevo.models import Sex


def test_parse_line_maps_all_fields():
    person = parse_csv_line("3;1;Иванов;Петр;1;2;Москва;20.07.1960;;;Москва;4;5;1;1;0;")

    assert person.id == 3
    assert person.sex == Sex.MALE
    assert person.last_name == "Иванов"
    assert person.first_name == "Петр"
    assert (person.father_id, person.mother_id) == (1, 2)
    assert person.birth_place == "Москва"
    assert person.birth_day == "20.07.1960"
    assert person.is_alive
    assert person.spouse_ids == [4]
    assert person.children_ids == [5]
    assert (person.order_by_dad, person.order_by_mom, person.order_by_spouse) == (1, 1, 0)
    assert person.marry_day == ""


def test_parse_line_trims_fields_and_ignores_extra_columns():
    person = parse_csv_line(" 7 ; 0 ; Петрова ; Ольга ;;;;;;;;;;;;; ;extra;more")
    assert person.id == 7
    assert person.sex == Sex.FEMALE
    assert person.last_name == "Петрова"
    assert person.first_name == "Ольга"


def test_parse_line_rejects_short_rows_and_bad_ids():
    with pytest.raises(CsvRowError):
        parse_csv_line("1;1;Иванов;Иван")
    with pytest.raises(CsvRowError):
        parse_csv_line("abc;1;;;;;;;;;;;;;;;")
    with pytest.raises(CsvRowError):
        parse_csv_line("0;1;;;;;;;;;;;;;;;")


def test_parse_ids_drops_junk_tokens():
    assert parse_ids("4  x 0 -2 9") == [4, 9]
    assert parse_ids("") == []
    assert parse_ids(None) == []


def test_unknown_sex_code_is_female():
    person = parse_csv_line("8;2;;Кто-то;;;;;;;;;;;;;")
    assert person.sex == Sex.FEMALE


def test_string_parse_counts_skipped_rows(family_csv):
    content = "\ufeff" + family_csv + "\n\nсломанная строка\n9;1;Нет;Полей\n"
    result = parse_persons_csv_string(content)

    assert sorted(result.persons) == [1, 2, 3, 4, 5]
    assert result.skipped == 2


def test_duplicate_id_last_row_wins():
    content = "1;1;Старый;;;;;;;;;;;;;;\n1;1;Новый;;;;;;;;;;;;;;"
    result = parse_persons_csv_string(content)
    assert result.persons[1].last_name == "Новый"


def test_export_reproduces_canonical_input(family_csv):
    result = parse_persons_csv_string(family_csv)
    assert export_to_csv(result.persons) == family_csv


def test_export_sorts_by_id(family_csv):
    lines = family_csv.split("\n")
    shuffled = "\n".join(reversed(lines))
    exported = export_to_csv(parse_persons_csv_string(shuffled).persons)
    assert [line.split(";")[0] for line in exported.split("\n")] == ["1", "2", "3", "4", "5"]


def test_missing_population_file_raises(tmp_path: Path):
    with pytest.raises(StoreLoadError):
        parse_persons_csv(tmp_path / "nope.csv")


def test_favorites_keep_empty_slots(tmp_path: Path):
    path = tmp_path / "fav.csv"
    path.write_text("5;0;x;1\n", encoding="utf-8")
    assert parse_favorites_csv(path) == [5, 0, 1]
    assert parse_favorites_csv(tmp_path / "missing.csv") == []
    assert export_favorites_csv([5, 0, 1]) == "5;0;1"
