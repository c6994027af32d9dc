from __future__ import annotations

import io
from datetime import date, datetime

import pytest
from openpyxl import Workbook

from megasena.errors import ValidationError
from megasena.services.draw_import_service import (
    DrawImportService,
    normalize_key,
    parse_date,
    rows_to_draws,
)


def test_normalize_key():
    assert normalize_key("Bola 1") == "bola1"
    assert normalize_key("1ª Dezena") == "1adezena"
    assert normalize_key("Data do Sorteio") == "datadosorteio"
    assert normalize_key("Dezena_06") == "dezena06"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("11/03/1996", date(1996, 3, 11)),
        ("1-2-2024", date(2024, 2, 1)),
        ("2024-02-01", date(2024, 2, 1)),
        (datetime(2020, 5, 6, 20, 0), date(2020, 5, 6)),
        (45292, date(2024, 1, 1)),
        ("not a date", None),
        ("", None),
        (None, None),
        (123, None),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


def test_rows_to_draws_finds_header_and_sorts_desc():
    rows = [
        ["Resultados da Mega-Sena"],
        [],
        ["Concurso", "Data Sorteio", "Bola1", "Bola2", "Bola3", "Bola4", "Bola5", "Bola6", "Ganhadores"],
        ["1", "11/03/1996", "41", "5", "4", "52", "30", "33", "0"],
        ["2", "18/03/1996", "9", "39", "37", "49", "43", "41", "1"],
        ["", "", "", "", "", "", "", "", ""],
    ]
    draws = rows_to_draws(rows)

    assert [d.id for d in draws] == [2, 1]
    assert draws[1].numbers == (4, 5, 30, 33, 41, 52)
    assert draws[1].date == "11/03/1996"


def test_rows_to_draws_alternative_column_names():
    rows = [
        ["Conc", "Dt", "1ª Dezena", "2ª Dezena", "3ª Dezena", "4ª Dezena", "5ª Dezena", "6ª Dezena"],
        [2800, "2024-12-31", 1, 17, 19, 29, 50, 57],
    ]
    draws = rows_to_draws(rows)

    assert len(draws) == 1
    assert draws[0].id == 2800
    assert draws[0].date == "31/12/2024"
    assert draws[0].numbers == (1, 17, 19, 29, 50, 57)


def test_rows_to_draws_skips_invalid_rows():
    rows = [
        ["Concurso", "Data", "Dezena1", "Dezena2", "Dezena3", "Dezena4", "Dezena5", "Dezena6"],
        ["10", "01/01/2020", "1", "2", "3", "4", "5", "61"],
        ["11", "02/01/2020", "1", "1", "3", "4", "5", "6"],
        ["12", "", "1", "2", "3", "4", "5", "6"],
        ["13", "04/01/2020", "1", "2", "3", "4", "5", "6"],
    ]
    assert [d.id for d in rows_to_draws(rows)] == [13]


def test_rows_to_draws_last_duplicate_wins():
    rows = [
        ["Concurso", "Data", "n1", "n2", "n3", "n4", "n5", "n6"],
        ["5", "01/01/2020", "1", "2", "3", "4", "5", "6"],
        ["5", "01/01/2020", "7", "8", "9", "10", "11", "12"],
    ]
    draws = rows_to_draws(rows)

    assert len(draws) == 1
    assert draws[0].numbers == (7, 8, 9, 10, 11, 12)


def test_parse_csv_with_semicolons():
    content = (
        "Concurso;Data Sorteio;Bola1;Bola2;Bola3;Bola4;Bola5;Bola6\n"
        "2000;10/10/2017;1;2;3;4;5;6\n"
        "2001;14/10/2017;10;20;30;40;50;60\n"
    ).encode("utf-8")

    draws = DrawImportService().parse("resultados.csv", content)

    assert [d.id for d in draws] == [2001, 2000]
    assert draws[0].numbers == (10, 20, 30, 40, 50, 60)


def test_parse_xlsx():
    wb = Workbook()
    ws = wb.active
    ws.append(["Mega-Sena"])
    ws.append(["Concurso", "Data do Sorteio", "Bola 1", "Bola 2", "Bola 3", "Bola 4", "Bola 5", "Bola 6"])
    ws.append([1, datetime(1996, 3, 11), 41, 5, 4, 52, 30, 33])
    ws.append([2, datetime(1996, 3, 18), 9, 39, 37, 49, 43, 41])
    buf = io.BytesIO()
    wb.save(buf)

    draws = DrawImportService().parse("mega.xlsx", buf.getvalue())

    assert [d.id for d in draws] == [2, 1]
    assert draws[0].date == "18/03/1996"
    assert draws[0].numbers == (9, 37, 39, 41, 43, 49)


def test_parse_without_recognizable_columns_fails():
    with pytest.raises(ValidationError):
        DrawImportService().parse("x.csv", b"foo,bar\n1,2\n")


def test_parse_broken_xlsx_fails():
    with pytest.raises(ValidationError):
        DrawImportService().parse("x.xlsx", b"definitely not a zip file")
