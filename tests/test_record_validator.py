import math

import pytest

from mentorium.validation import RecordValidator, parse_float


def _row(student_id="12345678", index_no="1234567", name="Mensah, Ama", cwa="75.5") -> dict:
    return {"STUDENTID": student_id, "INDEXNO": index_no, "NAME": name, "CWA": cwa}


def test_valid_rows() -> None:
    result = RecordValidator().validate([_row(), _row(student_id=23456789, cwa=88)])
    assert result.errors == []
    assert result.is_valid
    assert [s.student_id for s in result.students] == ["12345678", "23456789"]
    assert result.students[0].cwa == 75.5
    assert result.students[1].cwa == 88.0


def test_no_sheets() -> None:
    result = RecordValidator().validate(None)
    assert result.students == []
    assert result.errors == ["No sheets found in file"]


def test_empty_sheet() -> None:
    result = RecordValidator().validate([])
    assert result.students == []
    assert result.errors == ["Sheet is empty"]


def test_short_student_id_keeps_row() -> None:
    result = RecordValidator().validate([_row(student_id="1234567")])
    assert result.errors == ["Row 2: STUDENTID must be 8 digits"]
    assert len(result.students) == 1
    assert result.students[0].student_id == "1234567"
    assert result.to_dict()["errors"] == result.errors


def test_row_numbers_count_header() -> None:
    rows = [_row(), _row(), _row(index_no="12345")]
    result = RecordValidator().validate(rows)
    assert result.errors == ["Row 4: INDEXNO must be 7 digits"]


def test_all_field_errors_in_order() -> None:
    result = RecordValidator().validate([_row(student_id="abc", index_no="", name="  ", cwa="150")])
    assert result.errors == [
        "Row 2: STUDENTID must be 8 digits",
        "Row 2: INDEXNO must be 7 digits",
        "Row 2: NAME is required",
        "Row 2: CWA must be a number between 0 and 100",
    ]
    assert result.students[0].cwa == 150.0


@pytest.mark.parametrize("cwa", ["-20", "", "abc", "100.01", "Infinity"])
def test_cwa_out_of_range_or_unparseable(cwa) -> None:
    result = RecordValidator().validate([_row(cwa=cwa)])
    assert result.errors == ["Row 2: CWA must be a number between 0 and 100"]
    assert len(result.students) == 1


def test_unparseable_cwa_is_kept_as_nan() -> None:
    result = RecordValidator().validate([_row(cwa="n/a")])
    assert math.isnan(result.students[0].cwa)


@pytest.mark.parametrize("cwa,expected", [
    ("0", 0.0), ("100", 100.0), (" 64.5 ", 64.5), ("88.456", 88.46),
    ("70.125", 70.13), ("65abc", 65.0), (59.999, 60.0),
])
def test_cwa_is_rounded_to_two_decimals(cwa, expected) -> None:
    result = RecordValidator().validate([_row(cwa=cwa)])
    assert result.errors == []
    assert result.students[0].cwa == expected


def test_fields_are_trimmed() -> None:
    result = RecordValidator().validate([_row(student_id=" 12345678 ", index_no="1234567\t", name=" Kofi ")])
    student = result.students[0]
    assert result.errors == []
    assert (student.student_id, student.index_no, student.name) == ("12345678", "1234567", "Kofi")


def test_missing_columns_do_not_stop_row_checks() -> None:
    rows = [{"STUDENTID": "12345678", "NAME": "Kofi", "CWA": "70"}]
    result = RecordValidator().validate(rows)
    assert result.errors == [
        "Missing required column: INDEXNO",
        "Row 2: INDEXNO must be 7 digits",
    ]
    assert len(result.students) == 1


def test_column_names_are_case_sensitive() -> None:
    rows = [{"studentid": "12345678", "INDEXNO": "1234567", "NAME": "Kofi", "CWA": "70"}]
    result = RecordValidator().validate(rows)
    assert result.errors[0] == "Missing required column: STUDENTID"


def test_row_count_is_preserved() -> None:
    rows = [_row(), _row(cwa="bad"), _row(name=""), _row(student_id="x")]
    result = RecordValidator().validate(rows)
    assert len(result.students) == len(rows)


def test_input_rows_not_mutated() -> None:
    rows = [_row(student_id=" 12345678 ")]
    RecordValidator().validate(rows)
    assert rows[0]["STUDENTID"] == " 12345678 "


@pytest.mark.parametrize("text,expected", [
    ("42", 42.0), ("  -3.5", -3.5), (".5", 0.5), ("1e2", 100.0), ("7.", 7.0), ("12abc", 12.0),
])
def test_parse_float(text, expected) -> None:
    assert parse_float(text) == expected


@pytest.mark.parametrize("text", ["", "abc", ".", "nan", "-"])
def test_parse_float_nan(text) -> None:
    assert math.isnan(parse_float(text))
