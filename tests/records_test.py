import pytest

from admissions.business.records import AdmissionRecord


def rec(case_id, level, arrival, name="Pat", complaint=""):
    return AdmissionRecord(case_id, name, level, arrival, complaint)


def test_lower_triage_level_goes_first():
    urgent = rec("A", 1, 10)
    minor = rec("B", 4, 0)
    assert urgent < minor
    assert minor > urgent
    assert urgent.compare_to(minor) == -1
    assert minor.compare_to(urgent) == 1


def test_same_level_orders_by_arrival():
    early = rec("A", 3, 1)
    late = rec("B", 3, 2)
    assert early < late
    assert early <= late
    assert late >= early


def test_equal_priority_compares_zero_but_not_equal():
    a = rec("A", 2, 5)
    b = rec("B", 2, 5)
    assert a.compare_to(b) == 0
    assert a <= b and a >= b
    assert not (a < b or a > b)
    assert a != b


def test_comparison_with_other_types_is_unsupported():
    with pytest.raises(TypeError):
        rec("A", 1, 0) < 3


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(case_id="", name="x", triage_level=1, arrival=0),
        dict(case_id="A", name="x", triage_level=0, arrival=0),
        dict(case_id="A", name="x", triage_level=6, arrival=0),
        dict(case_id="A", name="x", triage_level="2", arrival=0),
        dict(case_id="A", name="x", triage_level=2, arrival=-1),
        dict(case_id="A", name="x", triage_level=True, arrival=0),
    ],
)
def test_invalid_fields_rejected(kwargs):
    with pytest.raises(ValueError):
        AdmissionRecord(**kwargs)


def test_str_is_single_line():
    r = rec("C-17", 2, 4, name="Ada Lovelace", complaint="chest pain")
    assert str(r) == "C-17 | Ada Lovelace | triage 2 | arrival 4 | chest pain"
    assert str(rec("C-1", 5, 0, name="Bob")) == "C-1 | Bob | triage 5 | arrival 0"


def test_row_conversion():
    r = AdmissionRecord.from_row(
        {"case_id": " C-2 ", "name": "Eve", "triage_level": "3", "arrival": " 7", "complaint": None}
    )
    assert (r.case_id, r.name, r.triage_level, r.arrival, r.complaint) == ("C-2", "Eve", 3, 7, "")
    assert r.to_row() == {
        "case_id": "C-2",
        "name": "Eve",
        "triage_level": 3,
        "arrival": 7,
        "complaint": "",
    }


def test_from_row_bad_number():
    with pytest.raises(ValueError):
        AdmissionRecord.from_row({"case_id": "C", "name": "n", "triage_level": "high", "arrival": "1"})


def test_from_row_missing_field():
    # DictReader fills cells missing from a short row with None
    with pytest.raises(ValueError, match="triage_level is required"):
        AdmissionRecord.from_row({"case_id": "C", "name": "n", "triage_level": None, "arrival": None})
    with pytest.raises(ValueError, match="arrival is required"):
        AdmissionRecord.from_row({"case_id": "C", "name": "n", "triage_level": "2", "arrival": " "})
