import logging

import pytest

from admissions.business import AdmissionRecord, AdmissionsDesk
from admissions.datastructures import EmptyQueueError


def rec(case_id, level, arrival):
    return AdmissionRecord(case_id, f"patient {case_id}", level, arrival)


def test_desk_calls_most_urgent_first():
    desk = AdmissionsDesk(capacity=5)
    desk.admit_all([rec("a", 3, 0), rec("b", 1, 1), rec("c", 3, 2), rec("d", 2, 3)])
    assert desk.waiting() == 4
    assert desk.peek_next().case_id == "b"
    assert [r.case_id for r in desk.discharge_all()] == ["b", "d", "a", "c"]
    assert desk.waiting() == 0


def test_full_desk_turns_patients_away(caplog):
    desk = AdmissionsDesk(capacity=2)
    with caplog.at_level(logging.WARNING, logger="admissions.business.triage"):
        accepted = desk.admit_all([rec("a", 2, 0), rec("b", 2, 1), rec("c", 1, 2)])
    assert accepted == 2
    assert desk.is_full()
    assert [r.case_id for r in desk.turned_away] == ["c"]
    assert "turned away c" in caplog.text


def test_next_patient_on_empty_desk():
    desk = AdmissionsDesk(capacity=1)
    with pytest.raises(EmptyQueueError):
        desk.next_patient()


def test_roster_and_reset():
    desk = AdmissionsDesk(capacity=1)
    desk.admit(rec("a", 4, 0))
    desk.admit(rec("b", 1, 1))
    assert desk.roster() == "a | patient a | triage 4 | arrival 0"
    desk.reset()
    assert desk.waiting() == 0
    assert desk.turned_away == []
    assert desk.roster() == ""
    assert desk.capacity() == 1


def test_default_capacity_from_settings():
    from admissions.settings import DEFAULT_CAPACITY

    assert AdmissionsDesk().capacity() == DEFAULT_CAPACITY
