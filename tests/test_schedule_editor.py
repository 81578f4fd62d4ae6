from datetime import date

import pytest

from smartres_api.services.schedule_editor import (
    DateRange,
    INVERSION,
    OUT_OF_BOUNDS,
    OVERLAP,
    ScheduleEditor,
    ScheduleValidationError,
    overall_bounds,
    validate_ranges,
)

JAN1, JAN31 = date(2024, 1, 1), date(2024, 1, 31)


def d(day):
    return date(2024, 1, day)


def _editor(*ranges):
    sched = [{"startDate": d(s).isoformat(), "endDate": d(e).isoformat()} for s, e in ranges]
    return ScheduleEditor(JAN1, JAN31, sched)


def test_new_editor_starts_with_full_period():
    ed = ScheduleEditor(JAN1, JAN31)
    assert ed.ranges == [DateRange(JAN1, JAN31)]


def test_split_at_end_of_period_clamps_to_original_end():
    ed = ScheduleEditor(JAN1, JAN31)
    new = ed.split(0)
    assert ed.ranges[0] == DateRange(JAN1, JAN31)
    assert new == DateRange(JAN31, JAN31)
    assert len(ed) == 2


def test_split_inserts_zero_width_range_after():
    ed = _editor((1, 10), (20, 25))
    ed.split(0)
    assert ed.ranges[1] == DateRange(d(11), d(11))
    assert ed.ranges[1].start > ed.ranges[0].end
    assert ed.ranges[2] == DateRange(d(20), d(25))
    ed.validate()


def test_moving_start_back_into_previous_range_is_an_overlap():
    ed = _editor((1, 10), (11, 20))
    ed.set_date(1, "start", "2024-01-05")
    with pytest.raises(ScheduleValidationError) as exc:
        ed.validate()
    assert exc.value.index == 2
    assert exc.value.kind == OVERLAP
    assert "Range 2" in str(exc.value)


def test_remove_only_range_is_refused():
    ed = _editor((1, 10))
    assert ed.remove(0) is False
    assert ed.ranges == [DateRange(d(1), d(10))]


def test_remove_drops_range():
    ed = _editor((1, 10), (12, 20))
    assert ed.remove(0) is True
    assert ed.ranges == [DateRange(d(12), d(20))]


def test_set_end_then_start_past_it_pushes_end():
    ed = _editor((1, 10))
    ed.set_date(0, "end", "2024-01-05")
    assert ed.ranges[0] == DateRange(d(1), d(5))
    ed.set_date(0, "start", "2024-01-08")
    assert ed.ranges[0] == DateRange(d(8), d(8))


def test_set_end_before_start_pulls_start():
    ed = _editor((5, 10))
    ed.set_date(0, "end", d(3))
    assert ed.ranges[0] == DateRange(d(3), d(3))


def test_set_date_rejects_bad_input():
    ed = _editor((1, 10))
    with pytest.raises(ValueError):
        ed.set_date(0, "start", "not a date")
    with pytest.raises(ValueError):
        ed.set_date(0, "middle", "2024-01-02")
    with pytest.raises(IndexError):
        ed.set_date(3, "start", "2024-01-02")


def test_touching_ranges_overlap():
    with pytest.raises(ScheduleValidationError) as exc:
        validate_ranges([DateRange(d(1), d(10)), DateRange(d(10), d(20))], JAN1, JAN31)
    assert exc.value.kind == OVERLAP


def test_inversion_is_reported_before_bounds():
    with pytest.raises(ScheduleValidationError) as exc:
        validate_ranges([DateRange(d(10), date(2023, 12, 1))], JAN1, JAN31)
    assert exc.value.kind == INVERSION
    assert exc.value.index == 1


def test_out_of_bounds():
    with pytest.raises(ScheduleValidationError) as exc:
        validate_ranges([DateRange(d(1), d(5)), DateRange(d(20), date(2024, 2, 3))], JAN1, JAN31)
    assert exc.value.kind == OUT_OF_BOUNDS
    assert exc.value.index == 2
    assert "2024-01-01 to 2024-01-31" in exc.value.message


def test_bounds_for_date_pickers():
    ed = _editor((1, 10), (15, 20), (25, 31))
    assert ed.bounds(0, "start") == (JAN1, None)
    assert ed.bounds(1, "start") == (d(11), None)
    assert ed.bounds(0, "end") == (d(1), d(14))
    assert ed.bounds(2, "end") == (d(25), JAN31)


def test_payload_and_overall_bounds():
    ed = _editor((1, 15), (16, 31))
    ed.validate()
    assert ed.to_payload() == [
        {"startDate": "2024-01-01", "endDate": "2024-01-15", "status": "active"},
        {"startDate": "2024-01-16", "endDate": "2024-01-31", "status": "active"},
    ]
    assert overall_bounds(ed.ranges) == (JAN1, JAN31)


def test_editor_for_stored_assignment():
    from smartres_api.models.assignment import Assignment

    a = Assignment(start_date=JAN1, end_date=JAN31,
                   schedule=[{"startDate": "2024-01-02", "endDate": "2024-01-09", "status": "active"}])
    ed = ScheduleEditor.for_assignment(a)
    assert ed.ranges == [DateRange(d(2), d(9))]
    assert ed.bounds(0, "end") == (d(2), JAN31)
