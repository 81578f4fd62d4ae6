"""
Schedule editing for a single assignment.

An assignment covers an original period [orig_start, orig_end]. Its schedule is
an ordered list of sub-ranges inside that period which the user can split,
shrink, grow or delete before submitting a revision. Dates may be moved freely
while editing; ordering across ranges is only enforced by `validate()`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from smartres_api.common.dates import parse_date

log = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)

START, END = "start", "end"

INVERSION = "inversion"
OUT_OF_BOUNDS = "out-of-bounds"
OVERLAP = "overlap"


@dataclass
class DateRange:
    start: date
    end: date

    def as_entry(self, status: str = "active") -> dict:
        return {"startDate": self.start.isoformat(), "endDate": self.end.isoformat(), "status": status}


class ScheduleValidationError(ValueError):
    """A schedule failed validation; `index` is 1-based."""

    def __init__(self, index: int, kind: str, message: str):
        super().__init__(message)
        self.index = index
        self.kind = kind
        self.message = message


def ranges_from_entries(entries: Iterable[dict]) -> List[DateRange]:
    """Build DateRanges from stored/wire entries ({"startDate", "endDate"})."""
    out = []
    for i, e in enumerate(entries, start=1):
        s = parse_date(e.get("startDate"))
        en = parse_date(e.get("endDate"))
        if s is None or en is None:
            raise ScheduleValidationError(i, INVERSION, f"Range {i}: start and end dates are required")
        out.append(DateRange(s, en))
    return out


def validate_ranges(ranges: List[DateRange], orig_start: date, orig_end: date) -> None:
    """
    Check, range by range in order:
      1) start <= end
      2) both dates inside [orig_start, orig_end]
      3) start strictly after the previous range's end (no overlap, no touching)
    Raises ScheduleValidationError on the first violation.
    """
    if not ranges:
        raise ScheduleValidationError(0, INVERSION, "Schedule must contain at least one range")

    prev: Optional[DateRange] = None
    for i, r in enumerate(ranges, start=1):
        if r.start > r.end:
            raise ScheduleValidationError(
                i, INVERSION, f"Range {i}: start date {r.start.isoformat()} is after end date {r.end.isoformat()}"
            )
        if r.start < orig_start or r.end > orig_end:
            raise ScheduleValidationError(
                i,
                OUT_OF_BOUNDS,
                f"Range {i} must fall within the assignment period "
                f"{orig_start.isoformat()} to {orig_end.isoformat()}",
            )
        if prev is not None and r.start <= prev.end:
            raise ScheduleValidationError(
                i, OVERLAP, f"Range {i} overlaps the previous range (ends {prev.end.isoformat()})"
            )
        prev = r


def overall_bounds(ranges: Iterable[DateRange]) -> Tuple[date, date]:
    """(earliest start, latest end) across all ranges."""
    ranges = list(ranges)
    if not ranges:
        raise ValueError("overall_bounds() needs at least one range")
    return min(r.start for r in ranges), max(r.end for r in ranges)


class ScheduleEditor:
    """In-memory editor for one assignment's schedule."""

    def __init__(self, orig_start: date, orig_end: date, schedule: Optional[Iterable[dict]] = None):
        if orig_start > orig_end:
            raise ValueError("original start must not be after original end")
        self.orig_start = orig_start
        self.orig_end = orig_end
        ranges = ranges_from_entries(schedule) if schedule else []
        self.ranges: List[DateRange] = ranges or [DateRange(orig_start, orig_end)]

    @classmethod
    def for_assignment(cls, assignment) -> "ScheduleEditor":
        return cls(assignment.start_date, assignment.end_date, assignment.schedule)

    def __len__(self):
        return len(self.ranges)

    def _check_index(self, index: int):
        if not 0 <= index < len(self.ranges):
            raise IndexError(f"no range at index {index}")

    def split(self, index: int) -> DateRange:
        """Insert a zero-width range the day after range `index` ends (clamped to orig_end)."""
        self._check_index(index)
        day = min(self.ranges[index].end + ONE_DAY, self.orig_end)
        new = DateRange(day, day)
        self.ranges.insert(index + 1, new)
        return new

    def remove(self, index: int) -> bool:
        """Drop range `index`. The last remaining range cannot be removed."""
        self._check_index(index)
        if len(self.ranges) == 1:
            log.debug("refusing to remove the only schedule range")
            return False
        del self.ranges[index]
        return True

    def set_date(self, index: int, field: str, value) -> DateRange:
        self._check_index(index)
        d = parse_date(value)
        if d is None:
            raise ValueError(f"invalid date: {value!r}")
        r = self.ranges[index]
        if field == START:
            r.start = d
            if d > r.end:
                r.end = d
        elif field == END:
            r.end = d
            if d < r.start:
                r.start = d
        else:
            raise ValueError(f"field must be '{START}' or '{END}'")
        return r

    def bounds(self, index: int, field: str) -> Tuple[date, Optional[date]]:
        """
        (min, max) a date picker should offer for `field` of range `index`.
        max None means unconstrained.
        """
        self._check_index(index)
        r = self.ranges[index]
        if field == START:
            lo = self.orig_start if index == 0 else self.ranges[index - 1].end + ONE_DAY
            return lo, None
        if field == END:
            last = index == len(self.ranges) - 1
            hi = self.orig_end if last else self.ranges[index + 1].start - ONE_DAY
            return r.start, hi
        raise ValueError(f"field must be '{START}' or '{END}'")

    def validate(self) -> None:
        validate_ranges(self.ranges, self.orig_start, self.orig_end)

    def to_payload(self) -> List[dict]:
        return [r.as_entry("active") for r in self.ranges]
