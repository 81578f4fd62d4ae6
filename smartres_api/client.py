"""
HTTP client for the assignments API.

Used by the scheduling UI (or a script) to load an assignment into a
ScheduleEditor and submit the edited schedule back in one request.
"""
from __future__ import annotations

import logging

import requests

from smartres_api.common.dates import parse_date
from smartres_api.services.schedule_editor import ScheduleEditor

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class ScheduleCommitError(RuntimeError):
    """The server did not accept a schedule revision. Nothing was changed locally."""

    def __init__(self, message: str = "Failed to update schedule", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AssignmentsClient:
    def __init__(self, base_url: str, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/assignments"

    def get(self, assignment_id: str) -> dict:
        resp = self.session.get(f"{self.url}/{assignment_id}", timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()["data"]

    def open_editor(self, assignment_id: str) -> ScheduleEditor:
        """Fetch an assignment and start an editor on its current period and schedule."""
        a = self.get(assignment_id)
        return ScheduleEditor(parse_date(a["startDate"]), parse_date(a["endDate"]), a.get("schedule"))

    def revise_schedule(self, assignment_id: str, editor: ScheduleEditor) -> dict:
        """
        Validate the editor and, if it passes, replace the assignment's schedule.

        ScheduleValidationError propagates untouched and no request is sent.
        Any other failure (HTTP error, 404, transport error, malformed reply)
        raises ScheduleCommitError. There is no retry.
        """
        editor.validate()
        payload = {"id": assignment_id, "schedule": editor.to_payload()}

        try:
            resp = self.session.put(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("schedule commit for %s failed: %s", assignment_id, e)
            raise ScheduleCommitError() from e

        if resp.status_code != 200:
            log.warning("schedule commit for %s rejected: HTTP %s", assignment_id, resp.status_code)
            raise ScheduleCommitError(status_code=resp.status_code)
        try:
            body = resp.json()
        except ValueError as e:
            raise ScheduleCommitError(status_code=resp.status_code) from e
        if not body.get("success"):
            raise ScheduleCommitError(status_code=resp.status_code)

        log.info("schedule for %s committed (%d ranges)", assignment_id, len(editor))
        return body["data"]
