from __future__ import annotations

from ..core.enums import RequestStatus
from ..requests.model import LeaveRequest
from ..requests.repository import RequestRepository


def _by_start(req: LeaveRequest):
    return (req.start_date, req.request_id)


class LeaveQueries:
    """Read-only views over the request ledger."""

    def __init__(self, requests: RequestRepository):
        self._requests = requests

    def requests_for(self, employee_id: str) -> list[LeaveRequest]:
        """An employee's own history, most recent start date first."""
        items = [r for r in self._requests.all() if r.employee_id == employee_id]
        items.sort(key=_by_start, reverse=True)
        return items

    def pending(self) -> list[LeaveRequest]:
        """Review queue, earliest start date first."""
        items = [r for r in self._requests.all() if r.status == RequestStatus.PENDING]
        items.sort(key=_by_start)
        return items

    def decided(self) -> list[LeaveRequest]:
        items = [r for r in self._requests.all() if r.status != RequestStatus.PENDING]
        items.sort(key=_by_start, reverse=True)
        return items

    def all(self) -> list[LeaveRequest]:
        return sorted(self._requests.all(), key=_by_start)
