from __future__ import annotations

from datetime import date
from typing import Iterator, Protocol

from ..core.enums import LeaveCategory, RequestStatus
from .model import LeaveRequest


class RequestRepository(Protocol):
    def allocate(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        duration: int,
        category: LeaveCategory,
        reason: str,
    ) -> LeaveRequest:
        """Store a new PENDING request under the next sequential id."""

        raise NotImplementedError

    def get(self, request_id: int) -> LeaveRequest:
        raise NotImplementedError

    def all(self) -> Iterator[LeaveRequest]:
        """Fresh snapshot iterator on every call, in id order."""

        raise NotImplementedError

    def set_status(
        self,
        request_id: int,
        *,
        status: RequestStatus,
        reviewed_by: str,
        comment: str,
    ) -> LeaveRequest:
        """Record a review outcome. Transition legality is the caller's job."""

        raise NotImplementedError
