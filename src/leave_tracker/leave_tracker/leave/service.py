from __future__ import annotations

import logging
import threading
from collections import defaultdict
from datetime import date

from ..common.datetime_utils import inclusive_days
from ..core.enums import Decision, LeaveCategory, RequestStatus
from ..core.exceptions import AlreadyReviewedError, InsufficientBalanceError, InvalidDateRangeError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..requests.model import LeaveRequest
from ..requests.repository import RequestRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Use case: submit and review leave requests.

    Only this class moves a request out of PENDING or touches a balance.
    Balances are checked twice: when the request is submitted and again
    when it is approved, since other approvals may have used the days up
    in between. An approval that no longer fits is recorded as REJECTED
    rather than raised.
    """

    def __init__(self, employees: EmployeeRepository, requests: RequestRepository):
        self._employees = employees
        self._requests = requests
        self._guard = threading.Lock()
        self._employee_locks: dict[str, threading.Lock] = defaultdict(threading.Lock)

    def _lock_for(self, employee_id: str) -> threading.Lock:
        with self._guard:
            return self._employee_locks[employee_id]

    @staticmethod
    def _covers(employee: Employee, category: LeaveCategory, duration: int) -> bool:
        if category == LeaveCategory.UNPAID:
            return True
        return employee.balance_for(category) >= duration

    def ensure_employee(self, employee_id: str) -> Employee:
        return self._employees.lookup(employee_id)

    def submit(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        category: LeaveCategory,
        reason: str = "",
    ) -> LeaveRequest:
        employee = self.ensure_employee(employee_id)

        duration = inclusive_days(start_date, end_date)
        if duration <= 0:
            raise InvalidDateRangeError("End date must be on or after start date")

        if not self._covers(employee, category, duration):
            raise InsufficientBalanceError(have=employee.balance_for(category), need=duration)

        req = self._requests.allocate(
            employee_id=employee.employee_id,
            start_date=start_date,
            end_date=end_date,
            duration=duration,
            category=category,
            reason=(reason or "").strip(),
        )
        logger.info(
            "leave_submitted",
            extra={
                "request_id": req.request_id,
                "employee_id": req.employee_id,
                "category": category.value,
                "duration": duration,
            },
        )
        return req

    def review(self, *, request_id: int, decision: Decision, reviewer_id: str) -> LeaveRequest:
        req = self._requests.get(request_id)

        with self._lock_for(req.employee_id):
            # Re-read under the lock: another reviewer may have got here first.
            req = self._requests.get(request_id)
            if not req.is_pending:
                raise AlreadyReviewedError(f"Leave request {req.request_id} is already {req.status.value}")

            if decision == Decision.REJECT:
                return self._record(req, RequestStatus.REJECTED, reviewer_id, f"Rejected by {reviewer_id}")

            employee = self._employees.lookup(req.employee_id)
            if not self._covers(employee, req.category, req.duration):
                have = employee.balance_for(req.category)
                comment = (
                    "Auto-rejected: insufficient balance at approval "
                    f"(have {have}, need {req.duration})"
                )
                return self._record(req, RequestStatus.REJECTED, reviewer_id, comment)

            self._employees.deduct(req.employee_id, req.category, req.duration)
            return self._record(req, RequestStatus.APPROVED, reviewer_id, f"Approved by {reviewer_id}")

    def _record(self, req: LeaveRequest, status: RequestStatus, reviewer_id: str, comment: str) -> LeaveRequest:
        updated = self._requests.set_status(
            req.request_id,
            status=status,
            reviewed_by=reviewer_id,
            comment=comment,
        )
        logger.info(
            "leave_reviewed",
            extra={
                "request_id": req.request_id,
                "employee_id": req.employee_id,
                "reviewer_id": reviewer_id,
                "status": status.value,
            },
        )
        return updated
