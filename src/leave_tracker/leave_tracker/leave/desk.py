from __future__ import annotations

import logging
from datetime import date
from typing import Union

from ..core.enums import Decision, LeaveCategory
from ..core.exceptions import AlreadyReviewedError, NotFoundError
from ..employees.repository import EmployeeRepository
from ..requests.model import LeaveRequest
from ..requests.repository import RequestRepository
from .queries import LeaveQueries
from .service import LeaveService

logger = logging.getLogger(__name__)


class LeaveDesk:
    """Entry point for presentation code (CLI, web).

    Accepts loosely typed input (category names as text, approve as bool)
    and returns plain ids, flags and snapshots.
    """

    def __init__(
        self,
        service: LeaveService,
        queries: LeaveQueries,
        employees: EmployeeRepository,
        requests: RequestRepository,
    ):
        self._service = service
        self._queries = queries
        self._employees = employees
        self._requests = requests

    def submit(
        self,
        employee_id: str,
        start_date: date,
        end_date: date,
        category: Union[LeaveCategory, str],
        reason: str = "",
    ) -> int:
        req = self._service.submit(
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            category=LeaveCategory.parse(category),
            reason=reason,
        )
        return req.request_id

    def review(self, request_id: int, approve: bool, reviewer_id: str) -> bool:
        """Return True if the review was processed.

        The outcome (approved, or auto-rejected for lack of balance) is read
        back with :meth:`get`.
        """
        decision = Decision.APPROVE if approve else Decision.REJECT
        try:
            self._service.review(request_id=request_id, decision=decision, reviewer_id=reviewer_id)
        except (NotFoundError, AlreadyReviewedError) as exc:
            logger.warning("review_refused: %s", exc, extra={"request_id": request_id, "reviewer_id": reviewer_id})
            return False
        return True

    def get(self, request_id: int) -> LeaveRequest:
        return self._requests.get(request_id)

    def balances_of(self, employee_id: str) -> dict[LeaveCategory, int]:
        return self._employees.balances(employee_id)

    def history_of(self, employee_id: str) -> list[LeaveRequest]:
        return self._queries.requests_for(employee_id)

    def pending_queue(self) -> list[LeaveRequest]:
        return self._queries.pending()

    def decided(self) -> list[LeaveRequest]:
        return self._queries.decided()
