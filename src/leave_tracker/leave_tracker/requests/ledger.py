from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import date
from typing import Iterator

from ..common.datetime_utils import now_local
from ..core.enums import LeaveCategory, RequestStatus
from ..core.exceptions import NotFoundError
from .model import LeaveRequest


class InMemoryRequestLedger:
    def __init__(self):
        self._requests: dict[int, LeaveRequest] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _next_id(self) -> int:
        with self._lock:
            return next(self._ids)

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
        rid = self._next_id()
        req = LeaveRequest(
            request_id=rid,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            duration=int(duration),
            category=category,
            reason=reason,
            status=RequestStatus.PENDING,
            created_at=now_local(),
        )
        self._requests[rid] = req
        return req

    def get(self, request_id: int) -> LeaveRequest:
        req = self._requests.get(int(request_id))
        if not req:
            raise NotFoundError(f"Leave request not found: {request_id}")
        return req

    def all(self) -> Iterator[LeaveRequest]:
        return iter(tuple(self._requests.values()))

    def set_status(
        self,
        request_id: int,
        *,
        status: RequestStatus,
        reviewed_by: str,
        comment: str,
    ) -> LeaveRequest:
        req = self.get(request_id)
        updated = replace(
            req,
            status=status,
            reviewed_by=reviewed_by,
            reviewed_at=now_local(),
            comment=comment,
        )
        self._requests[req.request_id] = updated
        return updated

    def __len__(self) -> int:
        return len(self._requests)
