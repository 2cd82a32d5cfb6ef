from __future__ import annotations

import threading
from datetime import date, timedelta

import pytest

from src.leave_tracker.leave_tracker.core.constants import UNLIMITED_BALANCE
from src.leave_tracker.leave_tracker.core.enums import Decision, LeaveCategory, RequestStatus
from src.leave_tracker.leave_tracker.core.exceptions import (
    AlreadyReviewedError,
    InsufficientBalanceError,
    InvalidDateRangeError,
    NotFoundError,
)
from src.leave_tracker.leave_tracker.employees.registry import InMemoryEmployeeRegistry
from src.leave_tracker.leave_tracker.leave.service import LeaveService
from src.leave_tracker.leave_tracker.requests.ledger import InMemoryRequestLedger

D = date(2026, 3, 2)


def _service(annual=20):
    employees = InMemoryEmployeeRegistry()
    employees.register("alice", "Alice Smith", {LeaveCategory.ANNUAL: annual, LeaveCategory.SICK: 10})
    ledger = InMemoryRequestLedger()
    return LeaveService(employees, ledger), employees, ledger


def _submit(svc, days, category=LeaveCategory.ANNUAL, start=D):
    return svc.submit(
        employee_id="alice",
        start_date=start,
        end_date=start + timedelta(days=days - 1),
        category=category,
        reason="trip",
    )


def test_submit_creates_pending_request_with_inclusive_duration():
    svc, employees, _ = _service()
    req = svc.submit(employee_id="alice", start_date=D, end_date=D + timedelta(days=2), category=LeaveCategory.ANNUAL, reason=" trip ")

    assert req.request_id == 1
    assert req.status == RequestStatus.PENDING
    assert req.duration == 3
    assert req.reason == "trip"
    # no deduction until approval
    assert employees.balances("alice")[LeaveCategory.ANNUAL] == 20


def test_single_day_request_has_duration_one():
    svc, _, _ = _service()
    assert svc.submit(employee_id="alice", start_date=D, end_date=D, category=LeaveCategory.SICK, reason="").duration == 1


def test_end_before_start_fails_and_creates_nothing():
    svc, _, ledger = _service()
    with pytest.raises(InvalidDateRangeError):
        svc.submit(employee_id="alice", start_date=D, end_date=D - timedelta(days=1), category=LeaveCategory.ANNUAL, reason="x")
    assert len(ledger) == 0


def test_unknown_employee_fails():
    svc, _, ledger = _service()
    with pytest.raises(NotFoundError):
        svc.submit(employee_id="ghost", start_date=D, end_date=D, category=LeaveCategory.ANNUAL, reason="x")
    assert len(ledger) == 0


def test_submit_over_balance_fails_with_have_and_need():
    svc, employees, ledger = _service()
    with pytest.raises(InsufficientBalanceError) as exc:
        _submit(svc, 21)

    assert exc.value.have == 20
    assert exc.value.need == 21
    assert len(ledger) == 0
    assert employees.balances("alice")[LeaveCategory.ANNUAL] == 20


def test_unpaid_is_never_limited_nor_deducted():
    svc, employees, _ = _service()
    req = _submit(svc, 400, category=LeaveCategory.UNPAID)

    approved = svc.review(request_id=req.request_id, decision=Decision.APPROVE, reviewer_id="sarah")

    assert approved.status == RequestStatus.APPROVED
    assert employees.balances("alice")[LeaveCategory.UNPAID] == UNLIMITED_BALANCE


def test_approve_deducts_exact_duration():
    svc, employees, _ = _service()
    req = _submit(svc, 3)

    approved = svc.review(request_id=req.request_id, decision=Decision.APPROVE, reviewer_id="sarah")

    assert approved.status == RequestStatus.APPROVED
    assert approved.reviewed_by == "sarah"
    assert approved.comment == "Approved by sarah"
    assert employees.balances("alice")[LeaveCategory.ANNUAL] == 17


def test_reject_never_changes_balance():
    svc, employees, _ = _service()
    req = _submit(svc, 5)

    rejected = svc.review(request_id=req.request_id, decision=Decision.REJECT, reviewer_id="sarah")

    assert rejected.status == RequestStatus.REJECTED
    assert rejected.comment == "Rejected by sarah"
    assert employees.balances("alice")[LeaveCategory.ANNUAL] == 20


def test_approve_after_balance_drained_auto_rejects():
    svc, employees, _ = _service(annual=15)
    first = _submit(svc, 10)
    second = _submit(svc, 10, start=D + timedelta(days=30))

    assert svc.review(request_id=first.request_id, decision=Decision.APPROVE, reviewer_id="sarah").status == RequestStatus.APPROVED
    assert employees.balances("alice")[LeaveCategory.ANNUAL] == 5

    outcome = svc.review(request_id=second.request_id, decision=Decision.APPROVE, reviewer_id="sarah")

    assert outcome.status == RequestStatus.REJECTED
    assert "insufficient balance at approval" in outcome.comment
    assert employees.balances("alice")[LeaveCategory.ANNUAL] == 5


def test_review_is_one_shot():
    svc, employees, ledger = _service()
    req = _submit(svc, 2)
    svc.review(request_id=req.request_id, decision=Decision.REJECT, reviewer_id="sarah")

    with pytest.raises(AlreadyReviewedError):
        svc.review(request_id=req.request_id, decision=Decision.APPROVE, reviewer_id="sarah")

    assert ledger.get(req.request_id).status == RequestStatus.REJECTED
    assert employees.balances("alice")[LeaveCategory.ANNUAL] == 20


def test_review_unknown_request_fails():
    svc, _, _ = _service()
    with pytest.raises(NotFoundError):
        svc.review(request_id=99, decision=Decision.APPROVE, reviewer_id="sarah")


def test_ids_increase_across_failed_submissions():
    svc, _, _ = _service()
    first = _submit(svc, 1)
    with pytest.raises(InsufficientBalanceError):
        _submit(svc, 50)
    second = _submit(svc, 1)
    assert second.request_id > first.request_id


def test_worked_example_annual_balance():
    svc, employees, _ = _service()

    for expected in (17, 14):
        req = _submit(svc, 3)
        assert req.duration == 3
        svc.review(request_id=req.request_id, decision=Decision.APPROVE, reviewer_id="sarah")
        assert employees.balances("alice")[LeaveCategory.ANNUAL] == expected

    with pytest.raises(InsufficientBalanceError) as exc:
        _submit(svc, 20)
    assert (exc.value.have, exc.value.need) == (14, 20)


def test_concurrent_approvals_never_overdraw():
    svc, employees, _ = _service(annual=15)
    reqs = [_submit(svc, 10, start=D + timedelta(days=20 * i)) for i in range(4)]
    outcomes = []

    def approve(rid):
        outcomes.append(svc.review(request_id=rid, decision=Decision.APPROVE, reviewer_id="sarah").status)

    threads = [threading.Thread(target=approve, args=(r.request_id,)) for r in reqs]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count(RequestStatus.APPROVED) == 1
    assert outcomes.count(RequestStatus.REJECTED) == 3
    assert employees.balances("alice")[LeaveCategory.ANNUAL] == 5
