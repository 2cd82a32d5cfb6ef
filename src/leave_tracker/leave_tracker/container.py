from __future__ import annotations

from dataclasses import dataclass

from .employees.registry import InMemoryEmployeeRegistry
from .employees.seed import ensure_demo_employees
from .leave.desk import LeaveDesk
from .leave.queries import LeaveQueries
from .leave.service import LeaveService
from .requests.ledger import InMemoryRequestLedger


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRegistry
    requests_repo: InMemoryRequestLedger

    leave_service: LeaveService
    leave_queries: LeaveQueries
    leave_desk: LeaveDesk


def build_container(*, seed_demo: bool = False) -> Container:
    employees_repo = InMemoryEmployeeRegistry()
    requests_repo = InMemoryRequestLedger()
    if seed_demo:
        ensure_demo_employees(employees_repo)

    leave_service = LeaveService(employees_repo, requests_repo)
    leave_queries = LeaveQueries(requests_repo)
    leave_desk = LeaveDesk(leave_service, leave_queries, employees_repo, requests_repo)

    return Container(
        employees_repo=employees_repo,
        requests_repo=requests_repo,
        leave_service=leave_service,
        leave_queries=leave_queries,
        leave_desk=leave_desk,
    )
