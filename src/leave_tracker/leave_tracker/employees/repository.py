from __future__ import annotations

from typing import Iterator, Mapping, Optional, Protocol

from ..core.enums import LeaveCategory
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees and their leave balances.

    Note (DIP): the leave service depends on this interface, not on a concrete store.
    """

    def register(
        self,
        employee_id: str,
        full_name: str,
        initial_balances: Optional[Mapping[LeaveCategory, int]] = None,
    ) -> Employee:
        raise NotImplementedError

    def lookup(self, employee_id: str) -> Employee:
        raise NotImplementedError

    def balances(self, employee_id: str) -> dict[LeaveCategory, int]:
        """Return a copy; mutating it never touches the stored balances."""

        raise NotImplementedError

    def deduct(self, employee_id: str, category: LeaveCategory, days: int) -> int:
        raise NotImplementedError

    def all(self) -> Iterator[Employee]:
        raise NotImplementedError
