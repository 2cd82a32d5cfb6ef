from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..core.enums import LeaveCategory


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object. ``balances`` is a read-only view; only the
    registry replaces it, on behalf of the leave service.
    """

    employee_id: str
    full_name: str
    balances: Mapping[LeaveCategory, int]

    def balance_for(self, category: LeaveCategory) -> int:
        return int(self.balances.get(category, 0))
