from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from ..common.validators import require_non_empty, require_non_negative
from ..core.constants import UNLIMITED_BALANCE
from ..core.enums import LeaveCategory
from ..core.exceptions import DuplicateEmployeeError, NotFoundError, ValidationError
from .model import Employee


class InMemoryEmployeeRegistry:
    def __init__(self):
        self._employees: dict[str, Employee] = {}

    def register(
        self,
        employee_id: str,
        full_name: str,
        initial_balances: Optional[Mapping[LeaveCategory, int]] = None,
    ) -> Employee:
        employee_id = require_non_empty(employee_id, "Employee id")
        full_name = require_non_empty(full_name, "Full name")
        if employee_id in self._employees:
            raise DuplicateEmployeeError(f"Employee already exists: {employee_id}")

        balances = {category: 0 for category in LeaveCategory}
        for category, days in (initial_balances or {}).items():
            category = LeaveCategory.parse(category)
            balances[category] = require_non_negative(days, f"{category.label} balance")
        balances[LeaveCategory.UNPAID] = UNLIMITED_BALANCE

        employee = Employee(
            employee_id=employee_id,
            full_name=full_name,
            balances=MappingProxyType(balances),
        )
        self._employees[employee_id] = employee
        return employee

    def lookup(self, employee_id: str) -> Employee:
        employee = self._employees.get(employee_id)
        if not employee:
            raise NotFoundError(f"Employee not found: {employee_id}")
        return employee

    def balances(self, employee_id: str) -> dict[LeaveCategory, int]:
        return dict(self.lookup(employee_id).balances)

    def deduct(self, employee_id: str, category: LeaveCategory, days: int) -> int:
        employee = self.lookup(employee_id)
        if category == LeaveCategory.UNPAID:
            return employee.balance_for(category)

        remaining = employee.balance_for(category) - int(days)
        if remaining < 0:
            raise ValidationError(f"{category.label} balance cannot go negative")

        balances = dict(employee.balances)
        balances[category] = remaining
        self._employees[employee_id] = replace(employee, balances=MappingProxyType(balances))
        return remaining

    def all(self) -> Iterator[Employee]:
        return iter(tuple(self._employees.values()))

    def __contains__(self, employee_id: str) -> bool:
        return employee_id in self._employees
