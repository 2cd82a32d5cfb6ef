from __future__ import annotations

from enum import Enum

from .exceptions import InvalidCategoryError


class LeaveCategory(str, Enum):
    """Leave type; decides which balance is checked and deducted."""

    ANNUAL = "ANNUAL"
    SICK = "SICK"
    UNPAID = "UNPAID"
    MATERNITY = "MATERNITY"

    @classmethod
    def parse(cls, value: str) -> "LeaveCategory":
        """Case-insensitive lookup, e.g. ``"annual"`` -> ``ANNUAL``."""
        if isinstance(value, cls):
            return value
        key = (value or "").strip().upper()
        try:
            return cls(key)
        except ValueError:
            raise InvalidCategoryError(f"Unknown leave category: {value!r}")

    @property
    def label(self) -> str:
        return self.value.title()


class RequestStatus(str, Enum):
    """Review workflow state of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @property
    def is_terminal(self) -> bool:
        return self is not RequestStatus.PENDING


class Decision(str, Enum):
    APPROVE = "APPROVE"
    REJECT = "REJECT"
