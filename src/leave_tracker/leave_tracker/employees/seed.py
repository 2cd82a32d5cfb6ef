from __future__ import annotations

from ..core.constants import DEFAULT_BALANCES
from .registry import InMemoryEmployeeRegistry

DEMO_EMPLOYEES = (
    ("alice", "Alice Smith"),
    ("bob", "Bob Johnson"),
    ("sarah", "Sarah Jenkins"),
)


def ensure_demo_employees(registry: InMemoryEmployeeRegistry) -> int:
    """Register the demo staff that are not there yet. Returns how many were added."""
    added = 0
    for employee_id, full_name in DEMO_EMPLOYEES:
        if employee_id in registry:
            continue
        registry.register(employee_id, full_name, DEFAULT_BALANCES)
        added += 1
    return added
