"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import LeaveCategory

# Unpaid leave is never limited nor decremented.
UNLIMITED_BALANCE = 9999

DEFAULT_BALANCES = {
    LeaveCategory.ANNUAL: 20,
    LeaveCategory.SICK: 10,
    LeaveCategory.MATERNITY: 90,
    LeaveCategory.UNPAID: UNLIMITED_BALANCE,
}
