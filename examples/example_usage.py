"""Example: drive the service layer directly (no Flask).

Shows the two balance checks: the second approval no longer fits and is
recorded as REJECTED.
"""

from datetime import date

from src.leave_tracker.leave_tracker.container import build_container


def main():
    container = build_container(seed_demo=True)
    desk = container.leave_desk

    first = desk.submit("alice", date(2026, 3, 2), date(2026, 3, 11), "annual", "Family trip")
    second = desk.submit("alice", date(2026, 4, 6), date(2026, 4, 15), "annual", "Moving house")

    desk.review(first, approve=True, reviewer_id="sarah")
    desk.review(second, approve=True, reviewer_id="sarah")

    for req in desk.history_of("alice"):
        print(req.request_id, req.status.value, req.comment)
    print(desk.balances_of("alice"))


if __name__ == "__main__":
    main()
