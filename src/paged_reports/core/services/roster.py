from __future__ import annotations

from datetime import date, timedelta

from paged_reports.core.models.user import UserDetails

ROLES = ("Admin", "Editor", "Viewer")
FIRST_CREATED = date(2026, 1, 1)


def generate_users(count: int = 1001) -> list[UserDetails]:
    """
    Build `count` mock users: ids from 1, roles cycling, one signup per day.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    users = []
    for i in range(count):
        index = i + 1
        users.append(
            UserDetails(
                id=index,
                name=f"usr-{index}",
                email=f"user{index}@example.com",
                role=ROLES[i % len(ROLES)],
                created_at=(FIRST_CREATED + timedelta(days=i)).isoformat(),
            )
        )
    return users
