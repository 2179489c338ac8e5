"""Date keys and day labels."""

from datetime import date, timedelta
from typing import Optional

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def today_key(today: Optional[date] = None) -> str:
    """Return the local date as a YYYY-MM-DD completion key."""
    today = today or date.today()
    return today.strftime("%Y-%m-%d")


def last_seven_day_labels(today: Optional[date] = None) -> list[str]:
    """
    Get MM-DD labels for the last seven days.

    Args:
        today: Last day of the window (defaults to the local date)

    Returns:
        Seven labels, oldest first, ending with today
    """
    today = today or date.today()
    return [(today - timedelta(days=offset)).strftime("%m-%d") for offset in range(6, -1, -1)]


def day_name(today: Optional[date] = None) -> str:
    """Return the English weekday name, e.g. "Monday"."""
    today = today or date.today()
    # Python weekday: Monday=0, Sunday=6
    return DAY_NAMES[today.weekday()]


def date_key_for_label(label: str, year: int) -> str:
    """Expand an MM-DD label back to a completion key in the given year."""
    return f"{year}-{label}"
