from __future__ import annotations

from .errors import NoSuchMonthError

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def string_to_month(text: str) -> int:
    """Month number (1-12) for an English label such as ``"Sep"`` or ``"september 2024"``."""
    value = (text or "").strip().lower()
    for index, label in enumerate(MONTHS):
        if value.startswith(label.lower()):
            return index + 1
    raise NoSuchMonthError(f"Failed to find month by string {text!r}")


def month_to_string(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month!r}.")
    return MONTHS[month - 1]
