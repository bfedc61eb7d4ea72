"""Month arithmetic for timeline labels and payoff dates.

Every date is derived from a caller-supplied ``as_of`` so results are reproducible.
"""

from datetime import date


def add_months(as_of: date, months: int) -> date:
    """First day of the month ``months`` after ``as_of``'s month."""
    index = as_of.year * 12 + (as_of.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_label(as_of: date, months: int) -> str:
    """Short display label, e.g. "Nov 2026"."""
    return add_months(as_of, months).strftime("%b %Y")


def month_iso(as_of: date, months: int) -> str:
    """Year-month string, e.g. "2026-11"."""
    target = add_months(as_of, months)
    return f"{target.year:04d}-{target.month:02d}"
