"""Historical utilization series from point-in-time balance snapshots.

Pure functions. No I/O.
"""

from collections.abc import Sequence
from datetime import date, datetime, timezone
from decimal import Decimal

from debtplan.engine.money import MAX_AMOUNT, require_amount, require_at_most, round_cents
from debtplan.engine.utilization import utilization_ratio
from debtplan.models.utilization import (
    BalanceSnapshot,
    HistoricalPoint,
    UserHistory,
    UtilizationHistory,
)


def snapshot_day(moment: date | datetime) -> date:
    """Calendar day of a snapshot. Aware datetimes are read in UTC."""
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return moment.date()
    return moment


def _series(totals: dict[date, list[Decimal]]) -> list[HistoricalPoint]:
    return [
        HistoricalPoint(
            date=day,
            utilization=utilization_ratio(balance, limit),
            total_balance=round_cents(balance),
            total_credit_limit=round_cents(limit),
        )
        for day, (balance, limit) in sorted(totals.items())
    ]


def aggregate_history(snapshots: Sequence[BalanceSnapshot]) -> UtilizationHistory:
    """Household and per-user utilization, one point per calendar day.

    Every snapshot dated the same day is summed into that day's point. Each
    user series keeps the display name from the user's earliest snapshot.
    """
    for snap in snapshots:
        require_at_most(f"{snap.card_id}.balance", snap.balance, MAX_AMOUNT)
        require_amount(f"{snap.card_id}.credit_limit", snap.credit_limit)

    if not snapshots:
        return UtilizationHistory()

    overall: dict[date, list[Decimal]] = {}
    by_user: dict[str, dict[date, list[Decimal]]] = {}
    # user_id -> (day, display name) of the earliest snapshot seen so far
    names: dict[str, tuple[date, str]] = {}

    for snap in snapshots:
        day = snapshot_day(snap.snapshot_date)

        totals = overall.setdefault(day, [Decimal("0"), Decimal("0")])
        totals[0] += snap.balance
        totals[1] += snap.credit_limit

        user_totals = by_user.setdefault(snap.user_id, {}).setdefault(
            day, [Decimal("0"), Decimal("0")]
        )
        user_totals[0] += snap.balance
        user_totals[1] += snap.credit_limit

        seen = names.get(snap.user_id)
        if seen is None or day < seen[0]:
            names[snap.user_id] = (day, snap.user_name)

    return UtilizationHistory(
        overall=_series(overall),
        per_user=[
            UserHistory(user_id=user_id, user_name=names[user_id][1], points=_series(days))
            for user_id, days in by_user.items()
        ],
    )
