"""Credit utilization: per card, per user and household-wide.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from collections.abc import Sequence
from decimal import Decimal

from debtplan.engine.money import (
    MAX_AMOUNT,
    require_amount,
    require_at_most,
    require_finite,
    round_cents,
    round_percent,
)
from debtplan.models.utilization import (
    CardUtilization,
    CreditLine,
    HouseholdUtilization,
    Rating,
    RatingBand,
    UserUtilization,
    UtilizationReport,
)

# Lower bound (inclusive) of each band, highest first
RATING_BANDS: list[tuple[Decimal, RatingBand]] = [
    (Decimal("75"), RatingBand(Rating.VERY_POOR, "Very Poor", "red")),
    (Decimal("50"), RatingBand(Rating.POOR, "Poor", "orange")),
    (Decimal("30"), RatingBand(Rating.FAIR, "Fair", "yellow")),
    (Decimal("10"), RatingBand(Rating.GOOD, "Good", "green")),
    (Decimal("0"), RatingBand(Rating.EXCELLENT, "Excellent", "green")),
]


def rating_for(utilization: Decimal) -> RatingBand:
    """Map a utilization percentage to its rating band."""
    for floor, band in RATING_BANDS:
        if utilization >= floor:
            return band
    return RATING_BANDS[-1][1]


def utilization_ratio(balance: Decimal, credit_limit: Decimal) -> Decimal:
    """balance / limit as a percentage with one decimal. Zero limit -> 0."""
    require_finite("balance", balance)
    require_finite("credit_limit", credit_limit)
    if credit_limit <= 0:
        return Decimal("0.0")
    ratio = Decimal(balance) / Decimal(credit_limit) * 100
    return round_percent(max(Decimal("0"), ratio))


def validate_lines(lines: Sequence[CreditLine]) -> None:
    for line in lines:
        require_at_most(f"{line.card_id}.balance", line.balance, MAX_AMOUNT)
        require_amount(f"{line.card_id}.credit_limit", line.credit_limit)


def compute_utilization(lines: Sequence[CreditLine]) -> UtilizationReport:
    """Utilization at card, user and household granularity.

    Users are grouped by ``user_id`` in first-seen order; each user's balances
    and limits are summed before dividing.
    """
    validate_lines(lines)
    if not lines:
        return UtilizationReport(
            household=HouseholdUtilization(
                total_balance=Decimal("0.00"),
                total_credit_limit=Decimal("0.00"),
                utilization=Decimal("0.0"),
                band=rating_for(Decimal("0")),
                card_count=0,
            ),
        )

    per_card: list[CardUtilization] = []
    for line in lines:
        utilization = utilization_ratio(line.balance, line.credit_limit)
        per_card.append(CardUtilization(
            card_id=line.card_id,
            card_name=line.card_name,
            user_id=line.user_id,
            user_name=line.user_name,
            balance=round_cents(line.balance),
            credit_limit=round_cents(line.credit_limit),
            utilization=utilization,
            band=rating_for(utilization),
        ))

    # user_id -> [user_name, balance, limit, card_count]
    users: dict[str, list] = {}
    for line in lines:
        entry = users.setdefault(line.user_id, [line.user_name, Decimal("0"), Decimal("0"), 0])
        entry[1] += line.balance
        entry[2] += line.credit_limit
        entry[3] += 1

    per_user: list[UserUtilization] = []
    for user_id, (user_name, balance, limit, card_count) in users.items():
        utilization = utilization_ratio(balance, limit)
        per_user.append(UserUtilization(
            user_id=user_id,
            user_name=user_name,
            total_balance=round_cents(balance),
            total_credit_limit=round_cents(limit),
            utilization=utilization,
            band=rating_for(utilization),
            card_count=card_count,
        ))

    total_balance = round_cents(sum((line.balance for line in lines), Decimal("0")))
    total_limit = round_cents(sum((line.credit_limit for line in lines), Decimal("0")))
    household_utilization = utilization_ratio(total_balance, total_limit)

    return UtilizationReport(
        household=HouseholdUtilization(
            total_balance=total_balance,
            total_credit_limit=total_limit,
            utilization=household_utilization,
            band=rating_for(household_utilization),
            card_count=len(lines),
        ),
        per_user=per_user,
        per_card=per_card,
    )
