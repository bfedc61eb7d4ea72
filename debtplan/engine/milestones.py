"""Dollars needed to bring household utilization under each milestone.

Pure functions. No I/O.
"""

from collections.abc import Sequence
from decimal import Decimal

from debtplan.engine.money import require_finite, require_non_negative, round_cents
from debtplan.engine.utilization import rating_for, utilization_ratio, validate_lines
from debtplan.models.utilization import CreditLine, Milestone, MilestoneReport

MILESTONE_THRESHOLDS: tuple[int, ...] = (75, 50, 30, 10)


def compute_milestones(total_balance: Decimal, total_credit_limit: Decimal) -> MilestoneReport:
    """Distance from the current balance to each utilization threshold.

    dollars_needed = max(0, balance - threshold% * limit). A milestone is
    achieved once the (rounded) current utilization is at or below it.
    """
    require_finite("total_balance", total_balance)
    require_non_negative("total_credit_limit", total_credit_limit)
    if total_credit_limit <= 0:
        return MilestoneReport(
            current_utilization=Decimal("0.0"),
            current_balance=round_cents(total_balance),
            current_credit_limit=Decimal("0.00"),
            milestones=[
                Milestone(
                    threshold=threshold,
                    label=f"{threshold}%",
                    band=rating_for(Decimal(threshold)),
                    dollars_needed=Decimal("0.00"),
                    achieved=True,
                )
                for threshold in MILESTONE_THRESHOLDS
            ],
        )

    current = utilization_ratio(total_balance, total_credit_limit)

    milestones: list[Milestone] = []
    for threshold in MILESTONE_THRESHOLDS:
        target_balance = Decimal(threshold) / 100 * total_credit_limit
        needed = max(Decimal("0"), total_balance - target_balance)
        milestones.append(Milestone(
            threshold=threshold,
            label=f"{threshold}%",
            band=rating_for(Decimal(threshold)),
            dollars_needed=round_cents(needed),
            achieved=current <= threshold,
        ))

    return MilestoneReport(
        current_utilization=current,
        current_balance=round_cents(total_balance),
        current_credit_limit=round_cents(total_credit_limit),
        milestones=milestones,
    )


def milestones_for(lines: Sequence[CreditLine]) -> MilestoneReport:
    """Milestones for the household total of ``lines``."""
    validate_lines(lines)
    total_balance = sum((line.balance for line in lines), Decimal("0"))
    total_limit = sum((line.credit_limit for line in lines), Decimal("0"))
    return compute_milestones(total_balance, total_limit)
