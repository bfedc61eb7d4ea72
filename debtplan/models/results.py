from dataclasses import dataclass, field
from decimal import Decimal

from debtplan.models.debt import Strategy


@dataclass(frozen=True)
class CardBalance:
    card_id: str
    card_name: str
    balance: Decimal


@dataclass(frozen=True)
class TimelineEntry:
    month: int  # 1-based
    label: str  # e.g. "Nov 2026"
    card_balances: list[CardBalance]
    total_debt: Decimal
    interest_this_month: Decimal
    interest_cumulative: Decimal


@dataclass(frozen=True)
class PaymentInstruction:
    """What to pay on one card this month."""
    card_id: str
    card_name: str
    owner: str
    minimum_payment: Decimal
    extra_payment: Decimal
    new_balance: Decimal
    pays_off_this_month: bool
    projected_payoff_date: str | None  # "YYYY-MM", None = not within horizon


@dataclass
class PayoffPlan:
    payment_instructions: list[PaymentInstruction] = field(default_factory=list)
    timeline: list[TimelineEntry] = field(default_factory=list)
    total_interest_cost: Decimal = Decimal("0")
    months_to_debt_free: int = 0
    debt_free_date: str = ""
    capped: bool = False  # Horizon reached before every balance hit zero

    # Echoed inputs
    total_current_debt: Decimal = Decimal("0")
    monthly_extra_budget: Decimal = Decimal("0")
    strategy: Strategy = Strategy.AVALANCHE


@dataclass(frozen=True)
class ScenarioSummary:
    total_interest_cost: Decimal
    months_to_debt_free: int
    debt_free_date: str
    capped: bool = False


@dataclass(frozen=True)
class ScenarioComparison:
    """Baseline plan vs. a what-if plan."""
    current: ScenarioSummary
    simulated: ScenarioSummary
    interest_saved: Decimal  # Positive = simulated plan is cheaper
    months_saved: int  # Positive = simulated plan finishes sooner
