"""Credit utilization data types."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class Rating(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    VERY_POOR = "very_poor"


@dataclass(frozen=True)
class RatingBand:
    rating: Rating
    label: str  # "Very Poor"
    color: str  # green / yellow / orange / red


# ---- Inputs ----

@dataclass(frozen=True)
class CreditLine:
    card_id: str
    card_name: str
    user_id: str
    user_name: str
    balance: Decimal
    credit_limit: Decimal


@dataclass(frozen=True)
class BalanceSnapshot:
    card_id: str
    card_name: str
    user_id: str
    user_name: str
    snapshot_date: date | datetime
    balance: Decimal
    credit_limit: Decimal


# ---- Outputs ----

@dataclass(frozen=True)
class CardUtilization:
    card_id: str
    card_name: str
    user_id: str
    user_name: str
    balance: Decimal
    credit_limit: Decimal
    utilization: Decimal  # Percent, one decimal
    band: RatingBand


@dataclass(frozen=True)
class UserUtilization:
    user_id: str
    user_name: str
    total_balance: Decimal
    total_credit_limit: Decimal
    utilization: Decimal
    band: RatingBand
    card_count: int


@dataclass(frozen=True)
class HouseholdUtilization:
    total_balance: Decimal
    total_credit_limit: Decimal
    utilization: Decimal
    band: RatingBand
    card_count: int


@dataclass(frozen=True)
class UtilizationReport:
    household: HouseholdUtilization
    per_user: list[UserUtilization] = field(default_factory=list)
    per_card: list[CardUtilization] = field(default_factory=list)


@dataclass(frozen=True)
class Milestone:
    threshold: int  # Percent
    label: str  # "30%"
    band: RatingBand
    dollars_needed: Decimal
    achieved: bool


@dataclass(frozen=True)
class MilestoneReport:
    current_utilization: Decimal
    current_balance: Decimal
    current_credit_limit: Decimal
    milestones: list[Milestone] = field(default_factory=list)


@dataclass(frozen=True)
class HistoricalPoint:
    date: date
    utilization: Decimal
    total_balance: Decimal
    total_credit_limit: Decimal


@dataclass(frozen=True)
class UserHistory:
    user_id: str
    user_name: str
    points: list[HistoricalPoint] = field(default_factory=list)


@dataclass(frozen=True)
class UtilizationHistory:
    overall: list[HistoricalPoint] = field(default_factory=list)
    per_user: list[UserHistory] = field(default_factory=list)
