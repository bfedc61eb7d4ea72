"""Pydantic schemas for API request/response models.

Request models carry the precondition checks the engine relies on:
non-negative amounts and a recognized strategy.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from debtplan.config import settings
from debtplan.engine.money import MAX_AMOUNT, MAX_APR
from debtplan.models.debt import Strategy


# ---- Request schemas ----

class CardInput(BaseModel):
    id: str
    card_name: str
    current_balance: Decimal = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    apr: Decimal = Field(
        ..., ge=0, le=MAX_APR, allow_inf_nan=False, description="Annual rate in percent"
    )
    minimum_payment: Decimal = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    user_name: str = ""


class PlanRequest(BaseModel):
    cards: list[CardInput]
    monthly_extra_budget: Decimal = Field(
        default=settings.default_monthly_extra_budget, ge=0, le=MAX_AMOUNT, allow_inf_nan=False
    )
    strategy: Strategy = settings.default_strategy
    one_time_extra: Decimal | None = Field(None, ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    as_of: date | None = Field(None, description="Reference month for labels, defaults to today")


class SimulateRequest(BaseModel):
    """Saved policy plus what-if overrides. Nothing is saved."""
    cards: list[CardInput]
    monthly_extra_budget: Decimal = Field(
        default=settings.default_monthly_extra_budget, ge=0, le=MAX_AMOUNT, allow_inf_nan=False
    )
    strategy: Strategy = settings.default_strategy
    as_of: date | None = None

    # Scenario parameters (at least one required)
    one_time_payment: Decimal | None = Field(None, ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    budget_change: Decimal | None = Field(None, ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    strategy_override: Strategy | None = None


class CreditCardInput(BaseModel):
    id: str
    card_name: str
    user_id: str
    user_name: str
    current_balance: Decimal = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    credit_limit: Decimal = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)


class UtilizationRequest(BaseModel):
    cards: list[CreditCardInput]


class SnapshotInput(BaseModel):
    card_id: str
    card_name: str
    user_id: str
    user_name: str
    snapshot_date: datetime | date
    balance: Decimal = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    credit_limit: Decimal = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)


class HistoryRequest(BaseModel):
    snapshots: list[SnapshotInput]


# ---- Response schemas ----

class PaymentInstructionResponse(BaseModel):
    card_id: str
    card_name: str
    user_name: str
    minimum_payment: Decimal
    extra_payment: Decimal
    new_balance_after_payment: Decimal
    pays_off_this_month: bool
    projected_payoff_date: str | None = None


class CardBalanceResponse(BaseModel):
    card_id: str
    card_name: str
    balance: Decimal


class TimelineMonthResponse(BaseModel):
    month: int
    label: str
    card_balances: list[CardBalanceResponse]
    total_debt: Decimal
    total_interest_this_month: Decimal
    total_interest_cumulative: Decimal


class PlanSummaryResponse(BaseModel):
    payment_instructions: list[PaymentInstructionResponse]
    total_interest_cost: Decimal
    months_to_debt_free: int
    debt_free_date: str
    capped: bool
    total_current_debt: Decimal
    monthly_extra_budget: Decimal
    strategy: Strategy


class PlanResponse(BaseModel):
    plan: PlanSummaryResponse | None = None
    message: str | None = None


class TimelineResponse(BaseModel):
    timeline: list[TimelineMonthResponse] = []
    months_to_debt_free: int = 0
    total_interest_cost: Decimal = Decimal("0")
    debt_free_date: str | None = None
    capped: bool = False
    message: str | None = None


class ScenarioSummaryResponse(BaseModel):
    total_interest_cost: Decimal
    months_to_debt_free: int
    debt_free_date: str
    capped: bool = False


class SimulationBody(BaseModel):
    current: ScenarioSummaryResponse
    simulated: ScenarioSummaryResponse
    interest_saved: Decimal
    months_saved: int


class SimulationResponse(BaseModel):
    simulation: SimulationBody | None = None
    message: str | None = None


class RatingFields(BaseModel):
    utilization: Decimal
    rating: str
    impact: str
    color: str


class CardUtilizationResponse(RatingFields):
    card_id: str
    card_name: str
    user_id: str
    user_name: str
    balance: Decimal
    credit_limit: Decimal


class UserUtilizationResponse(RatingFields):
    user_id: str
    user_name: str
    total_balance: Decimal
    total_credit_limit: Decimal
    card_count: int


class HouseholdUtilizationResponse(RatingFields):
    total_balance: Decimal
    total_credit_limit: Decimal
    card_count: int


class UtilizationBody(BaseModel):
    household: HouseholdUtilizationResponse
    per_user: list[UserUtilizationResponse]
    per_card: list[CardUtilizationResponse]


class UtilizationResponse(BaseModel):
    utilization: UtilizationBody | None = None
    message: str | None = None


class MilestoneResponse(BaseModel):
    threshold: int
    label: str
    impact: str
    rating: str
    color: str
    dollars_needed: Decimal
    achieved: bool


class MilestonesBody(BaseModel):
    current_utilization: Decimal
    current_balance: Decimal
    current_credit_limit: Decimal
    milestones: list[MilestoneResponse]


class MilestonesResponse(BaseModel):
    milestones: MilestonesBody | None = None
    message: str | None = None


class HistoricalPointResponse(BaseModel):
    date: date
    utilization: Decimal
    total_balance: Decimal
    total_credit_limit: Decimal


class UserHistoryResponse(BaseModel):
    user_id: str
    user_name: str
    data: list[HistoricalPointResponse]


class HistoryBody(BaseModel):
    overall: list[HistoricalPointResponse]
    per_user: list[UserHistoryResponse]


class HistoryResponse(BaseModel):
    history: HistoryBody | None = None
    message: str | None = None
