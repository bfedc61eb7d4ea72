"""Payoff plan routes. Stateless: the caller posts the card snapshot and policy."""

import logging
from decimal import Decimal

from fastapi import APIRouter, HTTPException, Query

from debtplan.api.schemas import (
    CardInput,
    PlanRequest,
    PlanResponse,
    PlanSummaryResponse,
    PaymentInstructionResponse,
    ScenarioSummaryResponse,
    SimulateRequest,
    SimulationBody,
    SimulationResponse,
    TimelineMonthResponse,
    TimelineResponse,
    CardBalanceResponse,
)
from debtplan.engine.money import MAX_AMOUNT
from debtplan.engine.payoff import simulate
from debtplan.engine.scenario import compare_scenarios
from debtplan.models.debt import DebtInstrument, PayoffPolicy
from debtplan.models.results import PayoffPlan, ScenarioSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/payoff", tags=["payoff"])

NO_CARDS = "No active cards found"


def cards_to_instruments(cards: list[CardInput]) -> list[DebtInstrument]:
    return [
        DebtInstrument(
            id=card.id,
            name=card.card_name,
            balance=card.current_balance,
            apr=card.apr,
            minimum_payment=card.minimum_payment,
            owner=card.user_name,
        )
        for card in cards
    ]


def _run_plan(req: PlanRequest, budget: Decimal | None) -> PayoffPlan:
    """Run the engine. ``budget`` overrides the posted budget for this request only."""
    try:
        return simulate(
            cards_to_instruments(req.cards),
            budget if budget is not None else req.monthly_extra_budget,
            req.strategy,
            one_time_extra=req.one_time_extra,
            as_of=req.as_of,
        )
    except ValueError as e:
        logger.warning("Rejected payoff plan input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def _plan_to_response(plan: PayoffPlan) -> PlanSummaryResponse:
    """Convert engine PayoffPlan to API response, without the timeline."""
    return PlanSummaryResponse(
        payment_instructions=[
            PaymentInstructionResponse(
                card_id=i.card_id,
                card_name=i.card_name,
                user_name=i.owner,
                minimum_payment=i.minimum_payment,
                extra_payment=i.extra_payment,
                new_balance_after_payment=i.new_balance,
                pays_off_this_month=i.pays_off_this_month,
                projected_payoff_date=i.projected_payoff_date,
            )
            for i in plan.payment_instructions
        ],
        total_interest_cost=plan.total_interest_cost,
        months_to_debt_free=plan.months_to_debt_free,
        debt_free_date=plan.debt_free_date,
        capped=plan.capped,
        total_current_debt=plan.total_current_debt,
        monthly_extra_budget=plan.monthly_extra_budget,
        strategy=plan.strategy,
    )


def _summary_to_response(summary: ScenarioSummary) -> ScenarioSummaryResponse:
    return ScenarioSummaryResponse(
        total_interest_cost=summary.total_interest_cost,
        months_to_debt_free=summary.months_to_debt_free,
        debt_free_date=summary.debt_free_date,
        capped=summary.capped,
    )


@router.post("/plan", response_model=PlanResponse)
async def get_plan(
    req: PlanRequest,
    budget: Decimal | None = Query(None, ge=0, le=MAX_AMOUNT, description="Budget override, not saved"),
):
    """Current payoff plan with this month's payment instructions."""
    if not req.cards:
        return PlanResponse(message=NO_CARDS)

    plan = _run_plan(req, budget)
    return PlanResponse(plan=_plan_to_response(plan))


@router.post("/timeline", response_model=TimelineResponse)
async def get_timeline(
    req: PlanRequest,
    budget: Decimal | None = Query(None, ge=0, le=MAX_AMOUNT, description="Budget override, not saved"),
):
    """Month-by-month projected balances for charting."""
    if not req.cards:
        return TimelineResponse(message=NO_CARDS)

    plan = _run_plan(req, budget)
    return TimelineResponse(
        timeline=[
            TimelineMonthResponse(
                month=entry.month,
                label=entry.label,
                card_balances=[
                    CardBalanceResponse(card_id=b.card_id, card_name=b.card_name, balance=b.balance)
                    for b in entry.card_balances
                ],
                total_debt=entry.total_debt,
                total_interest_this_month=entry.interest_this_month,
                total_interest_cumulative=entry.interest_cumulative,
            )
            for entry in plan.timeline
        ],
        months_to_debt_free=plan.months_to_debt_free,
        total_interest_cost=plan.total_interest_cost,
        debt_free_date=plan.debt_free_date,
        capped=plan.capped,
    )


@router.post("/simulate", response_model=SimulationResponse)
async def simulate_scenario(req: SimulateRequest):
    """What-if run against the posted policy. Does not save anything."""
    if (
        req.one_time_payment is None
        and req.budget_change is None
        and req.strategy_override is None
    ):
        raise HTTPException(
            status_code=400,
            detail=(
                "At least one scenario parameter required: "
                "one_time_payment, budget_change, or strategy_override"
            ),
        )

    if not req.cards:
        return SimulationResponse(message=NO_CARDS)

    try:
        comparison = compare_scenarios(
            cards_to_instruments(req.cards),
            PayoffPolicy(monthly_extra_budget=req.monthly_extra_budget, strategy=req.strategy),
            one_time_payment=req.one_time_payment,
            budget_change=req.budget_change,
            strategy_override=req.strategy_override,
            as_of=req.as_of,
        )
    except ValueError as e:
        logger.warning("Rejected simulation input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return SimulationResponse(
        simulation=SimulationBody(
            current=_summary_to_response(comparison.current),
            simulated=_summary_to_response(comparison.simulated),
            interest_saved=comparison.interest_saved,
            months_saved=comparison.months_saved,
        )
    )
