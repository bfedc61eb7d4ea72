"""Credit utilization routes."""

import logging

from fastapi import APIRouter, HTTPException

from debtplan.api.schemas import (
    CardUtilizationResponse,
    CreditCardInput,
    HistoricalPointResponse,
    HistoryBody,
    HistoryRequest,
    HistoryResponse,
    HouseholdUtilizationResponse,
    MilestoneResponse,
    MilestonesBody,
    MilestonesResponse,
    UserHistoryResponse,
    UserUtilizationResponse,
    UtilizationBody,
    UtilizationRequest,
    UtilizationResponse,
)
from debtplan.engine.history import aggregate_history
from debtplan.engine.milestones import milestones_for
from debtplan.engine.utilization import compute_utilization
from debtplan.models.utilization import BalanceSnapshot, CreditLine, HistoricalPoint, RatingBand

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/utilization", tags=["utilization"])


def _to_credit_lines(cards: list[CreditCardInput]) -> list[CreditLine]:
    return [
        CreditLine(
            card_id=card.id,
            card_name=card.card_name,
            user_id=card.user_id,
            user_name=card.user_name,
            balance=card.current_balance,
            credit_limit=card.credit_limit,
        )
        for card in cards
    ]


def _band_fields(band: RatingBand) -> dict:
    return {"rating": band.rating.value, "impact": band.label, "color": band.color}


def _points(points: list[HistoricalPoint]) -> list[HistoricalPointResponse]:
    return [
        HistoricalPointResponse(
            date=p.date,
            utilization=p.utilization,
            total_balance=p.total_balance,
            total_credit_limit=p.total_credit_limit,
        )
        for p in points
    ]


@router.post("", response_model=UtilizationResponse)
async def get_utilization(req: UtilizationRequest):
    """Current utilization for the household, each user and each card."""
    if not req.cards:
        return UtilizationResponse(message="No active cards found")

    try:
        report = compute_utilization(_to_credit_lines(req.cards))
    except ValueError as e:
        logger.warning("Rejected utilization input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    hh = report.household
    return UtilizationResponse(
        utilization=UtilizationBody(
            household=HouseholdUtilizationResponse(
                total_balance=hh.total_balance,
                total_credit_limit=hh.total_credit_limit,
                utilization=hh.utilization,
                card_count=hh.card_count,
                **_band_fields(hh.band),
            ),
            per_user=[
                UserUtilizationResponse(
                    user_id=u.user_id,
                    user_name=u.user_name,
                    total_balance=u.total_balance,
                    total_credit_limit=u.total_credit_limit,
                    utilization=u.utilization,
                    card_count=u.card_count,
                    **_band_fields(u.band),
                )
                for u in report.per_user
            ],
            per_card=[
                CardUtilizationResponse(
                    card_id=c.card_id,
                    card_name=c.card_name,
                    user_id=c.user_id,
                    user_name=c.user_name,
                    balance=c.balance,
                    credit_limit=c.credit_limit,
                    utilization=c.utilization,
                    **_band_fields(c.band),
                )
                for c in report.per_card
            ],
        )
    )


@router.post("/milestones", response_model=MilestonesResponse)
async def get_milestones(req: UtilizationRequest):
    """Dollars needed to reach each utilization milestone."""
    if not req.cards:
        return MilestonesResponse(message="No active cards found")

    try:
        report = milestones_for(_to_credit_lines(req.cards))
    except ValueError as e:
        logger.warning("Rejected milestone input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return MilestonesResponse(
        milestones=MilestonesBody(
            current_utilization=report.current_utilization,
            current_balance=report.current_balance,
            current_credit_limit=report.current_credit_limit,
            milestones=[
                MilestoneResponse(
                    threshold=m.threshold,
                    label=m.label,
                    dollars_needed=m.dollars_needed,
                    achieved=m.achieved,
                    **_band_fields(m.band),
                )
                for m in report.milestones
            ],
        )
    )


@router.post("/history", response_model=HistoryResponse)
async def get_history(req: HistoryRequest):
    """Historical utilization from balance snapshots."""
    if not req.snapshots:
        return HistoryResponse(message="No historical data available")

    snapshots = [
        BalanceSnapshot(
            card_id=s.card_id,
            card_name=s.card_name,
            user_id=s.user_id,
            user_name=s.user_name,
            snapshot_date=s.snapshot_date,
            balance=s.balance,
            credit_limit=s.credit_limit,
        )
        for s in req.snapshots
    ]
    try:
        history = aggregate_history(snapshots)
    except ValueError as e:
        logger.warning("Rejected history input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return HistoryResponse(
        history=HistoryBody(
            overall=_points(history.overall),
            per_user=[
                UserHistoryResponse(user_id=u.user_id, user_name=u.user_name, data=_points(u.points))
                for u in history.per_user
            ],
        )
    )
