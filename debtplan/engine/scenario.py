"""What-if comparison: saved payoff policy vs. the same debts with overrides.

Pure computation. Nothing is persisted; the baseline policy is never modified.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from debtplan.engine.payoff import simulate
from debtplan.models.debt import DebtInstrument, PayoffPolicy, Strategy
from debtplan.models.results import PayoffPlan, ScenarioComparison, ScenarioSummary


def summarize(plan: PayoffPlan) -> ScenarioSummary:
    return ScenarioSummary(
        total_interest_cost=plan.total_interest_cost,
        months_to_debt_free=plan.months_to_debt_free,
        debt_free_date=plan.debt_free_date,
        capped=plan.capped,
    )


def compare_scenarios(
    instruments: Sequence[DebtInstrument],
    policy: PayoffPolicy,
    *,
    one_time_payment: Decimal | None = None,
    budget_change: Decimal | None = None,
    strategy_override: Strategy | None = None,
    as_of: date | None = None,
) -> ScenarioComparison:
    """Run the saved policy and the overridden policy side by side.

    Args:
        instruments: Debt snapshot shared by both runs
        policy: The household's saved budget and strategy
        one_time_payment: Lump sum applied in month 1 of the simulated run
        budget_change: Replacement monthly extra budget (not a delta)
        strategy_override: Replacement strategy
        as_of: "Now" for both runs. Defaults to today.
    """
    as_of = as_of or date.today()

    current = simulate(
        instruments,
        policy.monthly_extra_budget,
        policy.strategy,
        as_of=as_of,
    )
    simulated = simulate(
        instruments,
        budget_change if budget_change is not None else policy.monthly_extra_budget,
        strategy_override or policy.strategy,
        one_time_extra=one_time_payment,
        as_of=as_of,
    )

    return ScenarioComparison(
        current=summarize(current),
        simulated=summarize(simulated),
        interest_saved=current.total_interest_cost - simulated.total_interest_cost,
        months_saved=current.months_to_debt_free - simulated.months_to_debt_free,
    )
