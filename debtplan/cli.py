"""CLI for running a payoff plan from a JSON snapshot of cards.

Usage:
    python -m debtplan.cli cards.json
    python -m debtplan.cli cards.json --budget 500 --strategy snowball --timeline
    python -m debtplan.cli cards.json --lump-sum 2000 --compare

The JSON file has the same shape as the /api/v1/payoff/plan request body:
    {"cards": [{"id": "visa", "card_name": "Visa", "current_balance": 1000,
                "apr": 24, "minimum_payment": 25, "user_name": "Sam"}],
     "monthly_extra_budget": 200, "strategy": "avalanche"}
"""

import argparse
import json
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import ValidationError

from debtplan.api.routes.payoff import cards_to_instruments
from debtplan.api.schemas import PlanRequest
from debtplan.engine.payoff import simulate
from debtplan.engine.scenario import compare_scenarios
from debtplan.models.debt import PayoffPolicy, Strategy
from debtplan.models.results import PayoffPlan, ScenarioComparison


def _amount(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a valid amount: {text!r}")


def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_plan(plan: PayoffPlan) -> None:
    _header(f"Payoff Plan ({plan.strategy.value})")
    print(f"  Total Debt:         {_dollar(plan.total_current_debt)}")
    print(f"  Extra Budget:       {_dollar(plan.monthly_extra_budget)}/mo")
    print(f"  Total Interest:     {_dollar(plan.total_interest_cost)}")
    capped = " (capped, not paid off within 30 years)" if plan.capped else ""
    print(f"  Debt Free:          {plan.debt_free_date} in {plan.months_to_debt_free} months{capped}")

    _header("This Month")
    for i in plan.payment_instructions:
        payoff = i.projected_payoff_date or "-"
        flag = "  PAID OFF" if i.pays_off_this_month else ""
        print(
            f"  {i.card_name:<20} min {_dollar(i.minimum_payment):>10}"
            f"  extra {_dollar(i.extra_payment):>10}"
            f"  -> {_dollar(i.new_balance):>12}  payoff {payoff}{flag}"
        )


def print_timeline(plan: PayoffPlan) -> None:
    _header("Timeline")
    for entry in plan.timeline:
        print(
            f"  {entry.month:>3}  {entry.label:<9}  debt {_dollar(entry.total_debt):>12}"
            f"  interest {_dollar(entry.interest_this_month):>9}"
        )


def print_comparison(comparison: ScenarioComparison) -> None:
    _header("What If")
    cur, sim = comparison.current, comparison.simulated
    print(f"  {'':<12}{'Current':>16}{'Simulated':>16}")
    print(f"  {'Interest':<12}{_dollar(cur.total_interest_cost):>16}{_dollar(sim.total_interest_cost):>16}")
    print(f"  {'Months':<12}{cur.months_to_debt_free:>16}{sim.months_to_debt_free:>16}")
    print(f"  {'Debt free':<12}{cur.debt_free_date:>16}{sim.debt_free_date:>16}")
    print(f"\n  Interest saved: {_dollar(comparison.interest_saved)}")
    print(f"  Months saved:   {comparison.months_saved}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Credit card payoff planner")
    parser.add_argument("snapshot", type=Path, help="JSON file with cards and policy")
    parser.add_argument("--budget", type=_amount, help="Override monthly extra budget")
    parser.add_argument("--strategy", choices=[s.value for s in Strategy], help="Override strategy")
    parser.add_argument("--lump-sum", type=_amount, help="One-time extra payment this month")
    parser.add_argument("--as-of", type=date.fromisoformat, help="Reference date (YYYY-MM-DD)")
    parser.add_argument("--timeline", action="store_true", help="Print the month-by-month timeline")
    parser.add_argument("--compare", action="store_true", help="Compare overrides against the saved policy")

    args = parser.parse_args(argv)

    try:
        req = PlanRequest.model_validate(json.loads(args.snapshot.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"Error reading {args.snapshot}: {e}", file=sys.stderr)
        return 1

    instruments = cards_to_instruments(req.cards)
    strategy = Strategy(args.strategy) if args.strategy else None
    as_of = args.as_of or req.as_of

    try:
        if args.compare:
            comparison = compare_scenarios(
                instruments,
                PayoffPolicy(monthly_extra_budget=req.monthly_extra_budget, strategy=req.strategy),
                one_time_payment=args.lump_sum,
                budget_change=args.budget,
                strategy_override=strategy,
                as_of=as_of,
            )
            print_comparison(comparison)
            return 0

        plan = simulate(
            instruments,
            args.budget if args.budget is not None else req.monthly_extra_budget,
            strategy or req.strategy,
            one_time_extra=args.lump_sum if args.lump_sum is not None else req.one_time_extra,
            as_of=as_of,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_plan(plan)
    if args.timeline:
        print_timeline(plan)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
