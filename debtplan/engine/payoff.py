"""Month-by-month debt payoff simulation with avalanche / snowball allocation.

Pure computation. No I/O. Decimal dollars in, PayoffPlan out; all running
amounts are integer cents so nothing drifts over a 30-year horizon.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from debtplan.engine.money import (
    MAX_AMOUNT,
    MAX_APR,
    from_cents,
    monthly_interest_cents,
    require_amount,
    require_at_most,
    require_non_negative,
    round_cents,
    to_cents,
)
from debtplan.engine.months import month_iso, month_label
from debtplan.engine.ordering import order_by_strategy
from debtplan.models.debt import DebtInstrument, Strategy
from debtplan.models.results import (
    CardBalance,
    PaymentInstruction,
    PayoffPlan,
    TimelineEntry,
)

logger = logging.getLogger(__name__)

MAX_MONTHS = 360  # 30-year horizon


@dataclass(frozen=True)
class Active:
    pass


@dataclass(frozen=True)
class PaidOff:
    month: int


ACTIVE = Active()


@dataclass
class InstrumentSlot:
    instrument: DebtInstrument
    balance: int  # Cents
    minimum: int  # Cents
    status: Active | PaidOff = ACTIVE

    @property
    def is_active(self) -> bool:
        return isinstance(self.status, Active)

    @property
    def payoff_month(self) -> int | None:
        return self.status.month if isinstance(self.status, PaidOff) else None

    def mark_paid_off(self, month: int) -> int:
        """Close out the slot and return the minimum payment it frees up."""
        if not self.is_active:
            raise RuntimeError(
                f"{self.instrument.id} already paid off in month {self.payoff_month}"
            )
        self.balance = 0
        self.status = PaidOff(month)
        return self.minimum


@dataclass
class SimulationState:
    """Running state of one simulate() call, keyed by input position."""
    slots: dict[int, InstrumentSlot]
    freed_minimums: int = 0  # Cents, only ever grows
    cumulative_interest: int = 0

    @property
    def all_paid_off(self) -> bool:
        return all(not slot.is_active for slot in self.slots.values())

    def accrue_interest(self) -> int:
        month_interest = 0
        for slot in self.slots.values():
            if slot.balance <= 0:
                continue
            interest = monthly_interest_cents(slot.balance, slot.instrument.apr)
            slot.balance += interest
            month_interest += interest
        self.cumulative_interest += month_interest
        return month_interest

    def apply_minimums(self) -> None:
        for slot in self.slots.values():
            if slot.balance <= 0:
                continue
            slot.balance -= min(slot.minimum, slot.balance)

    def allocate_extra(self, available: int, strategy: Strategy) -> dict[int, int]:
        """Spend ``available`` cents down the priority list. Returns cents paid per position."""
        positions = [
            pos for pos, slot in self.slots.items()
            if slot.is_active and slot.balance > 0
        ]
        ranked = order_by_strategy(
            [self.slots[pos].instrument for pos in positions],
            strategy,
            balances=[self.slots[pos].balance for pos in positions],
        )

        allocations: dict[int, int] = {}
        for idx in ranked:
            if available <= 0:
                break
            slot = self.slots[positions[idx]]
            payment = min(available, slot.balance)
            slot.balance -= payment
            available -= payment
            allocations[positions[idx]] = payment
        return allocations

    def settle(self, month: int) -> list[int]:
        """Move every slot that reached zero to PaidOff and grow the freed pool.

        The freed minimums only become spendable from the next month.
        """
        settled: list[int] = []
        for pos, slot in self.slots.items():
            if slot.is_active and slot.balance <= 0:
                self.freed_minimums += slot.mark_paid_off(month)
                settled.append(pos)
        return settled

    def balance_of(self, pos: int) -> int:
        slot = self.slots.get(pos)
        return slot.balance if slot is not None else 0


@dataclass
class _MonthOneCapture:
    extra: dict[int, int] = field(default_factory=dict)
    balances: dict[int, int] = field(default_factory=dict)


def _validate(
    instruments: Sequence[DebtInstrument],
    monthly_extra_budget: Decimal,
    one_time_extra: Decimal | None,
) -> None:
    require_amount("monthly_extra_budget", monthly_extra_budget)
    if one_time_extra is not None:
        require_amount("one_time_extra", one_time_extra)
    for inst in instruments:
        # Non-positive balances are legal: they are simply left out of the run
        require_at_most(f"{inst.id}.balance", inst.balance, MAX_AMOUNT)
        require_non_negative(f"{inst.id}.apr", inst.apr)
        require_at_most(f"{inst.id}.apr", inst.apr, MAX_APR)
        require_amount(f"{inst.id}.minimum_payment", inst.minimum_payment)


def simulate(
    instruments: Sequence[DebtInstrument],
    monthly_extra_budget: Decimal,
    strategy: Strategy,
    one_time_extra: Decimal | None = None,
    *,
    as_of: date | None = None,
) -> PayoffPlan:
    """Project the payoff of every instrument month by month.

    Each month: accrue interest, pay minimums, then spend the extra budget
    (plus minimums freed by cards already paid off, plus ``one_time_extra`` in
    month 1) in strategy order. Stops once everything is paid off or after
    MAX_MONTHS, in which case the plan is flagged ``capped``.

    Args:
        instruments: Debt snapshot. Never mutated.
        monthly_extra_budget: Amount available beyond the minimums each month
        strategy: Avalanche or snowball
        one_time_extra: Lump sum applied in month 1 only
        as_of: "Now" for month labels and dates. Defaults to today.
    """
    _validate(instruments, monthly_extra_budget, one_time_extra)
    as_of = as_of or date.today()

    total_current_debt = round_cents(
        sum((inst.balance for inst in instruments), Decimal("0"))
    )
    plan = PayoffPlan(
        total_current_debt=total_current_debt,
        monthly_extra_budget=monthly_extra_budget,
        strategy=strategy,
    )

    state = SimulationState(slots={
        pos: InstrumentSlot(
            instrument=inst,
            balance=to_cents(inst.balance),
            minimum=to_cents(inst.minimum_payment),
        )
        for pos, inst in enumerate(instruments)
        if to_cents(inst.balance) > 0
    })

    if not state.slots:
        plan.payment_instructions = _build_instructions(
            instruments, state, _MonthOneCapture(), as_of
        )
        plan.debt_free_date = month_iso(as_of, 0)
        return plan

    budget = to_cents(monthly_extra_budget)
    lump_sum = to_cents(one_time_extra) if one_time_extra else 0
    month_one = _MonthOneCapture()
    timeline: list[TimelineEntry] = []

    for month in range(1, MAX_MONTHS + 1):
        month_interest = state.accrue_interest()
        state.apply_minimums()

        available = budget + state.freed_minimums
        if month == 1:
            available += lump_sum
        allocations = state.allocate_extra(available, strategy)

        state.settle(month)

        if month == 1:
            month_one.extra = allocations
            month_one.balances = {pos: slot.balance for pos, slot in state.slots.items()}

        timeline.append(TimelineEntry(
            month=month,
            label=month_label(as_of, month),
            card_balances=[
                CardBalance(
                    card_id=inst.id,
                    card_name=inst.name,
                    balance=from_cents(state.balance_of(pos)),
                )
                for pos, inst in enumerate(instruments)
            ],
            total_debt=from_cents(sum(slot.balance for slot in state.slots.values())),
            interest_this_month=from_cents(month_interest),
            interest_cumulative=from_cents(state.cumulative_interest),
        ))

        if state.all_paid_off:
            break

    capped = not state.all_paid_off
    months = MAX_MONTHS if capped else len(timeline)
    if capped:
        logger.debug("Payoff simulation capped at %d months (%s)", MAX_MONTHS, strategy.value)
    else:
        logger.debug("Debt free in %d months (%s)", months, strategy.value)

    plan.payment_instructions = _build_instructions(instruments, state, month_one, as_of)
    plan.timeline = timeline
    plan.total_interest_cost = from_cents(state.cumulative_interest)
    plan.months_to_debt_free = months
    plan.debt_free_date = month_iso(as_of, months)
    plan.capped = capped
    return plan


def _build_instructions(
    instruments: Sequence[DebtInstrument],
    state: SimulationState,
    month_one: _MonthOneCapture,
    as_of: date,
) -> list[PaymentInstruction]:
    """Month-1 instructions, one per input instrument in input order."""
    instructions: list[PaymentInstruction] = []
    for pos, inst in enumerate(instruments):
        slot = state.slots.get(pos)
        payoff_month = slot.payoff_month if slot is not None else None
        instructions.append(PaymentInstruction(
            card_id=inst.id,
            card_name=inst.name,
            owner=inst.owner,
            minimum_payment=round_cents(inst.minimum_payment),
            extra_payment=from_cents(month_one.extra.get(pos, 0)),
            new_balance=from_cents(month_one.balances.get(pos, 0)),
            pays_off_this_month=payoff_month == 1,
            projected_payoff_date=(
                month_iso(as_of, payoff_month) if payoff_month is not None else None
            ),
        ))
    return instructions
