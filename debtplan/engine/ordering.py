"""Payment priority for avalanche and snowball strategies.

Pure function. No I/O.
"""

from collections.abc import Sequence
from decimal import Decimal

from debtplan.engine.money import from_cents
from debtplan.models.debt import DebtInstrument, Strategy


def order_by_strategy(
    instruments: Sequence[DebtInstrument],
    strategy: Strategy,
    balances: Sequence[int] | None = None,
) -> list[int]:
    """Return the positions of ``instruments`` in payment priority order.

    Avalanche: highest APR first, ties broken by lowest balance.
    Snowball: lowest balance first, ties broken by highest APR.
    Instruments tied on both keys keep their input order.

    Args:
        instruments: Instruments to rank
        strategy: Avalanche or snowball
        balances: Current balances in cents, parallel to ``instruments``.
            Defaults to each instrument's own balance.
    """
    if balances is None:
        current = [inst.balance for inst in instruments]
    else:
        current = [from_cents(cents) for cents in balances]

    def key(pos: int) -> tuple[Decimal, Decimal]:
        apr = instruments[pos].apr
        if strategy is Strategy.AVALANCHE:
            return (-apr, current[pos])
        return (current[pos], -apr)

    # sorted() is stable, so input order is the final tie-break
    return sorted(range(len(instruments)), key=key)
