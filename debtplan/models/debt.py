"""Debt instrument snapshots and household payoff policy."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Strategy(Enum):
    AVALANCHE = "avalanche"  # Highest APR first
    SNOWBALL = "snowball"  # Lowest balance first


@dataclass(frozen=True)
class DebtInstrument:
    id: str
    name: str
    balance: Decimal  # Dollars, cents precision
    apr: Decimal  # Percent, e.g. Decimal("24.99")
    minimum_payment: Decimal
    owner: str = ""


@dataclass(frozen=True)
class PayoffPolicy:
    """The household's saved payoff settings."""
    monthly_extra_budget: Decimal = Decimal("0")
    strategy: Strategy = Strategy.AVALANCHE
