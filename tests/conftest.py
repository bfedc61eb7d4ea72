"""Canonical test fixtures used across engine and API tests.

Reference date: 2026-10-17, so month 1 is Nov 2026.
Scenario A: one card, $1,000 at 24% APR, $25 minimum, $200/mo extra.
Scenario B: $300 at 10% ($25 min) and $1,000 at 28.99% ($30 min), $655/mo extra.
"""

from datetime import date
from decimal import Decimal

import pytest

from debtplan.models.debt import DebtInstrument
from debtplan.models.utilization import CreditLine


@pytest.fixture
def as_of() -> date:
    return date(2026, 10, 17)


@pytest.fixture
def scenario_a_cards() -> list[DebtInstrument]:
    return [
        DebtInstrument(
            id="visa",
            name="Visa",
            balance=Decimal("1000.00"),
            apr=Decimal("24.0"),
            minimum_payment=Decimal("25.00"),
            owner="Sam",
        ),
    ]


@pytest.fixture
def scenario_b_cards() -> list[DebtInstrument]:
    return [
        DebtInstrument(
            id="card-a",
            name="Card A",
            balance=Decimal("300.00"),
            apr=Decimal("10"),
            minimum_payment=Decimal("25.00"),
            owner="Sam",
        ),
        DebtInstrument(
            id="card-b",
            name="Card B",
            balance=Decimal("1000.00"),
            apr=Decimal("28.99"),
            minimum_payment=Decimal("30.00"),
            owner="Alex",
        ),
    ]


@pytest.fixture
def household_lines() -> list[CreditLine]:
    """Two users, three cards. Household: $2,600 of $7,500."""
    return [
        CreditLine("c1", "Sam Visa", "u1", "Sam", Decimal("500"), Decimal("1000")),
        CreditLine("c2", "Alex Amex", "u2", "Alex", Decimal("2000"), Decimal("2500")),
        CreditLine("c3", "Sam Discover", "u1", "Sam", Decimal("100"), Decimal("4000")),
    ]
