"""Cent rounding and input guards shared by every engine module.

Pure functions. No I/O.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")
ONE_PLACE = Decimal("0.1")
WHOLE = Decimal("1")
CENTS_PER_DOLLAR = 100

# Upper bounds on inputs. Within them a 360-month run stays inside the
# default 28-digit Decimal context.
MAX_AMOUNT = Decimal("1000000000")
MAX_APR = Decimal("100")


def round_cents(amount: Decimal) -> Decimal:
    """Round to the nearest cent, half away from zero."""
    return Decimal(amount).quantize(TWO_PLACES, ROUND_HALF_UP)


def round_percent(value: Decimal) -> Decimal:
    """Round a percentage to one decimal place."""
    return Decimal(value).quantize(ONE_PLACE, ROUND_HALF_UP)


def to_cents(amount: Decimal) -> int:
    return int((Decimal(amount) * CENTS_PER_DOLLAR).quantize(WHOLE, ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / CENTS_PER_DOLLAR).quantize(TWO_PLACES)


def monthly_interest_cents(balance_cents: int, apr: Decimal) -> int:
    """One month of interest on a balance: balance * apr / 100 / 12, to the cent."""
    if balance_cents <= 0 or apr <= 0:
        return 0
    interest = Decimal(balance_cents) * Decimal(apr) / Decimal("1200")
    return int(interest.quantize(WHOLE, ROUND_HALF_UP))


def require_finite(name: str, value) -> None:
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"{name} must be a finite number, got {value}")
    elif isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value}")


def require_non_negative(name: str, value) -> None:
    require_finite(name, value)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def require_at_most(name: str, value, bound: Decimal) -> None:
    require_finite(name, value)
    if abs(value) > bound:
        raise ValueError(f"{name} must be at most {bound} in magnitude, got {value}")


def require_amount(name: str, value) -> None:
    """Non-negative dollar amount no larger than MAX_AMOUNT."""
    require_non_negative(name, value)
    require_at_most(name, value, MAX_AMOUNT)
