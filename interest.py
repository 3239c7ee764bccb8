from __future__ import annotations

"""Simple interest on an investment's original principal.

Payments never reduce the principal used here, and nothing compounds.
Results are left unrounded; rounding is a display concern.
"""

from decimal import Decimal

from frequency import periods_per_year

HUNDRED = Decimal("100")


def annual_interest(investment) -> Decimal:
    """Return one year of interest on ``investment.principal``."""

    return investment.principal * (investment.interest_rate / HUNDRED)


def interest_per_period(investment) -> Decimal:
    """Return the interest paid out each period of the investment's frequency."""

    return annual_interest(investment) / periods_per_year(investment.frequency)
