from __future__ import annotations

"""Cumulative earnings forecast for an investment.

Interest is simple, so the yearly total depends only on principal and rate;
the payout frequency changes how each year is split, not what it adds up to.
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Dict, List

from interest import annual_interest
from investment import Investment

DEFAULT_PROJECTION_YEARS = 5


def project_earnings(
    investment: Investment,
    years: int = DEFAULT_PROJECTION_YEARS,
    today: Callable[[], date] = date.today,
) -> List[Dict]:
    """Return cumulative earnings for each of the next ``years`` years.

    Each entry has a calendar ``year`` and the ``earnings`` accumulated by the
    end of it. Closed investments have no projection, and neither does a
    non-positive horizon.
    """

    if not investment.is_active:
        return []
    yearly = annual_interest(investment)
    current_year = today().year
    return [
        {"year": current_year + i, "earnings": yearly * i}
        for i in range(1, years + 1)
    ]


def projected_total_earnings(
    investment: Investment,
    years: int = DEFAULT_PROJECTION_YEARS,
    today: Callable[[], date] = date.today,
) -> Decimal:
    projections = project_earnings(investment, years, today)
    if not projections:
        return Decimal("0")
    return projections[-1]["earnings"]


def projected_future_value(
    investment: Investment,
    years: int = DEFAULT_PROJECTION_YEARS,
    today: Callable[[], date] = date.today,
) -> Decimal:
    """Return principal plus the earnings projected over ``years``."""

    return investment.principal + projected_total_earnings(investment, years, today)
