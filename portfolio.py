from __future__ import annotations

"""Portfolio-wide figures for the dashboard view."""

from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, List, Dict

from interest import interest_per_period
from investment import Investment
from ledger import total_paid
from scheduler import next_payment_date


def active_investments(investments: Iterable[Investment]) -> List[Investment]:
    return [inv for inv in investments if inv.is_active]


def total_invested(investments: Iterable[Investment]) -> Decimal:
    return sum((inv.principal for inv in investments), Decimal("0"))


def total_returns(investments: Iterable[Investment]) -> Decimal:
    """Return all cash received so far, across open and closed investments."""

    return sum((total_paid(inv) for inv in investments), Decimal("0"))


def upcoming_payments(
    investments: Iterable[Investment],
    limit: int = 3,
    today: Callable[[], date] = date.today,
) -> List[Dict]:
    """Return the next ``limit`` payments expected across active investments.

    Each entry has the investment ``name``, its ``due_date`` and the expected
    ``amount`` (one period of interest). Due dates that are not after today,
    such as a never-paid investment whose first date has passed, are left out.
    """

    now = today()
    upcoming = []
    for inv in active_investments(investments):
        due = next_payment_date(inv, today)
        if due > now:
            upcoming.append(
                {"name": inv.name, "due_date": due, "amount": interest_per_period(inv)}
            )
    upcoming.sort(key=lambda p: p["due_date"])
    return upcoming[:limit]
