from __future__ import annotations

"""State transitions over a collection of investments.

Every function takes the current collection and returns a new list; records
are never changed in place. Transitions that name an unknown investment leave
the collection as it was. Persisting the result is up to the caller.
"""

import logging
from dataclasses import fields, replace
from datetime import date
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional

import ledger
from frequency import periods_per_year
from investment import CLOSED, STATUSES, Investment, _parse_date

logger = logging.getLogger(__name__)

_FIELDS = {f.name for f in fields(Investment)}


def create_investment(
    name: str,
    principal,
    interest_rate,
    frequency: str,
    start_date: date | str,
    *,
    new_id: Callable[[], str] = ledger.generate_id,
) -> Investment:
    """Return a new active investment with an empty ledger.

    Principal and rate are expected to be positive; callers validate input.
    """

    periods_per_year(frequency)
    return Investment(
        id=new_id(),
        name=name,
        principal=Decimal(str(principal)),
        interest_rate=Decimal(str(interest_rate)),
        frequency=frequency,
        start_date=_parse_date(start_date),
    )


def add_investment(
    investments: Iterable[Investment],
    name: str,
    principal,
    interest_rate,
    frequency: str,
    start_date: date | str,
    *,
    new_id: Callable[[], str] = ledger.generate_id,
) -> List[Investment]:
    investment = create_investment(
        name, principal, interest_rate, frequency, start_date, new_id=new_id
    )
    return list(investments) + [investment]


def find_investment(
    investments: Iterable[Investment], investment_id: str
) -> Optional[Investment]:
    return next((inv for inv in investments if inv.id == investment_id), None)


def edit(existing: Investment, patch: Dict) -> Investment:
    """Return ``existing`` with the fields in ``patch`` replaced.

    The identity is always kept. Payments and status only change when the
    patch includes them; unknown keys are ignored. A closed investment stays
    closed.
    """

    changes = {k: v for k, v in patch.items() if k in _FIELDS and k != "id"}
    if "status" in changes:
        if changes["status"] not in STATUSES:
            raise ValueError(f"Unknown status: {changes['status']}")
        if existing.status == CLOSED:
            changes["status"] = CLOSED
    for key in ("principal", "interest_rate"):
        if key in changes:
            changes[key] = Decimal(str(changes[key]))
    if "start_date" in changes:
        changes["start_date"] = _parse_date(changes["start_date"])
    if "frequency" in changes:
        periods_per_year(changes["frequency"])
    if "payments" in changes:
        changes["payments"] = tuple(changes["payments"])
    return replace(existing, **changes)


def _apply(
    investments: Iterable[Investment],
    investment_id: str,
    change: Callable[[Investment], Investment],
) -> List[Investment]:
    result = []
    found = False
    for inv in investments:
        if inv.id == investment_id:
            found = True
            inv = change(inv)
        result.append(inv)
    if not found:
        logger.debug("No investment with id %s; collection unchanged", investment_id)
    return result


def update_investment(
    investments: Iterable[Investment], investment_id: str, patch: Dict
) -> List[Investment]:
    return _apply(investments, investment_id, lambda inv: edit(inv, patch))


def log_payment(
    investments: Iterable[Investment],
    investment_id: str,
    amount,
    on: date | str | None = None,
    *,
    today: Callable[[], date] = date.today,
    new_id: Callable[[], str] = ledger.generate_id,
) -> List[Investment]:
    """Record a payment against ``investment_id``.

    Missing, non-finite or non-positive amounts are skipped.
    """

    if ledger.payment_amount(amount) is None:
        logger.debug("Ignoring payment of %r for %s", amount, investment_id)
        return list(investments)
    return _apply(
        investments,
        investment_id,
        lambda inv: ledger.log_payment(inv, amount, on, today=today, new_id=new_id),
    )


def close(investment: Investment) -> Investment:
    if investment.status == CLOSED:
        return investment
    return replace(investment, status=CLOSED)


def close_investment(
    investments: Iterable[Investment], investment_id: str
) -> List[Investment]:
    return _apply(investments, investment_id, close)
