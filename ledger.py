from __future__ import annotations

"""Operations over an investment's append-only payment ledger."""

import uuid
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Optional

from investment import Investment, Payment, _parse_date


def generate_id() -> str:
    return str(uuid.uuid4())


def total_paid(investment: Investment) -> Decimal:
    return sum((p.amount for p in investment.payments), Decimal("0"))


def outstanding_balance(investment: Investment) -> Decimal:
    """Return principal minus cash received.

    Interest is not taken into account; this is the simple balance shown
    alongside each investment.
    """

    return investment.principal - total_paid(investment)


def latest_payment_date(payments: Iterable[Payment]) -> Optional[date]:
    """Return the most recent payment date, or ``None`` without payments.

    Payments may have been recorded out of order, so the ledger is scanned by
    date rather than by position.
    """

    return max((p.date for p in payments), default=None)


def payment_amount(amount) -> Optional[Decimal]:
    """Return ``amount`` as a ``Decimal``, or ``None`` if it cannot be logged.

    Missing, non-finite and non-positive amounts are rejected.
    """

    if amount is None:
        return None
    amount = Decimal(str(amount))
    if not amount.is_finite() or amount <= 0:
        return None
    return amount


def log_payment(
    investment: Investment,
    amount,
    on: date | str | None = None,
    *,
    today: Callable[[], date] = date.today,
    new_id: Callable[[], str] = generate_id,
) -> Investment:
    """Return ``investment`` with a payment of ``amount`` appended.

    ``on`` defaults to ``today()``. A missing, non-finite or non-positive amount leaves
    the investment unchanged.
    """

    amount = payment_amount(amount)
    if amount is None:
        return investment
    payment = Payment(
        id=new_id(),
        date=today() if on is None else _parse_date(on),
        amount=amount,
    )
    return replace(investment, payments=investment.payments + (payment,))
