from __future__ import annotations

"""Work out when the next payment on an investment is due."""

from datetime import date
from typing import Callable

from dateutil.relativedelta import relativedelta

from frequency import months_per_period
from investment import Investment
from ledger import latest_payment_date


def _add_months(d: date, months: int) -> date:
    """Return ``d`` moved by ``months``, clamping to the target month's length."""

    return d + relativedelta(months=months)


def next_payment_date(
    investment: Investment, today: Callable[[], date] = date.today
) -> date:
    """Return the date the next payment on ``investment`` is expected.

    A closed investment returns its start date, which callers must treat as
    "no next payment" rather than a due date.

    Without any logged payments the first due date is one period after the
    start date, even if that date has already passed. Once payments exist the
    schedule continues one period after the latest payment and skips forward
    whole periods until the date is no longer before ``today()``.
    """

    if not investment.is_active:
        return investment.start_date

    step = months_per_period(investment.frequency)
    anchor = latest_payment_date(investment.payments)
    if anchor is None:
        return _add_months(investment.start_date, step)

    now = today()
    periods = 1
    next_date = _add_months(anchor, step)
    while next_date < now:
        periods += 1
        # step from the anchor so month-end clamping never accumulates
        next_date = _add_months(anchor, step * periods)
    return next_date
