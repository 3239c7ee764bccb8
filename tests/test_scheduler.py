import os
import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from frequency import FREQUENCIES
from scheduler import next_payment_date
from factories import TODAY, make_investment, make_payments


def test_closed_investment_returns_start_date(today):
    inv = make_investment(
        status="closed", payments=make_payments(("2026-09-01", 120))
    )
    assert next_payment_date(inv, today) == inv.start_date


def test_first_due_date_is_one_period_after_start(today):
    inv = make_investment(frequency="quarterly", start_date=date(2026, 9, 10))
    assert next_payment_date(inv, today) == date(2026, 12, 10)


def test_first_due_date_is_not_rolled_forward(today):
    """A never-paid investment reports its first due date even when it has passed."""
    inv = make_investment(start_date=date(2020, 1, 15))
    due = next_payment_date(inv, today)
    assert due == date(2020, 2, 15)
    assert due < TODAY


def test_next_date_follows_latest_payment_by_value(today):
    inv = make_investment(
        frequency="quarterly",
        payments=make_payments(
            ("2026-06-01", 360), ("2026-01-01", 360), ("2026-09-01", 360)
        ),
    )
    assert next_payment_date(inv, today) == date(2026, 12, 1)


def test_past_due_date_rolls_forward_whole_periods(today):
    inv = make_investment(payments=make_payments(("2026-01-10", 120)))
    assert next_payment_date(inv, today) == date(2026, 11, 10)


def test_due_today_is_not_rolled(today):
    inv = make_investment(payments=make_payments(("2026-09-19", 120)))
    assert next_payment_date(inv, today) == TODAY


def test_month_end_clamping_does_not_drift():
    inv = make_investment(payments=make_payments(("2026-01-31", 120)))
    assert next_payment_date(inv, lambda: date(2026, 2, 1)) == date(2026, 2, 28)
    assert next_payment_date(inv, lambda: date(2026, 3, 15)) == date(2026, 3, 31)


def test_yearly_from_leap_day():
    inv = make_investment(
        frequency="yearly", payments=make_payments(("2024-02-29", 1440))
    )
    assert next_payment_date(inv, lambda: date(2024, 3, 1)) == date(2025, 2, 28)


@pytest.mark.parametrize("frequency", list(FREQUENCIES))
@pytest.mark.parametrize("days_later", [0, 1, 45, 400, 3000])
def test_next_date_never_before_today(frequency, days_later):
    inv = make_investment(
        frequency=frequency, payments=make_payments(("2019-05-31", 100))
    )
    now = date(2019, 5, 31) + timedelta(days=days_later)
    due = next_payment_date(inv, lambda: now)
    assert due >= now
