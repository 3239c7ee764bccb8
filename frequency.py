from __future__ import annotations

"""Payout frequencies for tracked investments.

Each frequency is registered in ``FREQUENCIES`` with the number of payout
periods per year. Every entry divides twelve so the scheduler can step dates
by whole months.
"""

from typing import Dict

MONTHLY = "monthly"
QUARTERLY = "quarterly"
HALF_YEARLY = "half-yearly"
YEARLY = "yearly"

FREQUENCIES: Dict[str, int] = {
    MONTHLY: 12,
    QUARTERLY: 4,
    HALF_YEARLY: 2,
    YEARLY: 1,
}


def periods_per_year(frequency: str) -> int:
    """Return how many payout periods ``frequency`` has in a year."""

    try:
        return FREQUENCIES[frequency]
    except KeyError:
        raise ValueError(f"Unknown frequency: {frequency}")


def months_per_period(frequency: str) -> int:
    return 12 // periods_per_year(frequency)
