from __future__ import annotations

"""Investment and payment records.

Records are frozen dataclasses; every change produces a new record. The
``to_dict``/``from_dict`` pair defines the persisted layout used by
``store.py``.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Tuple

from frequency import periods_per_year

ACTIVE = "active"
CLOSED = "closed"
STATUSES = (ACTIVE, CLOSED)


def _parse_date(value: date | str) -> date:
    """Parse a ``date`` object or an ISO date string."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def _to_decimal(value) -> Decimal:
    return Decimal(str(value))


@dataclass(frozen=True)
class Payment:
    """A payment received against an investment."""

    id: str
    date: date
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, "amount", _to_decimal(self.amount))

    def to_dict(self) -> Dict:
        return {"id": self.id, "date": self.date.isoformat(), "amount": str(self.amount)}

    @classmethod
    def from_dict(cls, data: Dict) -> "Payment":
        return cls(
            id=str(data["id"]),
            date=_parse_date(data["date"]),
            amount=_to_decimal(data["amount"]),
        )


@dataclass(frozen=True)
class Investment:
    """A lending position earning simple interest on ``principal``."""

    id: str
    name: str
    principal: Decimal
    interest_rate: Decimal  # annual, percent
    frequency: str
    start_date: date
    payments: Tuple[Payment, ...] = ()
    status: str = ACTIVE

    def __post_init__(self):
        for name in ("principal", "interest_rate"):
            object.__setattr__(self, name, _to_decimal(getattr(self, name)))

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "principal": str(self.principal),
            "interestRate": str(self.interest_rate),
            "frequency": self.frequency,
            "startDate": self.start_date.isoformat(),
            "payments": [p.to_dict() for p in self.payments],
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Investment":
        """Build an investment from its persisted form.

        Raises ``KeyError`` for missing fields, ``ValueError`` for an unknown
        frequency or status or a malformed date, and
        ``decimal.InvalidOperation`` for a malformed amount.
        """

        frequency = data["frequency"]
        periods_per_year(frequency)
        status = data.get("status", ACTIVE)
        if status not in STATUSES:
            raise ValueError(f"Unknown status: {status}")
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            principal=_to_decimal(data["principal"]),
            interest_rate=_to_decimal(data["interestRate"]),
            frequency=frequency,
            start_date=_parse_date(data["startDate"]),
            payments=tuple(Payment.from_dict(p) for p in data.get("payments", [])),
            status=status,
        )
