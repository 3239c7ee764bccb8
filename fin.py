"""Command-line interface for tracking investments and their payouts."""

from decimal import Decimal, InvalidOperation
import logging
import os
from typing import List, Optional

import lifecycle
from frequency import FREQUENCIES, MONTHLY
from interest import interest_per_period
from investment import Investment
from ledger import outstanding_balance, payment_amount, total_paid
from portfolio import total_invested, total_returns, upcoming_payments
from projections import (
    DEFAULT_PROJECTION_YEARS,
    project_earnings,
    projected_future_value,
)
from scheduler import next_payment_date
from store import load, save

logger = logging.getLogger(__name__)

BAD_INPUT = (ValueError, InvalidOperation)


# ---------------------------------------------------------------------------
# Display helpers


def _describe(inv: Investment) -> str:
    line = (
        f"{inv.name} ${inv.principal:.2f} at {inv.interest_rate}% "
        f"{inv.frequency} since {inv.start_date.isoformat()} [{inv.status}]"
    )
    if inv.is_active:
        line += f" next due {next_payment_date(inv).isoformat()}"
    return line


def _list(investments: List[Investment]) -> None:
    print("\nInvestments:")
    if not investments:
        print("  (none)")
    for i, inv in enumerate(investments, 1):
        print(f"{i}. {_describe(inv)}")


def _choose(investments: List[Investment]) -> Optional[Investment]:
    _list(investments)
    idx = input("Investment number: ").strip()
    if idx.isdigit() and 1 <= int(idx) <= len(investments):
        return investments[int(idx) - 1]
    print("Investment not found.")
    return None


def _read_frequency(default: str) -> str:
    options = "/".join(FREQUENCIES)
    while True:
        freq = input(f"Frequency ({options}) [{default}]: ").strip().lower() or default
        if freq in FREQUENCIES:
            return freq
        print("Unknown frequency. Please try again.")


def show_dashboard(investments: List[Investment]) -> None:
    """Print portfolio totals, upcoming payments and every investment."""

    print("\n--- Dashboard ---")
    print(f"Total invested: ${total_invested(investments):.2f}")
    print(f"Total returns:  ${total_returns(investments):.2f}")
    upcoming = upcoming_payments(investments)
    if upcoming:
        print("Upcoming payments:")
        for p in upcoming:
            print(f"  {p['due_date'].isoformat()}: {p['name']} ${p['amount']:.2f}")
    _list(investments)


def show_details(inv: Investment) -> None:
    print(f"\n{_describe(inv)}")
    print(f"  Interest per period: ${interest_per_period(inv):.2f}")
    print(f"  Total paid: ${total_paid(inv):.2f}")
    print(f"  Outstanding balance: ${outstanding_balance(inv):.2f}")
    for p in inv.payments:
        print(f"  - {p.date.isoformat()} ${p.amount:.2f}")


# ---------------------------------------------------------------------------
# Actions


def add_investment(investments: List[Investment]) -> List[Investment]:
    """Prompt for a new investment and persist the updated collection."""

    name = input("Name: ").strip() or "Investment"
    try:
        principal = Decimal(input("Principal: ").strip())
        rate = Decimal(input("Annual interest rate (%): ").strip())
        freq = _read_frequency(MONTHLY)
        start = input("Start date (YYYY-MM-DD): ").strip()
        investments = lifecycle.add_investment(
            investments, name, principal, rate, freq, start
        )
    except BAD_INPUT as exc:
        print(f"Warning: {exc}")
        return investments
    save(investments)
    return investments


def edit_investment(investments: List[Investment]) -> List[Investment]:
    """Edit an investment's details; blank answers keep the current value."""

    inv = _choose(investments)
    if inv is None:
        return investments
    patch = {}
    name = input(f"Name [{inv.name}]: ").strip()
    if name:
        patch["name"] = name
    try:
        principal = input(f"Principal [{inv.principal}]: ").strip()
        if principal:
            patch["principal"] = Decimal(principal)
        rate = input(f"Annual interest rate [{inv.interest_rate}]: ").strip()
        if rate:
            patch["interest_rate"] = Decimal(rate)
        patch["frequency"] = _read_frequency(inv.frequency)
        start = input(f"Start date [{inv.start_date.isoformat()}]: ").strip()
        if start:
            patch["start_date"] = start
        investments = lifecycle.update_investment(investments, inv.id, patch)
    except BAD_INPUT as exc:
        print(f"Warning: {exc}")
        return investments
    save(investments)
    return investments


def record_payment(investments: List[Investment]) -> List[Investment]:
    """Log a payment dated today against an investment."""

    inv = _choose(investments)
    if inv is None:
        return investments
    try:
        amount = payment_amount(input("Amount received: ").strip())
    except BAD_INPUT:
        print("Invalid amount.")
        return investments
    if amount is None:
        print("Amount must be positive.")
        return investments
    investments = lifecycle.log_payment(investments, inv.id, amount)
    save(investments)
    show_details(lifecycle.find_investment(investments, inv.id))
    return investments


def close_investment(investments: List[Investment]) -> List[Investment]:
    inv = _choose(investments)
    if inv is None:
        return investments
    confirm = input(f"Close {inv.name}? [y/N]: ").strip().lower()
    if confirm != "y":
        return investments
    investments = lifecycle.close_investment(investments, inv.id)
    save(investments)
    return investments


def show_projections(investments: List[Investment]) -> None:
    """Print the cumulative earnings forecast for one investment."""

    inv = _choose(investments)
    if inv is None:
        return
    show_details(inv)
    years_str = input(f"Years to project [{DEFAULT_PROJECTION_YEARS}]: ").strip()
    years = int(years_str) if years_str.isdigit() else DEFAULT_PROJECTION_YEARS
    if not inv.is_active:
        print("No projections available for closed investments.")
        return
    projections = project_earnings(inv, years)
    if not projections:
        print("Nothing to project.")
        return
    for row in projections:
        print(f"  {row['year']}: ${row['earnings']:.2f}")
    print(f"Projected value after {years} years: ${projected_future_value(inv, years):.2f}")


# ---------------------------------------------------------------------------
# Menu


def main() -> None:
    """Display the main menu and handle user selections."""
    logging.basicConfig(level=os.environ.get("FIN_LOG_LEVEL", "WARNING").upper())
    investments = load()
    logger.debug("Loaded %d investments", len(investments))
    while True:
        print("\n--- Investment Menu ---")
        print("1. Dashboard")
        print("2. Add investment")
        print("3. Edit investment")
        print("4. Log payment")
        print("5. Close investment")
        print("6. Projections")
        print("7. Quit")
        choice = input("Select an option: ").strip()
        if choice == "1":
            show_dashboard(investments)
        elif choice == "2":
            investments = add_investment(investments)
        elif choice == "3":
            investments = edit_investment(investments)
        elif choice == "4":
            investments = record_payment(investments)
        elif choice == "5":
            investments = close_investment(investments)
        elif choice == "6":
            show_projections(investments)
        elif choice == "7":
            break
        else:
            print("Invalid option.")


if __name__ == "__main__":
    main()
