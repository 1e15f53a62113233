"""Domain models describing the outcome of a purchase.

These are pure domain objects with no API input rules.
Nothing here is persisted.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PurchaseSummary:
    """Totals computed for a valid purchase."""

    account_id: int
    total_price: int
    total_seats: int
    total_tickets: int
