"""Gateway interfaces for the services a purchase depends on.

Gateways must be swappable; the service only ever sees these contracts.
"""

from abc import ABC, abstractmethod


class PaymentCollector(ABC):
    """Interface for the external payment gateway."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge `amount` currency units to the given account."""
        ...


class SeatAllocator(ABC):
    """Interface for the external seat reservation service."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve `seat_count` seats for the given account."""
        ...
