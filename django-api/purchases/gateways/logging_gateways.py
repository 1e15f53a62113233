"""Default gateway implementations.

The real payment gateway and seat booking service are third-party systems.
These stand-ins accept every call and record it as a log event, which is
enough to run the service end to end.
"""

import structlog

from purchases.gateways.interfaces import PaymentCollector, SeatAllocator

logger = structlog.get_logger(__name__)


class LoggingPaymentCollector(PaymentCollector):
    """Payment collector that only logs the charge."""

    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("payment_collected", account_id=account_id, amount=amount)


class LoggingSeatAllocator(SeatAllocator):
    """Seat allocator that only logs the reservation."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("seats_reserved", account_id=account_id, seat_count=seat_count)
