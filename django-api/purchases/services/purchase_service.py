"""Purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate purchase rules in a fixed order
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

import structlog

from purchases.domain import (
    MAX_TICKETS_PER_PURCHASE,
    ErrorCode,
    PaymentFailedError,
    PurchaseError,
    PurchaseSummary,
    SeatReservationFailedError,
    TicketRequest,
    TicketType,
)
from purchases.gateways import (
    PaymentCollector,
    SeatAllocator,
    get_payment_collector,
    get_seat_allocator,
)

logger = structlog.get_logger(__name__)


def count_tickets(requests: Sequence[TicketRequest], ticket_type: TicketType | None = None) -> int:
    """Sum ticket counts, optionally only for one ticket type."""
    return sum(r.count for r in requests if ticket_type is None or r.type is ticket_type)


@dataclass(frozen=True)
class PurchaseRule:
    """A single purchase check: `violated` returns True when the rule is broken."""

    code: ErrorCode
    message: str
    violated: Callable[[int, Sequence[TicketRequest]], bool]

    def check(self, account_id: int, requests: Sequence[TicketRequest]) -> None:
        if self.violated(account_id, requests):
            raise PurchaseError(code=self.code, message=self.message)


# Evaluated in order; the first broken rule is the one reported.
PURCHASE_RULES: tuple[PurchaseRule, ...] = (
    PurchaseRule(
        code=ErrorCode.INVALID_ACCOUNT_ID,
        message="account id must be positive",
        violated=lambda account_id, requests: account_id <= 0,
    ),
    PurchaseRule(
        code=ErrorCode.MISSING_TICKET_TYPE,
        message="ticket type must not be null",
        violated=lambda account_id, requests: any(r.type is None for r in requests),
    ),
    PurchaseRule(
        code=ErrorCode.INVALID_TICKET_COUNT,
        message="ticket count must be positive",
        violated=lambda account_id, requests: any(r.count <= 0 for r in requests),
    ),
    PurchaseRule(
        code=ErrorCode.TICKET_LIMIT_EXCEEDED,
        message=f"only {MAX_TICKETS_PER_PURCHASE} tickets are allowed per purchase",
        violated=lambda account_id, requests: count_tickets(requests) > MAX_TICKETS_PER_PURCHASE,
    ),
    PurchaseRule(
        code=ErrorCode.ADULT_TICKET_REQUIRED,
        message="child and infant tickets require at least one adult ticket",
        violated=lambda account_id, requests: not any(r.type is TicketType.ADULT for r in requests),
    ),
    PurchaseRule(
        code=ErrorCode.TOO_MANY_INFANTS,
        message="infant count must not exceed adult count",
        violated=lambda account_id, requests: (
            count_tickets(requests, TicketType.INFANT) > count_tickets(requests, TicketType.ADULT)
        ),
    ),
)


class PurchaseService:
    """Service for validating and processing ticket purchases."""

    def __init__(self, payment_collector: PaymentCollector, seat_allocator: SeatAllocator) -> None:
        self._payment_collector = payment_collector
        self._seat_allocator = seat_allocator

    def check_purchase(self, account_id: int, requests: Iterable[TicketRequest]) -> PurchaseSummary:
        """Validate a purchase and compute its totals without charging or reserving anything.

        Raises:
            PurchaseError: If any purchase rule is broken. Only the first
                broken rule is reported.
        """
        requests = tuple(requests)
        for rule in PURCHASE_RULES:
            try:
                rule.check(account_id, requests)
            except PurchaseError as e:
                logger.info(
                    "purchase_rejected",
                    account_id=account_id,
                    code=e.code.value,
                    reason=e.message,
                )
                raise

        return PurchaseSummary(
            account_id=account_id,
            total_price=sum(r.total_price() for r in requests),
            total_seats=sum(r.seats_to_allocate() for r in requests),
            total_tickets=count_tickets(requests),
        )

    def purchase_tickets(self, account_id: int, requests: Iterable[TicketRequest]) -> PurchaseSummary:
        """Validate a purchase, take payment and reserve seats.

        Payment is taken before seats are reserved. The reservation is still
        attempted when the payment fails, and nothing is rolled back.

        Raises:
            PurchaseError: If any purchase rule is broken. No collaborator is called.
            PaymentFailedError: If the payment collector raised.
            SeatReservationFailedError: If the seat allocator raised and the
                payment succeeded.
        """
        summary = self.check_purchase(account_id, requests)

        payment_error: PaymentFailedError | None = None
        try:
            self._payment_collector.make_payment(account_id, summary.total_price)
        except Exception as e:
            logger.exception("payment_failed", account_id=account_id, amount=summary.total_price)
            payment_error = PaymentFailedError(account_id, summary.total_price)
            payment_error.__cause__ = e

        try:
            self._seat_allocator.reserve_seat(account_id, summary.total_seats)
        except Exception as e:
            logger.exception("seat_reservation_failed", account_id=account_id, seat_count=summary.total_seats)
            if payment_error is None:
                raise SeatReservationFailedError(account_id, summary.total_seats) from e

        if payment_error is not None:
            raise payment_error

        logger.info(
            "purchase_completed",
            account_id=account_id,
            total_price=summary.total_price,
            total_seats=summary.total_seats,
        )
        return summary


def get_purchase_service() -> PurchaseService:
    """Build a PurchaseService wired to the configured gateways."""
    return PurchaseService(
        payment_collector=get_payment_collector(),
        seat_allocator=get_seat_allocator(),
    )
