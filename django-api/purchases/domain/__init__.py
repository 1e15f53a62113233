from purchases.domain.errors import (
    CollaboratorError,
    DomainError,
    ErrorCode,
    PaymentFailedError,
    PurchaseError,
    SeatReservationFailedError,
)
from purchases.domain.models import PurchaseSummary
from purchases.domain.value_objects import (
    MAX_TICKETS_PER_PURCHASE,
    TICKET_PRICES,
    TicketRequest,
    TicketType,
)

__all__ = [
    "TicketType",
    "TicketRequest",
    "PurchaseSummary",
    "TICKET_PRICES",
    "MAX_TICKETS_PER_PURCHASE",
    "ErrorCode",
    "DomainError",
    "PurchaseError",
    "CollaboratorError",
    "PaymentFailedError",
    "SeatReservationFailedError",
]
