"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    MISSING_TICKET_TYPE = "MISSING_TICKET_TYPE"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    SEAT_RESERVATION_FAILED = "SEAT_RESERVATION_FAILED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PurchaseError(DomainError):
    """Raised when a purchase request breaks a ticket rule."""


class CollaboratorError(DomainError):
    """Raised when an outside collaborator fails while processing a purchase."""

    def __init__(self, code: ErrorCode, message: str, account_id: int) -> None:
        super().__init__(code=code, message=message)
        self.account_id = account_id


class PaymentFailedError(CollaboratorError):
    """Raised when the payment collector rejects or fails a payment."""

    def __init__(self, account_id: int, amount: int) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_FAILED,
            message="payment failed",
            account_id=account_id,
        )
        self.amount = amount


class SeatReservationFailedError(CollaboratorError):
    """Raised when the seat allocator fails to reserve seats."""

    def __init__(self, account_id: int, seat_count: int) -> None:
        super().__init__(
            code=ErrorCode.SEAT_RESERVATION_FAILED,
            message="seat reservation failed",
            account_id=account_id,
        )
        self.seat_count = seat_count
