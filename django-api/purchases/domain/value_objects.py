"""Domain primitives for ticket purchases.

Unlike most value objects, TicketRequest does not validate itself at
creation time: a missing type or a non-positive count is a purchase rule
violation reported by the service, not a construction failure.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Self, assert_never

MAX_TICKETS_PER_PURCHASE = 25


class TicketType(Enum):
    """Purchasable ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown ticket type: {value!r}") from None

    @property
    def unit_price(self) -> int:
        return TICKET_PRICES[self]

    @property
    def seats_per_ticket(self) -> int:
        """Infants sit on an adult's lap and take no seat."""
        match self:
            case TicketType.ADULT | TicketType.CHILD:
                return 1
            case TicketType.INFANT:
                return 0
            case _:
                assert_never(self)


TICKET_PRICES: MappingProxyType[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 25,
        TicketType.CHILD: 15,
        TicketType.INFANT: 0,
    }
)


@dataclass(frozen=True)
class TicketRequest:
    """A number of tickets of a single type."""

    type: TicketType | None
    count: int

    def total_price(self) -> int:
        if self.type is None:
            raise ValueError("Cannot price a ticket request without a type")
        return self.count * self.type.unit_price

    def seats_to_allocate(self) -> int:
        if self.type is None:
            raise ValueError("Cannot allocate seats for a ticket request without a type")
        return self.count * self.type.seats_per_ticket
