"""Submit a ticket purchase from the command line.

Usage:
    python manage.py purchase_tickets --account-id 1 --ticket ADULT:4 --ticket CHILD:20
    python manage.py purchase_tickets --account-id 1 --ticket ADULT:2 --ticket INFANT:1 --quote
"""

import argparse
import typing as t

from django.core.management.base import BaseCommand, CommandError

from purchases.domain import DomainError, TicketRequest, TicketType
from purchases.services import get_purchase_service


def parse_ticket(value: str) -> TicketRequest:
    """Parse a TYPE:COUNT pair such as ``ADULT:2``."""
    ticket_type, sep, count = value.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected TYPE:COUNT, got {value!r}")
    try:
        return TicketRequest(type=TicketType.from_string(ticket_type), count=int(count))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


class Command(BaseCommand):
    help = "Validate a ticket purchase, take payment and reserve seats."

    def add_arguments(self, parser: t.Any) -> None:
        """Add CLI arguments."""
        parser.add_argument("--account-id", type=int, required=True, help="Account to charge.")
        parser.add_argument(
            "--ticket",
            type=parse_ticket,
            action="append",
            default=[],
            dest="tickets",
            metavar="TYPE:COUNT",
            help="Ticket type and count, e.g. ADULT:2. Repeat for several types.",
        )
        parser.add_argument(
            "--quote",
            action="store_true",
            help="Only validate and price the purchase; no payment or reservation.",
        )

    def handle(self, *args: t.Any, **kwargs: t.Any) -> None:
        """Run the purchase."""
        account_id: int = kwargs["account_id"]
        tickets: list[TicketRequest] = kwargs["tickets"]
        service = get_purchase_service()

        try:
            if kwargs["quote"]:
                summary = service.check_purchase(account_id, tickets)
            else:
                summary = service.purchase_tickets(account_id, tickets)
        except DomainError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(
            self.style.SUCCESS(
                f"Account {summary.account_id}: {summary.total_tickets} tickets, "
                f"{summary.total_seats} seats, total price {summary.total_price}"
            )
        )
