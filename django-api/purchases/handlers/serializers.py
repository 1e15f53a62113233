"""Serializers for purchase requests and responses.

Serializers check request shape only. Business rules (null types,
non-positive counts, the ticket limit) are left to the service so that
every caller gets the same domain errors.
"""

from rest_framework import serializers

from purchases.domain import TicketRequest, TicketType


class TicketRequestSerializer(serializers.Serializer):
    """Serializer for a single (ticket type, count) pair."""

    type = serializers.CharField(required=False, allow_null=True, default=None)
    count = serializers.IntegerField()

    def validate_type(self, value: str | None) -> TicketType | None:
        # A missing or null type is left for the service to reject.
        if value is None:
            return None
        try:
            return TicketType.from_string(value)
        except ValueError as e:
            raise serializers.ValidationError(str(e)) from e


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for a purchase submission."""

    account_id = serializers.IntegerField()
    tickets = TicketRequestSerializer(many=True)

    def to_domain(self) -> tuple[int, list[TicketRequest]]:
        tickets = [
            TicketRequest(
                type=ticket["type"],
                count=ticket["count"],
            )
            for ticket in self.validated_data["tickets"]
        ]
        return self.validated_data["account_id"], tickets


class PurchaseSummarySerializer(serializers.Serializer):
    """Serializer for the PurchaseSummary domain model."""

    account_id = serializers.IntegerField()
    total_price = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    total_tickets = serializers.IntegerField()
