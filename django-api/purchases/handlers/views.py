"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from purchases.domain import CollaboratorError, PurchaseError
from purchases.handlers.serializers import PurchaseRequestSerializer, PurchaseSummarySerializer
from purchases.services import get_purchase_service


def error_response(error: PurchaseError | CollaboratorError, status_code: int) -> Response:
    return Response({"code": error.code.value, "message": error.message}, status=status_code)


class BasePurchaseView(APIView):
    """Shared request parsing and error mapping for purchase endpoints."""

    def handle_purchase(self, request: Request, *, quote: bool) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"code": "INVALID_REQUEST", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        account_id, tickets = serializer.to_domain()

        try:
            service = get_purchase_service()
            if quote:
                summary = service.check_purchase(account_id, tickets)
            else:
                summary = service.purchase_tickets(account_id, tickets)
        except PurchaseError as e:
            return error_response(e, status.HTTP_400_BAD_REQUEST)
        except CollaboratorError as e:
            return error_response(e, status.HTTP_502_BAD_GATEWAY)

        return Response(PurchaseSummarySerializer(summary).data, status=status.HTTP_200_OK)


class PurchaseView(BasePurchaseView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        return self.handle_purchase(request, quote=False)


class PurchaseQuoteView(BasePurchaseView):
    """Handler for POST /api/purchases/quote"""

    def post(self, request: Request) -> Response:
        return self.handle_purchase(request, quote=True)
