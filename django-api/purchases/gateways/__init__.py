from django.conf import settings
from django.utils.module_loading import import_string

from purchases.gateways.interfaces import PaymentCollector, SeatAllocator


def get_payment_collector() -> PaymentCollector:
    """Instantiate the payment collector named by PURCHASES_PAYMENT_COLLECTOR."""
    return import_string(settings.PURCHASES_PAYMENT_COLLECTOR)()


def get_seat_allocator() -> SeatAllocator:
    """Instantiate the seat allocator named by PURCHASES_SEAT_ALLOCATOR."""
    return import_string(settings.PURCHASES_SEAT_ALLOCATOR)()


__all__ = [
    "PaymentCollector",
    "SeatAllocator",
    "get_payment_collector",
    "get_seat_allocator",
]
