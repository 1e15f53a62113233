"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest
from rest_framework.test import APIClient

from purchases.gateways import PaymentCollector, SeatAllocator
from purchases.services import PurchaseService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def collaborators() -> Mock:
    """Parent mock recording calls to both gateways in order."""
    parent = Mock()
    parent.attach_mock(Mock(spec=PaymentCollector), "payment_collector")
    parent.attach_mock(Mock(spec=SeatAllocator), "seat_allocator")
    return parent


@pytest.fixture
def payment_collector(collaborators: Mock) -> Mock:
    return collaborators.payment_collector


@pytest.fixture
def seat_allocator(collaborators: Mock) -> Mock:
    return collaborators.seat_allocator


@pytest.fixture
def purchase_service(payment_collector: Mock, seat_allocator: Mock) -> PurchaseService:
    return PurchaseService(payment_collector=payment_collector, seat_allocator=seat_allocator)


@pytest.fixture
def wired_service(monkeypatch: pytest.MonkeyPatch, purchase_service: PurchaseService) -> PurchaseService:
    """Make handlers and commands use the mocked purchase service."""
    monkeypatch.setattr("purchases.handlers.views.get_purchase_service", lambda: purchase_service)
    monkeypatch.setattr(
        "purchases.management.commands.purchase_tickets.get_purchase_service",
        lambda: purchase_service,
    )
    return purchase_service
