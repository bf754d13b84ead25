from decimal import Decimal

import pytest

from agency.catalog.domain import Route, ServiceKind
from agency.context import AgencyContext
from agency.payment.domain import PaymentMethod
from agency.reservation.domain import ReservationRequest
from agency.shared.domain import IsoDateTime


@pytest.fixture
def context():
    """全テスト共通の AgencyContext フィクスチャ（USD + 既定の運賃表）"""
    return AgencyContext.default()


@pytest.fixture
def create_route():
    """Route を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        origin: str = "El Salvador",
        destination: str = "Colombia",
        departure: str | None = "2025-03-01T14:30:00",
    ) -> Route:
        return Route(
            origin=origin,
            destination=destination,
            departure=IsoDateTime.from_string(departure) if departure else None,
        )

    return _factory


@pytest.fixture
def create_request(create_route):
    """ReservationRequest を生成する Factory fixture"""

    def _factory(
        service_kind: ServiceKind = ServiceKind.HOTEL,
        amount: Decimal = Decimal("150.00"),
        payment_method: PaymentMethod | None = PaymentMethod.CARD,
        route: Route | None = None,
    ) -> ReservationRequest:
        if service_kind == ServiceKind.FLIGHT and route is None:
            route = create_route()
        return ReservationRequest(
            service_kind=service_kind,
            amount=amount,
            payment_method=payment_method,
            route=route,
        )

    return _factory
