from dataclasses import dataclass
from decimal import Decimal

from agency.catalog.domain import Route, ServiceKind
from agency.payment.domain import PaymentMethod
from agency.shared.domain import BusinessRuleViolationException


@dataclass(frozen=True)
class ReservationRequest:
    """検証済みの予約リクエスト

    利用者の操作ごとに生成され、予約・決済の後に破棄される。
    """

    service_kind: ServiceKind
    amount: Decimal
    payment_method: PaymentMethod | None = None
    route: Route | None = None

    def __post_init__(self) -> None:
        if not self.amount.is_finite() or self.amount <= 0:
            raise ValueError("Amount must be greater than zero")
        if self.service_kind == ServiceKind.FLIGHT and self.route is None:
            raise BusinessRuleViolationException(
                "A flight reservation requires a route"
            )
        if self.service_kind != ServiceKind.FLIGHT and self.route is not None:
            raise BusinessRuleViolationException(
                f"A {self.service_kind.value} reservation cannot have a route"
            )
