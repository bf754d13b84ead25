"""画面・CLI・テストなど Lambda 以外の呼び出し元向けの入口

既定の AgencyContext で組み立てた検証・予約・決済の3操作を公開する。
"""

from decimal import Decimal

from agency.catalog.applications import ServiceCatalog
from agency.catalog.domain import ReservationResult, ServiceKind
from agency.context import AgencyContext
from agency.payment.applications import PaymentProcessor
from agency.payment.domain import PaymentMethod, PaymentResult
from agency.reservation.applications import ReservationRequestValidator
from agency.reservation.domain import ReservationRequest, ValidationError

context = AgencyContext.default()
validator = ReservationRequestValidator()
catalog = ServiceCatalog(context=context)
processor = PaymentProcessor(context=context)


def validate_request(
    amount_text: str | None,
    service: ServiceKind | str | None,
    payment_method: PaymentMethod | str | None = None,
    origin: str | None = None,
    destination: str | None = None,
    departure_date: str | None = None,
    departure_time: str | None = None,
) -> ReservationRequest | ValidationError:
    return validator.validate(
        amount_text,
        service,
        payment_method=payment_method,
        origin=origin,
        destination=destination,
        departure_date=departure_date,
        departure_time=departure_time,
    )


def book_service(request: ReservationRequest) -> ReservationResult:
    return catalog.book_request(request)


def process_payment(method: PaymentMethod | None, amount: Decimal) -> PaymentResult:
    return processor.pay(method, amount)
