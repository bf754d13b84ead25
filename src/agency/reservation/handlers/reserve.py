from aws_lambda_powertools.utilities.typing import LambdaContext

from agency.catalog.applications import ServiceCatalog
from agency.context import AgencyContext
from agency.payment.applications import PaymentProcessor
from agency.reservation.applications import ReservationRequestValidator
from agency.reservation.domain import ValidationError
from agency.reservation.handlers.request_models import ReserveRequest
from agency.reservation.handlers.response_models import error_response, to_response
from agency.shared.utils.logger import get_logger

logger = get_logger()


agency_context = AgencyContext.from_env()
validator = ReservationRequestValidator()
catalog = ServiceCatalog(context=agency_context)
processor = PaymentProcessor(context=agency_context)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約 Lambda Handler

    入力検証 → サービス予約 → 決済 の順に実行し、最初に失敗した段階の
    エラーを返す。Step Functions 経由の場合は Payload キーから入力を取り出す。
    """
    logger.info("Received reserve request")

    payload = event.get("Payload", event)
    request = ReserveRequest.model_validate(payload)

    validated = validator.validate(
        amount_text=request.amount,
        service=request.service,
        payment_method=request.payment_method,
        origin=request.origin,
        destination=request.destination,
        departure_date=request.departure_date,
        departure_time=request.departure_time,
    )
    if isinstance(validated, ValidationError):
        return error_response(validated.code, validated.message)

    reservation = catalog.book_request(validated)
    if not reservation.succeeded:
        return error_response(reservation.error, reservation.message)

    payment = processor.pay(validated.payment_method, validated.amount)
    if not payment.succeeded:
        return error_response(
            payment.error, payment.message, details=[reservation.message]
        )

    return to_response(validated, reservation, payment, agency_context.currency)
