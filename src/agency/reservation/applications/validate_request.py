import re
from decimal import Decimal
from typing import ClassVar

from agency.catalog.domain import Route, ServiceKind
from agency.payment.domain import PaymentMethod
from agency.reservation.domain import ReservationRequest, ValidationError
from agency.shared.domain import DomainException, ErrorCode, IsoDateTime
from agency.shared.utils.logger import get_logger

logger = get_logger()


class InvalidInputException(DomainException):
    """検証中の入力エラー（validate の外には出さない）"""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.error = ValidationError(code=code, message=message)


class ReservationRequestValidator:
    """画面から受け取った未加工の入力を検証し、ReservationRequest を組み立てる

    検証は金額 → サービス → 決済方法 → 区間 → 出発日時の順に行い、
    最初に見つかったエラーを返す。金額は丸めずにそのまま保持する。
    """

    # 符号 + 数字 + 任意の小数部のみ（指数表記・区切り文字・NaN/Infinity は不可）
    AMOUNT_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[+-]?(\d+(\.\d*)?|\.\d+)$"
    )
    DATE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}-\d{2}$")
    TIME_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\d{2}:\d{2}$")

    def validate(
        self,
        amount_text: str | None,
        service: ServiceKind | str | None,
        payment_method: PaymentMethod | str | None = None,
        origin: str | None = None,
        destination: str | None = None,
        departure_date: str | None = None,
        departure_time: str | None = None,
    ) -> ReservationRequest | ValidationError:
        """入力を検証する

        Returns:
            ReservationRequest: 検証に成功した場合
            ValidationError: 検証に失敗した場合
        """
        try:
            amount = self._parse_amount(amount_text)
            kind = self._parse_service(service)
            method = self._parse_payment_method(payment_method)
            route = None
            if kind == ServiceKind.FLIGHT:
                route = self._parse_route(
                    origin, destination, departure_date, departure_time
                )
        except InvalidInputException as e:
            logger.info(
                "Reservation request rejected",
                extra={"error_code": e.error.code.value, "reason": e.error.message},
            )
            return e.error

        return ReservationRequest(
            service_kind=kind,
            amount=amount,
            payment_method=method,
            route=route,
        )

    def _parse_amount(self, amount_text: str | None) -> Decimal:
        text = (amount_text or "").strip()
        if not text:
            raise InvalidInputException(ErrorCode.EMPTY_AMOUNT, "Amount is required")

        if not self.AMOUNT_PATTERN.match(text):
            raise InvalidInputException(
                ErrorCode.NOT_A_NUMBER, f"Amount is not a number: {text}"
            )

        amount = Decimal(text)
        if amount <= 0:
            raise InvalidInputException(
                ErrorCode.NON_POSITIVE_AMOUNT, "Amount must be greater than zero"
            )
        return amount

    def _parse_service(self, service: ServiceKind | str | None) -> ServiceKind:
        try:
            return ServiceKind.parse(service)
        except ValueError as e:
            raise InvalidInputException(ErrorCode.UNKNOWN_SERVICE, str(e)) from e

    def _parse_payment_method(
        self, payment_method: PaymentMethod | str | None
    ) -> PaymentMethod | None:
        # 未選択は決済時に NO_PAYMENT_METHOD_SELECTED として扱う
        if payment_method is None:
            return None
        try:
            return PaymentMethod.parse(payment_method)
        except ValueError as e:
            raise InvalidInputException(ErrorCode.UNKNOWN_PAYMENT_METHOD, str(e)) from e

    def _parse_route(
        self,
        origin: str | None,
        destination: str | None,
        departure_date: str | None,
        departure_time: str | None,
    ) -> Route:
        origin = (origin or "").strip()
        destination = (destination or "").strip()
        if not origin or not destination:
            raise InvalidInputException(
                ErrorCode.INVALID_ROUTE,
                "Origin and destination are required for a flight",
            )

        route = Route(
            origin=origin,
            destination=destination,
            departure=self._parse_departure(departure_date, departure_time),
        )
        if not route.is_distinct():
            raise InvalidInputException(
                ErrorCode.INVALID_ROUTE, "Origin and destination must be different"
            )
        return route

    def _parse_departure(
        self, departure_date: str | None, departure_time: str | None
    ) -> IsoDateTime | None:
        date_text = (departure_date or "").strip()
        time_text = (departure_time or "").strip()
        if not date_text and not time_text:
            return None
        if not date_text:
            raise InvalidInputException(
                ErrorCode.INVALID_DEPARTURE, "Departure time given without a date"
            )
        if not self.DATE_PATTERN.match(date_text) or (
            time_text and not self.TIME_PATTERN.match(time_text)
        ):
            raise InvalidInputException(
                ErrorCode.INVALID_DEPARTURE,
                "Departure must be a YYYY-MM-DD date and an optional HH:MM time",
            )

        try:
            return IsoDateTime.from_string(f"{date_text}T{time_text or '00:00'}")
        except ValueError as e:
            raise InvalidInputException(ErrorCode.INVALID_DEPARTURE, str(e)) from e
