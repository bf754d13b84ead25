from agency.catalog.domain import ReservationResult, Route, ServiceKind
from agency.context import AgencyContext
from agency.reservation.domain import ReservationRequest
from agency.shared.domain import ErrorCode, Money
from agency.shared.utils.logger import get_logger

logger = get_logger()


class ServiceCatalog:
    """サービス予約ユースケース

    ホテル・レンタカーは固定メッセージ、フライトは運賃表から価格を引いて
    確認メッセージを組み立てる。副作用はログ出力のみ。
    """

    CONFIRMATIONS: dict[ServiceKind, str] = {
        ServiceKind.HOTEL: "Hotel booked successfully.",
        ServiceKind.CAR: "Car rented successfully.",
    }

    def __init__(self, context: AgencyContext) -> None:
        self._context = context

    def book(self, kind: ServiceKind, route: Route | None = None) -> ReservationResult:
        """サービスを予約する"""
        if kind == ServiceKind.FLIGHT:
            return self._book_flight(route)

        logger.info("Service booked", extra={"service_kind": kind.value})
        return ReservationResult.success(self.CONFIRMATIONS[kind])

    def book_request(self, request: ReservationRequest) -> ReservationResult:
        """検証済みの ReservationRequest から予約する"""
        return self.book(request.service_kind, request.route)

    def _book_flight(self, route: Route | None) -> ReservationResult:
        if route is None:
            return ReservationResult.failure(
                ErrorCode.INVALID_ROUTE, "A route is required to book a flight"
            )
        if not route.is_distinct():
            return ReservationResult.failure(
                ErrorCode.INVALID_ROUTE, "Origin and destination must be different"
            )

        price = self._price_for(route)
        logger.info("Flight booked", extra={"route": str(route), "price": str(price)})
        return ReservationResult.success(_flight_summary(route, price), price=price)

    def _price_for(self, route: Route) -> Money:
        table = self._context.price_table
        if (route.origin, route.destination) not in table:
            logger.warning(
                "Route is not priced, using fallback", extra={"route": str(route)}
            )
        return Money(
            amount=table.lookup(route.origin, route.destination),
            currency=self._context.currency,
        )


def _flight_summary(route: Route, price: Money) -> str:
    schedule = f" on {route.departure.display()}" if route.departure else ""
    return (
        f"Flight booked from {route.origin} to {route.destination}"
        f"{schedule} for {price}."
    )
