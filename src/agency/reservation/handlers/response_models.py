from __future__ import annotations

from pydantic import BaseModel

from agency.catalog.domain import ReservationResult
from agency.payment.domain import PaymentResult
from agency.reservation.domain import ReservationRequest
from agency.shared.domain import Currency, ErrorCode


class ReservationData(BaseModel):
    """予約・決済データのレスポンスモデル"""

    service: str
    payment_method: str
    amount: str
    currency: str
    reservation_message: str
    payment_message: str
    price: str | None = None


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_response(
    request: ReservationRequest,
    reservation: ReservationResult,
    payment: PaymentResult,
    currency: Currency,
) -> dict:
    """予約・決済の結果をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=ReservationData(
            service=request.service_kind.value,
            payment_method=request.payment_method.value,
            amount=str(request.amount),
            currency=str(currency),
            reservation_message=reservation.message,
            payment_message=payment.message,
            price=str(reservation.price.amount) if reservation.price else None,
        )
    ).model_dump(exclude_none=True)


def error_response(
    error_code: ErrorCode, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code.value,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
