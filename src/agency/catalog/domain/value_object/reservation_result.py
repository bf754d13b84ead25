from __future__ import annotations

from dataclasses import dataclass

from agency.shared.domain import ErrorCode, Money


@dataclass(frozen=True)
class ReservationResult:
    """サービス予約の結果"""

    succeeded: bool
    message: str
    error: ErrorCode | None = None
    price: Money | None = None

    @classmethod
    def success(cls, message: str, price: Money | None = None) -> ReservationResult:
        return cls(succeeded=True, message=message, price=price)

    @classmethod
    def failure(cls, error: ErrorCode, message: str) -> ReservationResult:
        return cls(succeeded=False, message=message, error=error)
