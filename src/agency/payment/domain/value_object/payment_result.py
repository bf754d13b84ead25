from __future__ import annotations

from dataclasses import dataclass

from agency.shared.domain import ErrorCode


@dataclass(frozen=True)
class PaymentResult:
    """決済の結果"""

    succeeded: bool
    message: str
    error: ErrorCode | None = None

    @classmethod
    def success(cls, message: str) -> PaymentResult:
        return cls(succeeded=True, message=message)

    @classmethod
    def failure(cls, error: ErrorCode, message: str) -> PaymentResult:
        return cls(succeeded=False, message=message, error=error)
