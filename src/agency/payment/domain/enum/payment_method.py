from __future__ import annotations

from enum import Enum


class PaymentMethod(str, Enum):
    """決済方法"""

    CARD = "card"
    PAYPAL = "paypal"

    @classmethod
    def parse(cls, raw: PaymentMethod | str) -> PaymentMethod:
        """画面で選択された値から生成する（大文字小文字は区別しない）"""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise ValueError(f"Unknown payment method: {raw!r}")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown payment method: {raw!r}") from None
