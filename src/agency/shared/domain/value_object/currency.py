from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: USD, EUR
    """

    SYMBOLS: ClassVar[dict[str, str]] = {"USD": "$", "EUR": "€"}
    CENT: ClassVar[Decimal] = Decimal("0.01")

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.strip().upper()
        if normalized not in self.SYMBOLS:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SYMBOLS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def symbol(self) -> str:
        return self.SYMBOLS[self.code]

    def format(self, amount: Decimal) -> str:
        """小数点以下2桁の表示用文字列にする（例: $100.00）"""
        with localcontext() as ctx:
            # 整数部の桁数 + 小数2桁が収まる精度にする
            ctx.prec = max(ctx.prec, amount.adjusted() + 3)
            quantized = amount.quantize(self.CENT, rounding=ROUND_HALF_UP)
        return f"{self.symbol}{quantized}"

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")

    @classmethod
    def eur(cls) -> Currency:
        """ユーロ"""
        return cls("EUR")
