from __future__ import annotations

import os
from dataclasses import dataclass, field

from agency.catalog.domain import RoutePriceTable
from agency.shared.domain import Currency


@dataclass(frozen=True)
class AgencyContext:
    """予約パイプラインに明示的に渡す設定値

    代理店は論理的に一つしかないため、シングルトンではなくこの値を引き回す。
    """

    currency: Currency = field(default_factory=Currency.usd)
    price_table: RoutePriceTable = field(default_factory=RoutePriceTable.default)

    @classmethod
    def default(cls) -> AgencyContext:
        return cls()

    @classmethod
    def from_env(cls) -> AgencyContext:
        """環境変数 AGENCY_CURRENCY から生成する（未設定時は USD）"""
        return cls(currency=Currency(os.getenv("AGENCY_CURRENCY", "USD")))
