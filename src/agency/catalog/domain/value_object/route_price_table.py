from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import ClassVar

ORIGINS: tuple[str, ...] = ("El Salvador", "Guatemala", "Honduras", "Costa Rica")
DESTINATIONS: tuple[str, ...] = ("Colombia", "Mexico", "Panama", "El Salvador")

DEFAULT_ROUTE_PRICES: Mapping[tuple[str, str], Decimal] = MappingProxyType(
    {
        ("El Salvador", "Colombia"): Decimal("300.00"),
        ("El Salvador", "Mexico"): Decimal("250.00"),
        ("El Salvador", "Panama"): Decimal("200.00"),
        ("Guatemala", "Colombia"): Decimal("350.00"),
        ("Guatemala", "Mexico"): Decimal("180.00"),
        ("Guatemala", "Panama"): Decimal("275.00"),
        ("Honduras", "Colombia"): Decimal("320.00"),
        ("Honduras", "Mexico"): Decimal("260.00"),
        ("Honduras", "Panama"): Decimal("210.00"),
    }
)


@dataclass(frozen=True)
class RoutePriceTable:
    """区間ごとの固定運賃表

    対称性・網羅性は要求しない。表にない区間は FALLBACK_PRICE を返す。
    """

    FALLBACK_PRICE: ClassVar[Decimal] = Decimal("999.99")

    prices: Mapping[tuple[str, str], Decimal]

    def __post_init__(self) -> None:
        for (origin, destination), price in self.prices.items():
            if price <= 0:
                raise ValueError(
                    f"Price for {origin}-{destination} must be positive: {price}"
                )
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def __contains__(self, key: object) -> bool:
        return key in self.prices

    def __len__(self) -> int:
        return len(self.prices)

    def lookup(self, origin: str, destination: str) -> Decimal:
        """区間の運賃を返す"""
        return self.prices.get((origin, destination), self.FALLBACK_PRICE)

    @classmethod
    def default(cls) -> RoutePriceTable:
        return cls(prices=DEFAULT_ROUTE_PRICES)
