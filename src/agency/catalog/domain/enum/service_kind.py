from __future__ import annotations

from enum import Enum


class ServiceKind(str, Enum):
    """予約可能なサービス種別"""

    HOTEL = "hotel"
    CAR = "car"
    FLIGHT = "flight"

    @classmethod
    def parse(cls, raw: ServiceKind | str | None) -> ServiceKind:
        """画面で選択された値から生成する（大文字小文字は区別しない）"""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise ValueError(f"Unknown service: {raw!r}")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown service: {raw!r}") from None
