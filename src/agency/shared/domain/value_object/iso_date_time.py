from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)"""

    DISPLAY_FORMAT: ClassVar[str] = "%Y-%m-%d %H:%M"

    value: datetime

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    def __str__(self) -> str:
        return self.value.isoformat()

    def display(self) -> str:
        """画面表示用の日時（例: 2025-03-01 14:30）"""
        return self.value.strftime(self.DISPLAY_FORMAT)
