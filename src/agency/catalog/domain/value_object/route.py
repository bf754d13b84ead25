from dataclasses import dataclass

from agency.shared.domain import IsoDateTime


@dataclass(frozen=True)
class Route:
    """フライト区間（出発地 + 目的地 + 出発日時）

    出発地と目的地が同一かどうかの判定は予約時に行うため、ここでは拒否しない。
    """

    origin: str
    destination: str
    departure: IsoDateTime | None = None

    def __post_init__(self) -> None:
        if not self.origin or not self.origin.strip():
            raise ValueError("Origin cannot be empty")
        if not self.destination or not self.destination.strip():
            raise ValueError("Destination cannot be empty")

    def __str__(self) -> str:
        return f"{self.origin}-{self.destination}"

    def is_distinct(self) -> bool:
        """出発地と目的地が異なるか（大文字小文字を区別する完全一致）"""
        return self.origin != self.destination
