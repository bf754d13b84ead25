from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class ReserveRequest(BaseModel):
    """予約リクエストモデル

    画面の入力値をそのまま受け取る。内容の検証は ReservationRequestValidator が行う。
    """

    amount: str = Field(
        ...,
        description="金額（入力された文字列）",
        examples=["150.00"],
    )
    service: str = Field(
        ...,
        description="サービス種別",
        examples=["hotel", "car", "flight"],
    )
    payment_method: str | None = Field(
        default=None,
        description="決済方法",
        examples=["card", "paypal"],
    )
    origin: str | None = Field(default=None, description="出発地（フライトのみ）")
    destination: str | None = Field(default=None, description="目的地（フライトのみ）")
    departure_date: str | None = Field(
        default=None,
        description="出発日（YYYY-MM-DD形式）",
        examples=["2025-03-01"],
    )
    departure_time: str | None = Field(
        default=None,
        description="出発時刻（HH:MM形式）",
        examples=["14:30"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "amount": "300.00",
                    "service": "flight",
                    "payment_method": "card",
                    "origin": "El Salvador",
                    "destination": "Colombia",
                    "departure_date": "2025-03-01",
                    "departure_time": "14:30",
                }
            ]
        }
    }

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_str(cls, v: object) -> object:
        """数値で渡された金額も文字列として検証に回す"""
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return str(v)
        return v
