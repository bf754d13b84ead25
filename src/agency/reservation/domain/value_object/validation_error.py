from dataclasses import dataclass

from agency.shared.domain import ErrorCode


@dataclass(frozen=True)
class ValidationError:
    """入力検証エラー（利用者が修正して再入力できるもの）"""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
