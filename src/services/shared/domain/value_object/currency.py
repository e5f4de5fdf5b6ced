from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: INR, USD, EUR, JPY
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"INR", "USD", "EUR", "JPY"})

    # 補助単位の桁数（未登録は 2 桁）
    MINOR_UNITS: ClassVar[dict[str, int]] = {"JPY": 0}

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.SUPPORTED:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def quantum(self) -> Decimal:
        """丸め単位（例: USD -> 0.01, JPY -> 1）"""
        return Decimal(1).scaleb(-self.MINOR_UNITS.get(self.code, 2))

    @classmethod
    def inr(cls) -> Currency:
        """インドルピー"""
        return cls("INR")

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")

    @classmethod
    def jpy(cls) -> Currency:
        """日本円"""
        return cls("JPY")
