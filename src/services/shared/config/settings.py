from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """環境変数から読み込むアプリケーション設定"""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
    )

    TABLE_NAME: str = "BusReservationTable"
    EVENT_BUS_NAME: str = "default"
    EVENT_SOURCE: str = "bus-reservation"

    # 楽観ロック競合時の最大試行回数
    MAX_COMMIT_ATTEMPTS: int = Field(default=5, ge=1)

    # キャンセル料テーブル: [出発までの時間(h), キャンセル料(%)]
    # 上から順に評価し、最初に条件を満たした段階を適用する。出発後は 100%。
    CANCELLATION_FEE_SCHEDULE: list[tuple[int, Decimal]] = [
        (720, Decimal("0")),
        (168, Decimal("30")),
        (48, Decimal("60")),
        (0, Decimal("80")),
    ]

    # 座席表の自動生成: 1列あたりの座席数
    SEATS_PER_ROW: int = Field(default=4, ge=1)

    DEFAULT_CURRENCY: str = "INR"

    @field_validator("CANCELLATION_FEE_SCHEDULE")
    @classmethod
    def validate_fee_schedule(
        cls, v: list[tuple[int, Decimal]]
    ) -> list[tuple[int, Decimal]]:
        for hours, percent in v:
            if hours < 0:
                raise ValueError("hours before departure must be >= 0")
            if not Decimal("0") <= percent <= Decimal("100"):
                raise ValueError("fee percent must be between 0 and 100")
        return sorted(v, key=lambda tier: tier[0], reverse=True)


@lru_cache
def get_settings() -> Settings:
    """設定を読み込む（プロセス内でキャッシュ）"""
    return Settings()
