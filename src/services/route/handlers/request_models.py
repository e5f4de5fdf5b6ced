from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.route.domain.enum import RouteStatus
from services.shared.config import get_settings
from services.shared.utils import to_decimal


class RegisterRouteRequest(BaseModel):
    """路線登録リクエストモデル"""

    route_number: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    duration_minutes: int = Field(..., gt=0, description="所要時間（分）")
    base_fare: Decimal = Field(..., ge=0, description="1 名あたりの基本運賃")
    currency: str = Field(
        default_factory=lambda: get_settings().DEFAULT_CURRENCY,
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
    )

    @field_validator("base_fare", mode="before")
    @classmethod
    def convert_base_fare(cls, v):
        return to_decimal(v)


class UpdateRouteRequest(BaseModel):
    """路線更新リクエストモデル（未知の項目は拒否）"""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    duration_minutes: int | None = Field(default=None, gt=0)
    base_fare: Decimal | None = Field(default=None, ge=0)
    status: RouteStatus | None = None

    @field_validator("base_fare", mode="before")
    @classmethod
    def convert_base_fare(cls, v):
        if v is None:
            return v
        return to_decimal(v)
