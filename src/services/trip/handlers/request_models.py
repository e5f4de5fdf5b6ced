from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from services.trip.domain.enum import SeatType, TripStatus


class SeatLayoutItem(BaseModel):
    seat_number: str = Field(..., min_length=1, max_length=8)
    seat_type: SeatType = SeatType.AISLE


class ScheduleTripRequest(BaseModel):
    """運行登録リクエストモデル"""

    route_id: str = Field(..., min_length=1)
    bus_id: str = Field(..., min_length=1)
    departure: datetime = Field(..., description="出発日時（ISO 8601）")
    seat_layout: list[SeatLayoutItem] | None = Field(
        default=None, description="座席表（省略時は車両の総座席数から生成）"
    )


class UpdateTripStatusRequest(BaseModel):
    """運行ステータス更新リクエストモデル"""

    model_config = ConfigDict(extra="forbid")

    status: TripStatus
    delay_minutes: int | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def require_delay_when_delayed(self):
        if self.status == TripStatus.DELAYED and self.delay_minutes is None:
            raise ValueError("delay_minutes is required when status is delayed")
        return self
