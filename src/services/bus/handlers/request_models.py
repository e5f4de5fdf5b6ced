from pydantic import BaseModel, ConfigDict, Field

from services.bus.domain.enum import Amenity, BusStatus, BusType
from services.bus.domain.value_object.bus_capacity import MAX_TOTAL_SEATS


class RegisterBusRequest(BaseModel):
    """車両登録リクエストモデル"""

    bus_number: str = Field(..., min_length=1)
    bus_name: str = Field(..., min_length=1)
    bus_type: BusType = BusType.STANDARD
    total_seats: int = Field(..., ge=1, le=MAX_TOTAL_SEATS)
    amenities: list[Amenity] = Field(default_factory=list)
    driver_id: str = Field(..., min_length=1)


class UpdateBusRequest(BaseModel):
    """車両更新リクエストモデル（未知の項目は拒否）"""

    model_config = ConfigDict(extra="forbid")

    bus_name: str | None = Field(default=None, min_length=1)
    bus_type: BusType | None = None
    total_seats: int | None = Field(default=None, ge=1, le=MAX_TOTAL_SEATS)
    amenities: list[Amenity] | None = None
    driver_id: str | None = Field(default=None, min_length=1)
    status: BusStatus | None = None


class UpdateBusLocationRequest(BaseModel):
    """車両位置更新リクエストモデル"""

    model_config = ConfigDict(extra="forbid")

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str | None = None
