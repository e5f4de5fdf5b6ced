from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.booking.domain.value_object import Passenger, StopPoint
from services.trip.domain.enum import SeatType


class PassengerItem(BaseModel):
    seat_number: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    seat_type: SeatType | None = None

    def to_domain(self) -> Passenger:
        return Passenger(
            seat_number=self.seat_number,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
            seat_type=self.seat_type,
        )


class PassengerUpdateItem(BaseModel):
    """予約更新時の乗客（座席番号で対応付け、座席種別は変更できない）"""

    model_config = ConfigDict(extra="forbid")

    seat_number: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)

    def to_domain(self) -> Passenger:
        return Passenger(
            seat_number=self.seat_number,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
        )


class StopPointItem(BaseModel):
    city: str = Field(..., min_length=1)
    address: str | None = None

    def to_domain(self) -> StopPoint:
        return StopPoint(city=self.city, address=self.address)


def _unique_seats(passengers: list | None):
    if passengers is None:
        return passengers
    seat_numbers = [p.seat_number for p in passengers]
    if len(set(seat_numbers)) != len(seat_numbers):
        raise ValueError("Each passenger must have a distinct seat")
    return passengers


class CreateBookingRequest(BaseModel):
    """予約作成リクエストモデル"""

    route_id: str = Field(..., min_length=1)
    bus_id: str = Field(..., min_length=1)
    trip_id: str = Field(..., min_length=1)
    passengers: list[PassengerItem] = Field(..., min_length=1)
    pickup_point: StopPointItem
    drop_point: StopPointItem
    special_requests: str | None = Field(default=None, max_length=500)

    @field_validator("passengers")
    @classmethod
    def validate_unique_seats(cls, v):
        return _unique_seats(v)


class UpdateBookingRequest(BaseModel):
    """予約更新リクエストモデル（変更可能な項目以外は拒否）"""

    model_config = ConfigDict(extra="forbid")

    passengers: list[PassengerUpdateItem] | None = Field(default=None, min_length=1)
    pickup_point: StopPointItem | None = None
    drop_point: StopPointItem | None = None
    special_requests: str | None = Field(default=None, max_length=500)

    @field_validator("passengers")
    @classmethod
    def validate_unique_seats(cls, v):
        return _unique_seats(v)


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストモデル"""

    reason: str = Field(..., min_length=1, max_length=500)
