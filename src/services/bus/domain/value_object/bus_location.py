from dataclasses import dataclass

from services.shared.domain import IsoDateTime


@dataclass(frozen=True)
class BusLocation:
    """車両の現在位置"""

    latitude: float
    longitude: float
    address: str | None = None
    last_updated: IsoDateTime | None = None

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude out of range: {self.longitude}")

    def to_dict(self) -> dict:
        return {
            "lat": self.latitude,
            "lon": self.longitude,
            "address": self.address,
        }
