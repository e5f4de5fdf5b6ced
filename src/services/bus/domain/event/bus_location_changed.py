from dataclasses import dataclass
from typing import ClassVar

from services.bus.domain.value_object import BusLocation
from services.shared.domain import BusId, DomainEvent


@dataclass(frozen=True)
class BusLocationChanged(DomainEvent):
    """車両の位置が更新された"""

    name: ClassVar[str] = "bus-location-changed"

    bus_id: BusId
    location: BusLocation

    def to_payload(self) -> dict:
        return {"busId": str(self.bus_id), "location": self.location.to_dict()}
