from services.shared.domain import ResourceNotFoundException, TripId
from services.trip.domain.entity import Trip
from services.trip.domain.repository import TripRepository


class GetTripService:
    """運行（座席表）取得ユースケース"""

    def __init__(self, repository: TripRepository) -> None:
        self._repository = repository

    def get(self, trip_id: TripId) -> Trip:
        trip = self._repository.find_by_id(trip_id)
        if trip is None:
            raise ResourceNotFoundException(f"Trip not found: {trip_id}")
        return trip
