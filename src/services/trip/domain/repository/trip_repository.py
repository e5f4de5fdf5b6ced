from services.shared.domain import Repository, TripId
from services.trip.domain.entity import Trip


class TripRepository(Repository[Trip, TripId]):
    """運行リポジトリのインターフェース"""
