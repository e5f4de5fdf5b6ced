from enum import Enum


class BusStatus(str, Enum):
    """車両ステータス"""

    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    OUT_OF_SERVICE = "out-of-service"
    RETIRED = "retired"
