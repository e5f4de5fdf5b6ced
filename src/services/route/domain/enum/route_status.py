from enum import Enum


class RouteStatus(str, Enum):
    """路線ステータス"""

    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"
    DISCONTINUED = "discontinued"
