from enum import Enum


class SeatType(str, Enum):
    """座席タイプ"""

    WINDOW = "window"
    AISLE = "aisle"
    FRONT = "front"
    BACK = "back"
