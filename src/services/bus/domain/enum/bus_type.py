from enum import Enum


class BusType(str, Enum):
    """車両タイプ"""

    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"
    SLEEPER = "sleeper"
    AC = "ac"
    NON_AC = "non-ac"


class Amenity(str, Enum):
    """車内設備"""

    WIFI = "wifi"
    POWER_OUTLETS = "power-outlets"
    AIR_CONDITIONING = "air-conditioning"
    HEATING = "heating"
    ENTERTAINMENT_SYSTEM = "entertainment-system"
    READING_LIGHTS = "reading-lights"
    USB_CHARGING = "usb-charging"
    BATHROOM = "bathroom"
    REFRESHMENTS = "refreshments"
    LUGGAGE_SPACE = "luggage-space"
    WHEELCHAIR_ACCESSIBLE = "wheelchair-accessible"
