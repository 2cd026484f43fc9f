from __future__ import annotations

from enum import Enum
from typing import Any, Final


class IconCategory(str, Enum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly-cloudy"
    OVERCAST = "overcast"
    FOG = "fog"
    RAIN = "rain"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"


# WMO-koodi → ikoniluokka
_CATEGORY_BY_WMO: Final[dict[int, IconCategory]] = {
    0: IconCategory.CLEAR,
    1: IconCategory.CLEAR,
    2: IconCategory.PARTLY_CLOUDY,
    3: IconCategory.OVERCAST,
    45: IconCategory.FOG,
    48: IconCategory.FOG,
    # drizzle
    51: IconCategory.RAIN,
    53: IconCategory.RAIN,
    55: IconCategory.RAIN,
    # rain
    61: IconCategory.RAIN,
    63: IconCategory.RAIN,
    65: IconCategory.RAIN,
    # rain showers
    80: IconCategory.RAIN,
    81: IconCategory.RAIN,
    82: IconCategory.RAIN,
    71: IconCategory.SNOW,
    73: IconCategory.SNOW,
    75: IconCategory.SNOW,
    # snow showers
    85: IconCategory.SNOW,
    86: IconCategory.SNOW,
    95: IconCategory.THUNDERSTORM,
    96: IconCategory.THUNDERSTORM,
    99: IconCategory.THUNDERSTORM,
}

ICON_GLYPHS: Final[dict[IconCategory, str]] = {
    IconCategory.CLEAR: "☀️",
    IconCategory.PARTLY_CLOUDY: "⛅",
    IconCategory.OVERCAST: "☁️",
    IconCategory.FOG: "🌫️",
    IconCategory.RAIN: "🌧️",
    IconCategory.SNOW: "❄️",
    IconCategory.THUNDERSTORM: "⛈️",
    IconCategory.UNKNOWN: "❓",
}


def map_code(code: Any) -> IconCategory:
    """
    WMO weather code → icon category. Anything outside the known buckets
    (None, negative, floats like 2.5, strings) is UNKNOWN.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return IconCategory.UNKNOWN
    return _CATEGORY_BY_WMO.get(code, IconCategory.UNKNOWN)


def icon_for_code(code: Any) -> str:
    return ICON_GLYPHS[map_code(code)]
