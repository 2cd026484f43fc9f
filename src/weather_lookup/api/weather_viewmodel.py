# src/weather_lookup/api/weather_viewmodel.py
"""
Snapshot → ready-to-show rows.

Everything here is pure: no Streamlit, no HTTP. The UI layer only pastes
the strings into HTML, so these functions carry all formatting rules
(rounding, unit labels, day names, the 12-hour window).
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone as dt_timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from weather_lookup.api.models import (
    PRECIPITATION_LABELS,
    WIND_LABELS,
    DailyPoint,
    HourlyPoint,
    PlaceCandidate,
    UnitPreferences,
    WeatherSnapshot,
)
from weather_lookup.api.ui_state import UIState
from weather_lookup.api.units import convert_precipitation, convert_temperature, convert_wind
from weather_lookup.api.wmo_icon_map import IconCategory, icon_for_code, map_code
from weather_lookup.config import DAILY_ROWS, HOURLY_ROWS
from weather_lookup.utils import round_half_up

logger = logging.getLogger("weatherlookup")

MISSING = "—"
DAY_NAMES: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
LONG_DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass
class CurrentView:
    place_label: str
    date_label: str  # "Monday, Oct 19, 2026"
    temperature: str  # "12°"
    feels_like: str
    humidity: str  # "80%"
    wind: str  # "14 km/h"
    precipitation: str  # "0.2 mm"
    icon: str
    category: IconCategory


@dataclass
class HourlyRow:
    time_label: str  # "02:00 PM"
    icon: str
    temperature: str
    precipitation_probability: str


@dataclass
class DailyRow:
    day_label: str  # "Mon"
    icon: str
    high: str
    low: str


@dataclass
class WeatherView:
    """Everything the page needs for one rerun."""

    state: UIState
    current: CurrentView | None = None
    hourly: list[HourlyRow] = field(default_factory=list)
    daily: list[DailyRow] = field(default_factory=list)
    suggestions: list[PlaceCandidate] = field(default_factory=list)


# --- formatting helpers ------------------------------------------------------
def _fmt_degrees(value: float | None) -> str:
    return MISSING if value is None else f"{round_half_up(value)}°"


def _fmt_plain(value: float | None) -> str:
    """Provider precision: 80.0 → '80', 0.25 → '0.25'."""
    if value is None:
        return MISSING
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def _zone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to UTC", name)
        return dt_timezone.utc


def local_now(timezone: str, now: datetime | None = None) -> datetime:
    """Wall-clock time at the place, as a naive datetime (same basis as the series)."""
    tz = _zone(timezone)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)
    return now.replace(tzinfo=None)


def format_long_date(moment: datetime) -> str:
    return (
        f"{LONG_DAY_NAMES[moment.weekday()]}, "
        f"{MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}"
    )


def format_hour(moment: datetime) -> str:
    return moment.strftime("%I:%M %p")


# --- renderers ----------------------------------------------------------------
def render_current(
    snapshot: WeatherSnapshot,
    preferences: UnitPreferences,
    now: datetime | None = None,
) -> CurrentView:
    """Current-conditions panel in the user's current units."""
    src = snapshot.units
    cur = snapshot.current

    temp = convert_temperature(cur.temperature, src.temperature, preferences.temperature)
    feels = convert_temperature(cur.apparent_temperature, src.temperature, preferences.temperature)
    wind = convert_wind(cur.wind_speed, src.wind, preferences.wind)
    precip = convert_precipitation(cur.precipitation_amount, src.precipitation, preferences.precipitation)

    wind_str = MISSING if wind is None else f"{round_half_up(wind)} {WIND_LABELS[preferences.wind]}"
    precip_str = (
        MISSING
        if precip is None
        else f"{_fmt_plain(precip)} {PRECIPITATION_LABELS[preferences.precipitation]}"
    )
    humidity = cur.humidity_percent

    return CurrentView(
        place_label=snapshot.place_label,
        date_label=format_long_date(local_now(snapshot.timezone, now)),
        temperature=_fmt_degrees(temp),
        feels_like=_fmt_degrees(feels),
        humidity=MISSING if humidity is None else f"{_fmt_plain(humidity)}%",
        wind=wind_str,
        precipitation=precip_str,
        icon=icon_for_code(cur.weather_code),
        category=map_code(cur.weather_code),
    )


def _start_index(hourly: Sequence[HourlyPoint], hour: datetime) -> int:
    """Index of the current hour, or of the first later hour if it is missing."""
    time_index = {p.timestamp: i for i, p in enumerate(hourly)}
    idx = time_index.get(hour)
    if idx is not None:
        return idx
    # aikasarja on nousevassa järjestyksessä
    return bisect.bisect_left([p.timestamp for p in hourly], hour)


def render_hourly(
    hourly: Sequence[HourlyPoint],
    timezone: str,
    now: datetime | None = None,
    preferences: UnitPreferences | None = None,
    units: UnitPreferences | None = None,
) -> list[HourlyRow]:
    """
    Up to HOURLY_ROWS rows from the current local hour onwards. Clipped at
    the end of the series, never wrapped around.
    """
    if not hourly:
        return []

    hour = local_now(timezone, now).replace(minute=0, second=0, microsecond=0)
    start = _start_index(hourly, hour)

    rows: list[HourlyRow] = []
    for point in hourly[start : start + HOURLY_ROWS]:
        temp = point.temperature
        if preferences is not None and units is not None:
            temp = convert_temperature(temp, units.temperature, preferences.temperature)
        pop = point.precipitation_probability
        rows.append(
            HourlyRow(
                time_label=format_hour(point.timestamp),
                icon=icon_for_code(point.weather_code),
                temperature=_fmt_degrees(temp),
                precipitation_probability=MISSING if pop is None else f"{pop}%",
            )
        )
    return rows


def render_daily(
    daily: Sequence[DailyPoint],
    preferences: UnitPreferences | None = None,
    units: UnitPreferences | None = None,
) -> list[DailyRow]:
    """DAILY_ROWS day rows; a shorter series yields fewer rows."""
    rows: list[DailyRow] = []
    for day in daily[:DAILY_ROWS]:
        high, low = day.temp_max, day.temp_min
        if preferences is not None and units is not None:
            high = convert_temperature(high, units.temperature, preferences.temperature)
            low = convert_temperature(low, units.temperature, preferences.temperature)
        rows.append(
            DailyRow(
                day_label=DAY_NAMES[day.date.weekday()],
                icon=icon_for_code(day.weather_code),
                high=_fmt_degrees(high),
                low=_fmt_degrees(low),
            )
        )
    return rows


def build_weather_view(
    state: UIState,
    snapshot: WeatherSnapshot | None,
    preferences: UnitPreferences,
    suggestions: Sequence[PlaceCandidate] = (),
    now: datetime | None = None,
) -> WeatherView:
    """Combine state and snapshot into one view; rows only in the WEATHER state."""
    view = WeatherView(state=state, suggestions=list(suggestions))
    if state != UIState.WEATHER or snapshot is None:
        return view

    view.current = render_current(snapshot, preferences, now=now)
    view.hourly = render_hourly(
        snapshot.hourly, snapshot.timezone, now=now, preferences=preferences, units=snapshot.units
    )
    view.daily = render_daily(snapshot.daily, preferences=preferences, units=snapshot.units)
    return view
