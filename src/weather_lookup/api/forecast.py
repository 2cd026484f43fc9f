# src/weather_lookup/api/forecast.py
from __future__ import annotations

import logging
from typing import Any

import requests

from weather_lookup.api.errors import FetchFailed
from weather_lookup.api.http import http_get_json
from weather_lookup.api.models import (
    CurrentConditions,
    DailyPoint,
    HourlyPoint,
    UnitPreferences,
    WeatherSnapshot,
)
from weather_lookup.api.weather_utils import as_float, as_int, column, parse_date, parse_timestamp
from weather_lookup.config import CURRENT_FIELDS, DAILY_FIELDS, FORECAST_URL, HOURLY_FIELDS

logger = logging.getLogger("weatherlookup")


def build_forecast_params(lat: float, lon: float, preferences: UnitPreferences) -> dict[str, Any]:
    """Query parameters for one current + hourly + daily request."""
    return {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(CURRENT_FIELDS),
        "hourly": ",".join(HOURLY_FIELDS),
        "daily": ",".join(DAILY_FIELDS),
        "timezone": "auto",
        "temperature_unit": preferences.temperature.value,
        "wind_speed_unit": preferences.wind.value,
        "precipitation_unit": preferences.precipitation.value,
    }


# --- parsing -------------------------------------------------------------------
def _block(data: dict[str, Any], key: str) -> dict[str, Any]:
    block = data.get(key)
    if not isinstance(block, dict):
        raise FetchFailed(f"forecast response has no '{key}' object")
    return block


def _time_axis(block: dict[str, Any], key: str) -> list[Any]:
    times = block.get("time")
    if not isinstance(times, list):
        raise FetchFailed(f"forecast '{key}' block has no time array")
    return times


def _parse_current(data: dict[str, Any]) -> CurrentConditions:
    current = _block(data, "current")
    return CurrentConditions(
        temperature=as_float(current.get("temperature_2m")),
        apparent_temperature=as_float(current.get("apparent_temperature")),
        humidity_percent=as_float(current.get("relative_humidity_2m")),
        wind_speed=as_float(current.get("wind_speed_10m")),
        precipitation_amount=as_float(current.get("precipitation")),
        weather_code=as_int(current.get("weather_code")),
    )


def _parse_hourly(data: dict[str, Any]) -> list[HourlyPoint]:
    hourly = _block(data, "hourly")
    times = _time_axis(hourly, "hourly")
    n = len(times)

    temps = column(hourly, "temperature_2m", n)
    pops = column(hourly, "precipitation_probability", n)
    codes = column(hourly, "weather_code", n)

    points: list[HourlyPoint] = []
    for i, raw_time in enumerate(times):
        ts = parse_timestamp(raw_time)
        if ts is None:
            # rikkinäinen aikaleima -> ohitetaan
            continue
        points.append(
            HourlyPoint(
                timestamp=ts,
                temperature=as_float(temps[i]),
                precipitation_probability=as_int(pops[i]),
                weather_code=as_int(codes[i]),
            )
        )
    return points


def _parse_daily(data: dict[str, Any]) -> list[DailyPoint]:
    daily = _block(data, "daily")
    times = _time_axis(daily, "daily")
    n = len(times)

    codes = column(daily, "weather_code", n)
    highs = column(daily, "temperature_2m_max", n)
    lows = column(daily, "temperature_2m_min", n)

    days: list[DailyPoint] = []
    for i, raw_date in enumerate(times):
        day = parse_date(raw_date)
        if day is None:
            continue
        days.append(
            DailyPoint(
                date=day,
                weather_code=as_int(codes[i]),
                temp_max=as_float(highs[i]),
                temp_min=as_float(lows[i]),
            )
        )
    return days


def parse_forecast(
    data: dict[str, Any], place_label: str, preferences: UnitPreferences
) -> WeatherSnapshot:
    """Open-Meteo response → WeatherSnapshot. Structural problems raise FetchFailed."""
    timezone = data.get("timezone")
    if not isinstance(timezone, str) or not timezone:
        raise FetchFailed("forecast response has no timezone")

    try:
        return WeatherSnapshot(
            place_label=place_label,
            timezone=timezone,
            current=_parse_current(data),
            hourly=_parse_hourly(data),
            daily=_parse_daily(data),
            units=preferences.copy(),
        )
    except (TypeError, ValueError, OverflowError, AttributeError) as e:
        raise FetchFailed(f"forecast response could not be parsed: {e}") from e


def fetch(
    lat: float, lon: float, preferences: UnitPreferences, place_label: str = ""
) -> WeatherSnapshot:
    """Fetch current, hourly and daily weather in the user's units."""
    params = build_forecast_params(lat, lon, preferences)
    try:
        data = http_get_json(FORECAST_URL, params=params)
    except (requests.RequestException, ValueError) as e:
        raise FetchFailed(f"forecast request failed for ({lat}, {lon}): {e}") from e

    snapshot = parse_forecast(data, place_label, preferences)
    logger.info(
        "Forecast %s: %d hourly, %d daily rows (%s)",
        place_label or f"({lat}, {lon})",
        len(snapshot.hourly),
        len(snapshot.daily),
        snapshot.timezone,
    )
    return snapshot
