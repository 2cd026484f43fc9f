# src/weather_lookup/api/units.py
"""Unit conversions used when the user toggles units after a fetch.

Snapshot values stay in the units they were fetched in; the renderer
converts them to the current preferences on the fly.
"""

from __future__ import annotations

from weather_lookup.api.models import PrecipitationUnit, TemperatureUnit, WindUnit

KM_PER_MILE = 1.609344
MM_PER_INCH = 25.4


def convert_temperature(
    value: float | None, src: TemperatureUnit, dst: TemperatureUnit
) -> float | None:
    if value is None or src == dst:
        return value
    if dst == TemperatureUnit.FAHRENHEIT:
        return value * 9.0 / 5.0 + 32.0
    return (value - 32.0) * 5.0 / 9.0


def convert_wind(value: float | None, src: WindUnit, dst: WindUnit) -> float | None:
    if value is None or src == dst:
        return value
    if dst == WindUnit.MPH:
        return value / KM_PER_MILE
    return value * KM_PER_MILE


def convert_precipitation(
    value: float | None, src: PrecipitationUnit, dst: PrecipitationUnit
) -> float | None:
    """Convert precipitation, keeping provider-like precision (mm: 1 decimal, inch: 2)."""
    if value is None or src == dst:
        return value
    if dst == PrecipitationUnit.INCH:
        return round(value / MM_PER_INCH, 2)
    return round(value * MM_PER_INCH, 1)
