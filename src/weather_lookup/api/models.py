# src/weather_lookup/api/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class WindUnit(str, Enum):
    KMH = "kmh"
    MPH = "mph"


class PrecipitationUnit(str, Enum):
    MM = "mm"
    INCH = "inch"


# Näyttöteksti yksiköille
WIND_LABELS: dict[WindUnit, str] = {WindUnit.KMH: "km/h", WindUnit.MPH: "mph"}
PRECIPITATION_LABELS: dict[PrecipitationUnit, str] = {
    PrecipitationUnit.MM: "mm",
    PrecipitationUnit.INCH: "in",
}


@dataclass
class UnitPreferences:
    """The three measurement units chosen by the user for this session."""

    temperature: TemperatureUnit = TemperatureUnit.CELSIUS
    wind: WindUnit = WindUnit.KMH
    precipitation: PrecipitationUnit = PrecipitationUnit.MM

    def copy(self) -> UnitPreferences:
        return UnitPreferences(self.temperature, self.wind, self.precipitation)


@dataclass(frozen=True)
class PlaceCandidate:
    """One geocoding hit."""

    name: str
    country: str
    latitude: float
    longitude: float
    admin_region: str | None = None

    @property
    def label(self) -> str:
        """'Paris, France' – shown in the search box and as the place title."""
        return f"{self.name}, {self.country}" if self.country else self.name

    @property
    def detail(self) -> str:
        """'Île-de-France, France' – second line of a suggestion row."""
        if self.admin_region:
            return f"{self.admin_region}, {self.country}"
        return self.country


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float | None
    apparent_temperature: float | None
    humidity_percent: float | None
    wind_speed: float | None
    precipitation_amount: float | None
    weather_code: int | None


@dataclass(frozen=True)
class HourlyPoint:
    timestamp: datetime
    temperature: float | None
    precipitation_probability: int | None
    weather_code: int | None


@dataclass(frozen=True)
class DailyPoint:
    date: date
    weather_code: int | None
    temp_max: float | None
    temp_min: float | None


@dataclass(frozen=True)
class WeatherSnapshot:
    """Complete forecast payload for one place. Replaced as a whole, never merged."""

    place_label: str
    timezone: str
    current: CurrentConditions
    hourly: list[HourlyPoint] = field(default_factory=list)
    daily: list[DailyPoint] = field(default_factory=list)
    # yksiköt, joilla arvot haettiin
    units: UnitPreferences = field(default_factory=UnitPreferences)
