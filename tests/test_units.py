import pytest

from weather_lookup.api.models import PrecipitationUnit, TemperatureUnit, WindUnit
from weather_lookup.api.units import convert_precipitation, convert_temperature, convert_wind


def test_convert_temperature_both_ways():
    assert convert_temperature(0.0, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT) == 32.0
    assert convert_temperature(212.0, TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS) == 100.0
    assert convert_temperature(21.5, TemperatureUnit.CELSIUS, TemperatureUnit.CELSIUS) == 21.5


def test_convert_wind():
    assert convert_wind(16.09344, WindUnit.KMH, WindUnit.MPH) == pytest.approx(10.0)
    assert convert_wind(10.0, WindUnit.MPH, WindUnit.KMH) == pytest.approx(16.09344)


def test_convert_precipitation_keeps_provider_precision():
    assert convert_precipitation(25.4, PrecipitationUnit.MM, PrecipitationUnit.INCH) == 1.0
    assert convert_precipitation(0.1, PrecipitationUnit.INCH, PrecipitationUnit.MM) == 2.5


def test_none_passes_through():
    assert convert_temperature(None, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT) is None
    assert convert_wind(None, WindUnit.KMH, WindUnit.MPH) is None
    assert convert_precipitation(None, PrecipitationUnit.MM, PrecipitationUnit.INCH) is None
