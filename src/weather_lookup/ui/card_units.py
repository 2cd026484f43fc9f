# src/weather_lookup/ui/card_units.py
from __future__ import annotations

import streamlit as st

from weather_lookup.api.models import PrecipitationUnit, TemperatureUnit, WindUnit
from weather_lookup.ui.common import get_pipeline

TEMPERATURE_OPTIONS: dict[str, TemperatureUnit] = {
    "Celsius (°C)": TemperatureUnit.CELSIUS,
    "Fahrenheit (°F)": TemperatureUnit.FAHRENHEIT,
}
WIND_OPTIONS: dict[str, WindUnit] = {"km/h": WindUnit.KMH, "mph": WindUnit.MPH}
PRECIPITATION_OPTIONS: dict[str, PrecipitationUnit] = {
    "Millimeters (mm)": PrecipitationUnit.MM,
    "Inches (in)": PrecipitationUnit.INCH,
}


def _on_units_change() -> None:
    get_pipeline().set_units(
        temperature=TEMPERATURE_OPTIONS[st.session_state["unit_temperature"]],
        wind=WIND_OPTIONS[st.session_state["unit_wind"]],
        precipitation=PRECIPITATION_OPTIONS[st.session_state["unit_precipitation"]],
    )


def _index_of(options: dict, value) -> int:
    return list(options.values()).index(value)


def card_units() -> None:
    """Units menu. Changing a unit only re-renders the current result."""
    prefs = get_pipeline().preferences
    with st.popover("⚙️ Units"):
        st.radio(
            "Temperature",
            list(TEMPERATURE_OPTIONS),
            index=_index_of(TEMPERATURE_OPTIONS, prefs.temperature),
            key="unit_temperature",
            on_change=_on_units_change,
        )
        st.radio(
            "Wind Speed",
            list(WIND_OPTIONS),
            index=_index_of(WIND_OPTIONS, prefs.wind),
            key="unit_wind",
            on_change=_on_units_change,
        )
        st.radio(
            "Precipitation",
            list(PRECIPITATION_OPTIONS),
            index=_index_of(PRECIPITATION_OPTIONS, prefs.precipitation),
            key="unit_precipitation",
            on_change=_on_units_change,
        )
