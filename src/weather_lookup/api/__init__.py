# src/weather_lookup/api/__init__.py
from .errors import FetchFailed as FetchFailed, LookupFailed as LookupFailed, NoMatch as NoMatch
from .models import (
    PlaceCandidate as PlaceCandidate,
    UnitPreferences as UnitPreferences,
    WeatherSnapshot as WeatherSnapshot,
)
from .pipeline import WeatherPipeline as WeatherPipeline
from .ui_state import UIState as UIState
from .wmo_icon_map import IconCategory as IconCategory, map_code as map_code
