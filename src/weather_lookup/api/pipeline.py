# src/weather_lookup/api/pipeline.py
"""
Search orchestration: geocoding → forecast → UI state.

``WeatherPipeline`` owns all mutable state of the widget (``AppState``) so
nothing lives in module globals. Streamlit keeps one pipeline per browser
session in ``st.session_state``.

Each search takes a new sequence number. A geocoding or forecast result is
applied only while its number is still the latest one; a late answer to an
older search is logged and dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from weather_lookup.api import forecast, geocoding
from weather_lookup.api.debounce import Debouncer
from weather_lookup.api.errors import FetchFailed, LookupFailed, NoMatch, WeatherLookupError
from weather_lookup.api.models import (
    PlaceCandidate,
    PrecipitationUnit,
    TemperatureUnit,
    UnitPreferences,
    WeatherSnapshot,
    WindUnit,
)
from weather_lookup.api.ui_state import UIState, UIStateMachine
from weather_lookup.api.weather_viewmodel import WeatherView, build_weather_view
from weather_lookup.config import DEBOUNCE_S, MIN_QUERY_LEN

logger = logging.getLogger("weatherlookup")

SuggestFn = Callable[[str], list[PlaceCandidate]]
ResolveFn = Callable[[str], PlaceCandidate]
FetchFn = Callable[[float, float, UnitPreferences, str], WeatherSnapshot]


@dataclass(frozen=True)
class SearchRequest:
    """Either a free-text query or an already resolved place (suggestion pick)."""

    query: str | None = None
    place: PlaceCandidate | None = None

    def describe(self) -> str:
        return self.place.label if self.place is not None else repr(self.query)


@dataclass
class AppState:
    preferences: UnitPreferences = field(default_factory=UnitPreferences)
    snapshot: WeatherSnapshot | None = None
    last_request: SearchRequest | None = None
    request_seq: int = 0
    suggestion_seq: int = 0
    suggestions: list[PlaceCandidate] = field(default_factory=list)


class WeatherPipeline:
    def __init__(
        self,
        state: AppState | None = None,
        suggest: SuggestFn | None = None,
        resolve_best: ResolveFn | None = None,
        fetch_forecast: FetchFn | None = None,
        debounce_s: float = DEBOUNCE_S,
    ) -> None:
        self.app = state or AppState()
        self.ui = UIStateMachine()
        self.debouncer: Debouncer[str] = Debouncer(debounce_s)
        self._suggest = suggest or geocoding.suggest
        self._resolve_best = resolve_best or geocoding.resolve_best
        self._fetch = fetch_forecast or forecast.fetch

    @property
    def state(self) -> UIState:
        return self.ui.state

    @property
    def snapshot(self) -> WeatherSnapshot | None:
        return self.app.snapshot

    @property
    def preferences(self) -> UnitPreferences:
        return self.app.preferences

    # --- searches ---

    def submit_query(self, text: str) -> UIState:
        """Free-text search (search button / Enter). Blank input is ignored."""
        query = text.strip()
        if not query:
            return self.state
        return self._run(SearchRequest(query=query))

    def select_suggestion(self, place: PlaceCandidate) -> UIState:
        """Suggestion pick: coordinates are known, so geocoding is skipped."""
        return self._run(SearchRequest(place=place))

    def retry(self) -> UIState:
        """Re-issue the last search exactly as it was made."""
        if self.app.last_request is None:
            return self.state
        return self._run(self.app.last_request)

    def _is_latest(self, seq: int) -> bool:
        return seq == self.app.request_seq

    def _drop_stale(self, seq: int, what: str) -> None:
        logger.info("Dropping stale %s for search #%d (latest #%d)", what, seq, self.app.request_seq)

    def _fail(self, seq: int, no_results: bool = False) -> UIState:
        if not self._is_latest(seq):
            self._drop_stale(seq, "failure")
            return self.state
        self.app.snapshot = None
        if no_results:
            self.ui.show_no_results()
        else:
            self.ui.show_error()
        return self.state

    def _run(self, request: SearchRequest) -> UIState:
        self.app.request_seq += 1
        seq = self.app.request_seq
        self.app.last_request = request
        self.app.suggestions = []
        self.debouncer.cancel()
        self.ui.start_loading()
        logger.info("Search #%d: %s", seq, request.describe())

        place = request.place
        if place is None:
            try:
                place = self._resolve_best(request.query or "")
            except NoMatch:
                logger.info("Search #%d: no results", seq)
                return self._fail(seq, no_results=True)
            except LookupFailed as e:
                logger.warning("Search #%d: geocoding failed: %s", seq, e)
                return self._fail(seq)
            if not self._is_latest(seq):
                self._drop_stale(seq, "geocoding result")
                return self.state

        try:
            snapshot = self._fetch(
                place.latitude, place.longitude, self.app.preferences.copy(), place.label
            )
        except FetchFailed as e:
            logger.warning("Search #%d: forecast failed: %s", seq, e)
            return self._fail(seq)

        if not self._is_latest(seq):
            self._drop_stale(seq, "forecast")
            return self.state

        self.app.snapshot = snapshot
        self.ui.show_weather()
        return self.state

    # --- units ---

    def set_units(
        self,
        temperature: TemperatureUnit | None = None,
        wind: WindUnit | None = None,
        precipitation: PrecipitationUnit | None = None,
    ) -> UnitPreferences:
        """Change units. The current snapshot is re-rendered, never re-fetched."""
        prefs = self.app.preferences
        if temperature is not None:
            prefs.temperature = TemperatureUnit(temperature)
        if wind is not None:
            prefs.wind = WindUnit(wind)
        if precipitation is not None:
            prefs.precipitation = PrecipitationUnit(precipitation)
        logger.info(
            "Units: %s / %s / %s", prefs.temperature.value, prefs.wind.value, prefs.precipitation.value
        )
        return prefs

    # --- autocomplete ---

    def on_query_typed(self, text: str, now: float) -> None:
        """Keystroke in the search box; the lookup itself waits for ``tick``."""
        query = text.strip()
        if len(query) < MIN_QUERY_LEN:
            self.debouncer.cancel()
            self.app.suggestions = []
            return
        self.debouncer.push(query, now)

    def tick(self, now: float) -> bool:
        """Run the pending suggestion lookup if the quiet period has passed."""
        fired, query = self.debouncer.poll(now)
        if not fired or query is None:
            return False
        self.suggest_now(query)
        return True

    def suggest_now(self, text: str) -> list[PlaceCandidate]:
        """
        Suggestion lookup for a term whose quiet period has already passed
        (the debouncer above, or the browser search box). Short terms only
        clear the list.
        """
        query = text.strip()
        if len(query) < MIN_QUERY_LEN:
            self.app.suggestions = []
            return []

        self.app.suggestion_seq += 1
        seq = self.app.suggestion_seq
        try:
            results = self._suggest(query)
        except WeatherLookupError as e:
            # ehdotukset eivät ole kriittisiä: lista vain piilotetaan
            logger.warning("Suggestion lookup for %r failed: %s", query, e)
            results = []

        if seq == self.app.suggestion_seq:
            self.app.suggestions = list(results)
        return self.app.suggestions

    # --- view ---

    def view(self, now: datetime | None = None) -> WeatherView:
        return build_weather_view(
            self.state,
            self.app.snapshot,
            self.app.preferences,
            suggestions=self.app.suggestions,
            now=now,
        )
