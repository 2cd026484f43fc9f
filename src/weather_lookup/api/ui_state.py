# src/weather_lookup/api/ui_state.py
from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger("weatherlookup")


class UIState(str, Enum):
    INITIAL = "initial"
    LOADING = "loading"
    ERROR = "error"
    NO_RESULTS = "no_results"
    WEATHER = "weather"


class InvalidTransition(RuntimeError):
    """Raised when a result state is entered without a search in progress."""


class UIStateMachine:
    """
    The five mutually exclusive screens of the widget.

    A new search may start from any state; the three result screens are
    only reachable from LOADING.
    """

    def __init__(self) -> None:
        self.state = UIState.INITIAL

    def _enter(self, target: UIState) -> None:
        if self.state != UIState.LOADING:
            raise InvalidTransition(f"{self.state.value} -> {target.value}")
        logger.debug("UI state %s -> %s", self.state.value, target.value)
        self.state = target

    def start_loading(self) -> None:
        logger.debug("UI state %s -> loading", self.state.value)
        self.state = UIState.LOADING

    def show_weather(self) -> None:
        self._enter(UIState.WEATHER)

    def show_error(self) -> None:
        self._enter(UIState.ERROR)

    def show_no_results(self) -> None:
        self._enter(UIState.NO_RESULTS)
