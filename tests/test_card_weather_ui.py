from __future__ import annotations

import importlib

import pytest

from weather_lookup.api.ui_state import UIState
from weather_lookup.api.weather_viewmodel import CurrentView, DailyRow, HourlyRow, WeatherView
from weather_lookup.api.wmo_icon_map import IconCategory
from weather_lookup.ui.card_weather import card_weather

card_weather_module = importlib.import_module("weather_lookup.ui.card_weather")


class DummySt:
    """Kevyt stub streamlitille card_weather-testejä varten."""

    def __init__(self):
        self.session_state: dict[str, object] = {}
        self.buttons: list[tuple[str, dict]] = []

    def button(self, label: str, **kwargs) -> bool:
        self.buttons.append((label, kwargs))
        return False


class DummyPipeline:
    def __init__(self, view: WeatherView):
        self._view = view
        self.retries = 0

    def view(self) -> WeatherView:
        return self._view

    def retry(self) -> None:
        self.retries += 1


def _weather_view() -> WeatherView:
    return WeatherView(
        state=UIState.WEATHER,
        current=CurrentView(
            place_label="Paris, France",
            date_label="Monday, Oct 19, 2026",
            temperature="13°",
            feels_like="11°",
            humidity="80%",
            wind="15 km/h",
            precipitation="0.2 mm",
            icon="⛅",
            category=IconCategory.PARTLY_CLOUDY,
        ),
        hourly=[HourlyRow("02:00 PM", "☀️", "17°", "14%"), HourlyRow("03:00 PM", "🌧️", "18°", "15%")],
        daily=[DailyRow("Mon", "☁️", "16°", "7°")],
    )


def _patch(monkeypatch, view: WeatherView):
    dummy_st = DummySt()
    pipeline = DummyPipeline(view)
    cards: list[tuple[str, str]] = []
    titles: list[str] = []
    rendered: dict[str, object] = {}

    def fake_html(html: str, height: int, scrolling: bool) -> None:
        rendered["html"] = html
        rendered["height"] = height

    monkeypatch.setattr(card_weather_module, "st", dummy_st)
    monkeypatch.setattr(card_weather_module, "get_pipeline", lambda: pipeline)
    monkeypatch.setattr(card_weather_module, "card", lambda title, body, **kw: cards.append((title, body)))
    monkeypatch.setattr(card_weather_module, "section_title", lambda html, **kw: titles.append(html))
    monkeypatch.setattr(card_weather_module, "st_html", fake_html)
    return dummy_st, pipeline, cards, titles, rendered


def test_card_weather_happy_path(monkeypatch):
    _, _, cards, titles, rendered = _patch(monkeypatch, _weather_view())

    card_weather()

    assert cards == []
    assert "Paris, France" in titles[0]
    assert "Monday, Oct 19, 2026" in titles[0]

    html = rendered["html"]
    assert "13°" in html
    assert "15 km/h" in html
    assert "02:00 PM" in html
    assert "Mon" in html
    assert rendered["height"] == 420


@pytest.mark.parametrize(
    "state,text",
    [
        (UIState.INITIAL, "Search for a city"),
        (UIState.LOADING, "Loading"),
        (UIState.NO_RESULTS, "No search result found!"),
    ],
)
def test_card_weather_simple_states(monkeypatch, state, text):
    dummy_st, _, cards, _, rendered = _patch(monkeypatch, WeatherView(state=state))

    card_weather()

    assert len(cards) == 1
    assert text in cards[0][1]
    assert dummy_st.buttons == []
    assert "html" not in rendered


def test_card_weather_error_offers_retry(monkeypatch):
    dummy_st, pipeline, cards, _, _ = _patch(monkeypatch, WeatherView(state=UIState.ERROR))

    card_weather()

    assert "Something went wrong" in cards[0][1]
    label, kwargs = dummy_st.buttons[0]
    assert "Retry" in label
    kwargs["on_click"]()
    assert pipeline.retries == 1


def test_card_weather_shows_error_card_on_exception(monkeypatch):
    _, _, cards, _, _ = _patch(monkeypatch, WeatherView(state=UIState.WEATHER))

    def boom():
        raise RuntimeError("oops")

    monkeypatch.setattr(card_weather_module, "get_pipeline", boom)
    monkeypatch.setattr(
        card_weather_module,
        "st_html",
        lambda *a, **k: pytest.fail("st_html() ei pitäisi kutsua error-haarassa"),
    )

    card_weather()

    assert cards, "Virhetilanteessa card() pitäisi kutsua"
    title, body = cards[0]
    assert "Weather" in title
    assert "Error: oops" in body


def test_weather_html_without_current_is_empty():
    assert card_weather_module.weather_html(WeatherView(state=UIState.LOADING)) == ""
