# src/weather_lookup/ui/card_weather.py
from __future__ import annotations

import html

import streamlit as st
from streamlit.components.v1 import html as st_html

from weather_lookup.api.ui_state import UIState
from weather_lookup.api.weather_viewmodel import CurrentView, DailyRow, HourlyRow, WeatherView
from weather_lookup.ui.common import card, get_pipeline, section_title

TITLE = "🌤️ Weather"

_STYLE = """
  :root { --fg:#e7eaee; --bg2:rgba(255,255,255,0.06); }
  html,body {margin:0;padding:0;background:transparent;color:var(--fg);
             font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}
  .now {display:flex;align-items:center;gap:18px;padding:8px 12px;}
  .now .icon{font-size:3.2rem;}
  .now .temp{font-size:3rem;font-weight:600;}
  .stats {display:grid;grid-template-columns:repeat(4,1fr);gap:10px;padding:0 12px 8px;}
  .stat {background:var(--bg2);border-radius:14px;padding:6px 10px;}
  .stat .k{font-size:.8rem;opacity:.75;} .stat .v{font-size:1.1rem;}
  .row {display:grid;gap:10px;padding:4px 12px;}
  .hourly {grid-template-columns:repeat(12,minmax(64px,1fr));overflow-x:auto;}
  .daily {grid-template-columns:repeat(7,minmax(72px,1fr));}
  .cell {display:grid;justify-items:center;background:var(--bg2);border-radius:14px;padding:6px;}
  .cell .label{font-size:.85rem;opacity:.9;} .cell .icon{font-size:1.6rem;}
  .cell .lo{opacity:.6;}
"""


def _current_html(cur: CurrentView) -> str:
    stats = (
        ("Feels like", cur.feels_like),
        ("Humidity", cur.humidity),
        ("Wind", cur.wind),
        ("Precipitation", cur.precipitation),
    )
    stat_html = "".join(
        f'<div class="stat"><div class="k">{k}</div><div class="v">{v}</div></div>'
        for k, v in stats
    )
    return f"""
        <div class="now">
          <div class="icon">{cur.icon}</div>
          <div class="temp">{cur.temperature}</div>
        </div>
        <div class="stats">{stat_html}</div>
    """


def _hourly_cell(row: HourlyRow) -> str:
    return f"""
        <div class="cell">
          <div class="label">{row.time_label}</div>
          <div class="icon">{row.icon}</div>
          <div class="temp">{row.temperature}</div>
          <div class="lo">{row.precipitation_probability}</div>
        </div>
    """


def _daily_cell(row: DailyRow) -> str:
    return f"""
        <div class="cell">
          <div class="label">{row.day_label}</div>
          <div class="icon">{row.icon}</div>
          <div><span>{row.high}</span> <span class="lo">{row.low}</span></div>
        </div>
    """


def weather_html(view: WeatherView) -> str:
    """Self-contained HTML document for the WEATHER state."""
    if view.current is None:
        return ""
    return (
        f'<!doctype html><html><head><meta charset="utf-8"><style>{_STYLE}</style></head><body>'
        + _current_html(view.current)
        + '<div class="row hourly">'
        + "".join(_hourly_cell(r) for r in view.hourly)
        + '</div><div class="row daily">'
        + "".join(_daily_cell(r) for r in view.daily)
        + "</div></body></html>"
    )


def card_weather() -> None:
    """Render whichever of the five screens the pipeline is in."""
    try:
        pipeline = get_pipeline()
        view = pipeline.view()

        if view.state == UIState.INITIAL:
            card(TITLE, "<span class='hint'>Search for a city to see the weather.</span>")
        elif view.state == UIState.LOADING:
            card(TITLE, "<span class='hint'>Loading…</span>")
        elif view.state == UIState.NO_RESULTS:
            card(TITLE, "<span class='hint'>No search result found!</span>")
        elif view.state == UIState.ERROR:
            card(
                TITLE,
                "<span class='hint'>Something went wrong. We couldn't connect to the "
                "server (API error). Please try again.</span>",
            )
            st.button("↻ Retry", key="retry_button", on_click=pipeline.retry)
        elif view.current is not None:
            cur = view.current
            section_title(
                f"{TITLE} — {html.escape(cur.place_label)}&nbsp; | &nbsp;{cur.date_label}",
                mb=3,
            )
            st_html(weather_html(view), height=420, scrolling=False)

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {html.escape(str(e))}</span>", height_dvh=15)
