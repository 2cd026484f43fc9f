# src/weather_lookup/ui/card_search.py
from __future__ import annotations

from typing import Any

import streamlit as st
from streamlit_searchbox import st_searchbox

from weather_lookup.api.models import PlaceCandidate
from weather_lookup.config import DEBOUNCE_S
from weather_lookup.ui.common import get_pipeline

SEARCH_KEY = "place_search"
LAST_TERM_KEY = "last_search_term"


def search_places(term: str) -> list[tuple[str, Any]]:
    """
    Called by the search box on every settled keystroke.

    The typed text itself is always the first option, so Enter (which picks
    the highlighted first option) submits the free-text search. Places from
    the geocoder follow it.
    """
    query = (term or "").strip()
    st.session_state[LAST_TERM_KEY] = query
    if not query:
        return []

    places = get_pipeline().suggest_now(query)
    options: list[tuple[str, Any]] = [(f"🔍 Search “{query}”", query)]
    options += [(f"{p.name} · {p.detail}", p) for p in places]
    return options


def submit_choice(choice: Any) -> None:
    """Search box selection: a place skips geocoding, text goes through it."""
    pipeline = get_pipeline()
    with st.spinner("Loading weather…"):
        if isinstance(choice, PlaceCandidate):
            pipeline.select_suggestion(choice)
        elif choice:
            pipeline.submit_query(str(choice))


def _on_search_button() -> None:
    submit_choice(st.session_state.get(LAST_TERM_KEY, ""))


def card_search() -> None:
    """Search box with autocomplete, plus the search button."""
    col_input, col_button = st.columns([5, 1], gap="small")
    with col_input:
        st_searchbox(
            search_places,
            placeholder="Search for a city, e.g. Paris",
            key=SEARCH_KEY,
            # selain odottaa hiljaisen jakson ennen hakua
            debounce=int(DEBOUNCE_S * 1000),
            submit_function=submit_choice,
            clear_on_submit=False,
        )
    with col_button:
        st.button("Search", key="search_button", on_click=_on_search_button, use_container_width=True)
