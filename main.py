# main.py
"""Main entry point for the Weather Lookup Streamlit application."""

import sys
import traceback
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
sys.path.append(str(BASE_DIR / "src"))

import streamlit as st  # noqa: E402

from weather_lookup.logger_config import setup_logging  # noqa: E402
from weather_lookup.ui import card_search, card_units, card_weather  # noqa: E402
from weather_lookup.ui.common import load_css  # noqa: E402

logger = setup_logging()


def main() -> None:
    """Initialize and render the Weather Lookup page."""
    try:
        st.set_page_config(
            page_title="Weather Lookup",
            layout="centered",
            page_icon="🌤️",
        )
        load_css("style.css")

        # Row 1: title + units menu
        col1, col2 = st.columns([5, 1], gap="small")
        with col1:
            st.markdown("### How's the sky looking today?")
        with col2:
            card_units()

        # Row 2: search + suggestions
        card_search()

        # Row 3: the active screen
        card_weather()

    except KeyboardInterrupt:
        logger.info("Weather Lookup shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        raise


if __name__ == "__main__":
    main()
