# src/weather_lookup/api/http.py
import logging
from typing import Any

import requests

from weather_lookup.config import HTTP_TIMEOUT_S, USER_AGENT
from weather_lookup.utils import report_error

logger = logging.getLogger("weatherlookup")


def http_get_json(
    url: str, params: dict[str, Any] | None = None, timeout: float = HTTP_TIMEOUT_S
) -> dict:
    """
    GET ``url`` and decode the JSON body. One attempt only: callers decide
    what a failure means for them.

    Raises ``requests.RequestException`` on transport errors or bad status and
    ``ValueError`` when the body is not a JSON object.
    """
    headers = {"User-Agent": USER_AGENT}
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"expected JSON object, got {type(data).__name__}")
        logger.debug("GET %s -> %s", url, resp.status_code)
        return data
    except Exception as e:
        report_error(f"http_get_json: {url}", e)
        raise
