"""Connector for retrieving pointed text from Sefaria.

This connector wraps the ``texts`` endpoint of Sefaria's public API
and returns the Hebrew of a reference with vowel points and
cantillation marks, which is exactly what the syllabifier expects.
Network failures surface as :class:`ConnectionError` (non-200 status)
or as the underlying :mod:`requests` exception.

For details on the Sefaria API, see https://developers.sefaria.org.
"""

from __future__ import annotations

import html as _html
import logging
import re
from typing import Any, Dict, List, Optional

import requests

from .base import BaseConnector

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.sefaria.org/api"
USER_AGENT = "havarot/0.1"

# Regular expressions and helpers for cleaning Sefaria HTML responses.
_RE_BR = re.compile(r"(?i)<br\s*/?>")
_RE_TAG = re.compile(r"<[^>]+>")
_RE_WS = re.compile(r"[ \t\u00A0\u2009]+")
# Sefaria appends paragraph markers {פ} and {ס} to some verses
_RE_PARASHA = re.compile(r"\s*\{[פס]\}\s*")


def _clean_sefaria_text(s: Optional[str]) -> str:
    """Strip HTML, bidirectional marks and paragraph markers from a verse.

    :param s: Raw verse text returned by the API.
    :return: The verse on a single line; empty for a falsy input.
    """
    if not s:
        return ""
    s = _RE_BR.sub(" ", s)
    s = _html.unescape(s)
    s = _RE_TAG.sub("", s)
    s = s.replace("\u200F", "").replace("\u200E", "")
    s = _RE_PARASHA.sub(" ", s)
    s = _RE_WS.sub(" ", s)
    return s.strip()


def _flatten(items: Any) -> List[str]:
    result: List[str] = []
    if isinstance(items, str):
        return [items]
    for item in items or []:
        if isinstance(item, list):
            result.extend(_flatten(item))
        elif item is not None:
            result.append(str(item))
    return result


class SefariaConnector(BaseConnector):
    """Fetch pointed biblical text using Sefaria's API.

    :param base_url: The base URL for the Sefaria API.
    :param timeout: Seconds to wait for a response.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 15.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send a GET request to the Sefaria API and return JSON.

        :raises ConnectionError: If the API returns a non-200 status.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s", url)
        resp = self.session.get(
            url,
            params=params or {},
            headers={"User-Agent": USER_AGENT},
            timeout=self.timeout,
        )
        if resp.status_code != 200:
            raise ConnectionError(
                f"Sefaria API responded with status {resp.status_code} for {url}"
            )
        return resp.json()

    def get_verses(self, reference: str) -> List[str]:
        """Retrieve the Hebrew verses of an English reference.

        :param reference: Sefaria-style reference, e.g. ``"Genesis 1:1-5"``.
        :return: Cleaned verses, with empty ones dropped.
        :raises ConnectionError: If the API returns a non-200 status.
        :raises ValueError: If the response carries an error message.
        """
        reference = reference.strip()
        if not reference:
            raise ValueError("Empty reference")
        data = self._request(f"texts/{reference}", params={"context": 0, "pad": 0, "lang": "he"})
        if "error" in data:
            raise ValueError(f"Sefaria could not resolve {reference!r}: {data['error']}")
        verses = [_clean_sefaria_text(v) for v in _flatten(data.get("he") or [])]
        verses = [v for v in verses if v]
        logger.info("Fetched %d verses for %s", len(verses), reference)
        return verses
