"""Tests for the Sefaria connector and the connector registry.

The Sefaria API is never called: the connector's ``requests.Session``
is replaced by a fake that returns canned responses.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import pytest

from havarot.connectors import BaseConnector, SefariaConnector, get_default_connector
from havarot.connectors.sefaria import _clean_sefaria_text


class FakeResponse:
    def __init__(self, payload: Dict[str, Any], status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def json(self) -> Dict[str, Any]:
        return self._payload


class FakeSession:
    def __init__(self, response: FakeResponse) -> None:
        self.response = response
        self.calls: List[Dict[str, Any]] = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        return self.response


@pytest.fixture
def connector():
    return SefariaConnector(base_url="https://example.org/api/", timeout=5)


class TestCleanText:
    def test_strips_html_and_entities(self):
        assert _clean_sefaria_text("<b>בְּרֵאשִׁית</b>&nbsp;בָּרָא") == "בְּרֵאשִׁית בָּרָא"

    def test_strips_bidi_marks_and_paragraph_markers(self):
        assert _clean_sefaria_text("\u200Fאֵת {פ}") == "אֵת"

    def test_line_breaks_become_spaces(self):
        assert _clean_sefaria_text("אֵת<br/>הַשָּׁמַיִם") == "אֵת הַשָּׁמַיִם"

    def test_empty(self):
        assert _clean_sefaria_text(None) == ""
        assert _clean_sefaria_text("") == ""


class TestSefariaConnector:
    def test_get_verses_flattens_nested_lists(self, connector):
        session = FakeSession(FakeResponse({"he": [["אֵת", None], ["<i>וְאֵת</i>", ""]]}))
        connector.session = session
        assert connector.get_verses("Genesis 1:1-2") == ["אֵת", "וְאֵת"]
        call = session.calls[0]
        assert call["url"] == "https://example.org/api/texts/Genesis 1:1-2"
        assert call["params"]["lang"] == "he"
        assert call["timeout"] == 5

    def test_single_verse_string(self, connector):
        connector.session = FakeSession(FakeResponse({"he": "אֵת"}))
        assert connector.get_verses("Genesis 1:1") == ["אֵת"]

    def test_get_text_joins_verses(self, connector):
        connector.session = FakeSession(FakeResponse({"he": ["אֵת", "וְאֵת"]}))
        assert connector.get_text("Genesis 1:1-2") == "אֵת\nוְאֵת"

    def test_non_200_raises_connection_error(self, connector):
        connector.session = FakeSession(FakeResponse({}, status_code=404))
        with pytest.raises(ConnectionError, match="404"):
            connector.get_verses("Nowhere 1:1")

    def test_api_error_raises_value_error(self, connector):
        connector.session = FakeSession(FakeResponse({"error": "Unknown ref"}))
        with pytest.raises(ValueError, match="Unknown ref"):
            connector.get_verses("Nowhere 1:1")

    def test_empty_reference(self, connector):
        with pytest.raises(ValueError):
            connector.get_verses("   ")


class TestRegistry:
    def test_default_is_sefaria(self):
        connector = get_default_connector()
        assert isinstance(connector, SefariaConnector)
        assert connector.base_url == "https://www.sefaria.org/api"

    def test_config_values_are_used(self):
        connector = get_default_connector({"type": "Sefaria", "base_url": "http://x/api", "timeout": 2})
        assert connector.base_url == "http://x/api"
        assert connector.timeout == 2.0

    def test_unknown_type_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            connector = get_default_connector({"type": "local"})
        assert isinstance(connector, SefariaConnector)
        assert "Unknown connector type" in caplog.text

    def test_base_connector_is_abstract(self):
        with pytest.raises(NotImplementedError):
            BaseConnector().get_text("Genesis 1:1")
