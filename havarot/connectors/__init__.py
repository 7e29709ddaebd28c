"""Connector registry for havarot.

Connectors are pluggable sources of pointed text.  The
``get_default_connector`` factory reads the ``connector`` section of
the application config and returns an appropriate
:class:`BaseConnector` instance.

Currently supported connector types:
    * ``"sefaria"``  - calls the Sefaria public API (requires internet)

Configuration example (config_default_settings.json)::

    {
        "connector": {
            "type": "sefaria",
            "base_url": "https://www.sefaria.org/api",
            "timeout": 15.0
        }
    }
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .base import BaseConnector
from .sefaria import DEFAULT_BASE_URL, SefariaConnector

logger = logging.getLogger(__name__)

__all__ = [
    "BaseConnector",
    "SefariaConnector",
    "get_default_connector",
]


def get_default_connector(config: Optional[Dict[str, Any]] = None) -> BaseConnector:
    """Return a connector instance based on *config*.

    :param config: The ``connector`` section of the application config.
        Recognised keys are ``type`` (default ``"sefaria"``),
        ``base_url`` and ``timeout``.
    :return: A ready-to-use :class:`BaseConnector`.
    """
    if config is None:
        config = {}

    connector_type = str(config.get("type") or "sefaria").lower()
    base_url = config.get("base_url") or DEFAULT_BASE_URL
    timeout = float(config.get("timeout") or 15.0)

    if connector_type != "sefaria":
        logger.warning(
            "Unknown connector type %r, falling back to SefariaConnector",
            connector_type,
        )
    else:
        logger.info("Using SefariaConnector with base_url=%s", base_url)
    return SefariaConnector(base_url=base_url, timeout=timeout)
