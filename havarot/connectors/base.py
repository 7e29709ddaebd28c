"""Base interface for connectors.

Connectors retrieve pointed Hebrew text from a source so that it can be
handed to :class:`~havarot.core.text.Text`.  Subclasses implement
:meth:`BaseConnector.get_verses`; :meth:`BaseConnector.get_text` joins
the verses into one string.
"""

from __future__ import annotations

from typing import List


class BaseConnector:
    """Abstract base class for all connectors."""

    def get_verses(self, reference: str) -> List[str]:
        """Return the verses of ``reference`` in order, one string each."""
        raise NotImplementedError

    def get_text(self, reference: str) -> str:
        """Return the text of ``reference`` with one verse per line."""
        return "\n".join(self.get_verses(reference))
