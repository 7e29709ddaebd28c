"""
Configuration for havarot.

Two layers live here.  :class:`AppConfig` holds the application
settings read from ``config_default_settings.json`` (shipped inside the
package) with optional user overrides merged on top; the command line
and the connectors read from it.  :class:`SylOptions` is the small,
immutable set of options that changes how a :class:`~havarot.core.text.Text`
is syllabified.  It can be built directly or from the
``syllabification`` section of an :class:`AppConfig`.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE: Path = Path(__file__).resolve().parent / "config_default_settings.json"
CONFIG_ENV_VAR = "HAVAROT_CONFIG"


# ── Application settings ────────────────────────────────────────────

@dataclass
class AppConfig:
    """Nested settings dictionary with path-style lookup."""

    data: Dict[str, Any] = field(default_factory=dict)

    def get(self, *keys: str, default: Optional[Any] = None) -> Any:
        """Retrieve a nested value, e.g. ``config.get("connector", "timeout")``.

        :param keys: Path of keys into the settings.
        :param default: Returned when any key along the path is missing.
        """
        current: Any = self.data
        for key in keys:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    def merge(self, other: Dict[str, Any]) -> None:
        """Overlay ``other`` onto the settings, merging nested sections."""

        def _merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
            result = dict(a)
            for k, v in b.items():
                if isinstance(v, dict) and isinstance(a.get(k), dict):
                    result[k] = _merge(a[k], v)
                else:
                    result[k] = v
            return result

        self.data = _merge(self.data, other)


def load_config(user_config_path: Optional[os.PathLike] = None) -> AppConfig:
    """Read the packaged defaults and overlay an optional user file.

    A ``user_config_path`` that does not point to a file is ignored.

    :param user_config_path: Path to a JSON file with overrides.
    :return: The merged configuration.
    """
    with open(DEFAULT_CONFIG_FILE, "r", encoding="utf-8") as f:
        cfg = AppConfig(json.load(f))
    if user_config_path:
        user_path = Path(user_config_path)
        if user_path.is_file():
            with open(user_path, "r", encoding="utf-8") as uf:
                cfg.merge(json.load(uf))
            logger.debug("Merged user configuration from %s", user_path)
        else:
            logger.warning("Configuration file %s not found, using defaults", user_path)
    return cfg


def get_app_config() -> AppConfig:
    """Load the configuration, honouring the ``HAVAROT_CONFIG`` environment variable."""
    return load_config(os.environ.get(CONFIG_ENV_VAR))


# ── Syllabification options ─────────────────────────────────────────

SCHEMAS: Dict[str, Dict[str, bool]] = {
    "traditional": {"sqnmlvy": True, "long_vowels": True, "waw_shureq": True, "qamets_qatan": True},
    "tiberian": {"sqnmlvy": True, "long_vowels": False, "waw_shureq": False, "qamets_qatan": False},
}
HOLEM_HASER_MODES = (None, "remove")


@dataclass(frozen=True)
class SylOptions:
    """Options controlling how a text is syllabified.

    :param sqnmlvy: A sheva under ש ס צ נ מ ל ו י ק after a consecutive
        vav or the article (which lost its doubling dagesh) is vocal.
    :param long_vowels: A sheva after a long vowel is vocal.
    :param waw_shureq: A sheva after a vav shureq is vocal.
    :param qamets_qatan: Convert qamets to qamets qatan where certain.
    :param holem_haser: ``"remove"`` normalises holam haser for vav to
        a plain holem before the corrections run.
    :param schema: ``"traditional"`` or ``"tiberian"``; when given, it
        overrides the four boolean options above.
    :param allow_no_niqqud: Accept text without any vowel points.
    :raises ValueError: if ``schema`` or ``holem_haser`` is unknown or a
        boolean option is not a bool.
    """

    sqnmlvy: bool = True
    long_vowels: bool = True
    waw_shureq: bool = True
    qamets_qatan: bool = True
    holem_haser: Optional[str] = None
    schema: Optional[str] = None
    allow_no_niqqud: bool = False

    def __post_init__(self) -> None:
        if self.schema is not None:
            if self.schema not in SCHEMAS:
                raise ValueError(
                    f"Unknown schema {self.schema!r}; expected one of {sorted(SCHEMAS)}"
                )
            for name, value in SCHEMAS[self.schema].items():
                object.__setattr__(self, name, value)
        if self.holem_haser not in HOLEM_HASER_MODES:
            raise ValueError(f"holem_haser must be None or 'remove', got {self.holem_haser!r}")
        for name in ("sqnmlvy", "long_vowels", "waw_shureq", "qamets_qatan", "allow_no_niqqud"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a bool, got {getattr(self, name)!r}")

    def replace(self, **changes: Any) -> "SylOptions":
        """Return a copy with ``changes`` applied (and validated)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_config(cls, config: AppConfig) -> "SylOptions":
        """Build options from the ``syllabification`` section of ``config``."""
        section = config.get("syllabification", default={}) or {}
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(section) - known
        if unknown:
            logger.warning("Ignoring unknown syllabification settings: %s", ", ".join(sorted(unknown)))
        return cls(**{k: v for k, v in section.items() if k in known})
