"""
Top-level package for havarot.

havarot splits pointed Hebrew (consonants with vowel points and
cantillation marks) into syllables and describes each syllable's
onset, nucleus and coda.

Example usage::

    from havarot import Text

    text = Text(pointed_hebrew, schema="traditional")
    for syllable in text.syllables:
        print(syllable.text, syllable.is_closed, syllable.vowel_name)

The API surface re-exports only the classes most callers need.  For
lower-level functionality, import directly from the subpackages
(``havarot.core``, ``havarot.utils`` or ``havarot.connectors``).
"""

from .config import AppConfig, SylOptions, get_app_config, load_config  # noqa: F401
from .connectors import get_default_connector  # noqa: F401
from .core import (  # noqa: F401
    Char,
    Cluster,
    ConsonantRole,
    PartKind,
    Syllable,
    SyllablePart,
    SyllableStructureError,
    Text,
    TextValidationError,
    Word,
)

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "Char",
    "Cluster",
    "ConsonantRole",
    "PartKind",
    "SylOptions",
    "Syllable",
    "SyllablePart",
    "SyllableStructureError",
    "Text",
    "TextValidationError",
    "Word",
    "get_app_config",
    "get_default_connector",
    "load_config",
]
