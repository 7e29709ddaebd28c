"""A single word of a :class:`~havarot.core.text.Text`."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, List, Optional

from ..utils import hebrew
from .char import Char
from .cluster import Cluster, build_clusters
from .syllabifier import is_divine_name, syllabify
from .syllable import Syllable

if TYPE_CHECKING:
    from ..config import SylOptions
    from .text import Text


class Word:
    """One word, i.e. a run of text between whitespace or after a maqaf.

    :param text: The corrected and sequenced word.
    :param options: Options passed on to the syllabifier.
    :param whitespace_after: Whitespace that followed the word in the text.
    """

    def __init__(self, text: str, options: "SylOptions", whitespace_after: str = "") -> None:
        self.original = text
        self.options = options
        self.whitespace_after = whitespace_after
        # set by the owning Text
        self.text_obj: Optional["Text"] = None
        self._index = 0

    def __repr__(self) -> str:
        return f"Word({self.text!r})"

    @cached_property
    def clusters(self) -> List[Cluster]:
        return build_clusters(self.original)

    @cached_property
    def syllables(self) -> List[Syllable]:
        syllables = syllabify(self.clusters, self.options)
        for index, syllable in enumerate(syllables):
            syllable.word = self
            syllable._index = index
        return syllables

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.syllables)

    @property
    def chars(self) -> List[Char]:
        return [char for cluster in self.clusters for char in cluster.chars]

    # ── Neighbours within the text ──────────────────────────────────

    @property
    def next(self) -> Optional["Word"]:
        if self.text_obj is None:
            return None
        words = self.text_obj.words
        index = self._index + 1
        return words[index] if index < len(words) else None

    @property
    def previous(self) -> Optional["Word"]:
        if self.text_obj is None or self._index == 0:
            return None
        return self.text_obj.words[self._index - 1]

    # ── Classification ──────────────────────────────────────────────

    @property
    def has_divine_name(self) -> bool:
        return is_divine_name(self.original)

    @property
    def is_divine_name(self) -> bool:
        """True if the word is the Divine Name itself, without prefixes."""
        letters = "".join(ch for ch in hebrew.strip_marks(self.original) if hebrew.is_hebrew_letter(ch))
        return letters == "יהוה"

    @property
    def is_in_construct(self) -> bool:
        """True if a maqaf binds the word to the next one."""
        return self.original.endswith(hebrew.MAQAF)

    @property
    def is_not_hebrew(self) -> bool:
        return all(c.is_not_hebrew for c in self.clusters)
