"""The root of the syllabified graph.

:class:`Text` normalises and corrects its input once, at construction,
and then builds words, syllables and clusters lazily on first access.
"""

from __future__ import annotations

import logging
import unicodedata
from functools import cached_property
from typing import Any, List, Optional, Tuple

from ..config import SylOptions
from ..utils import hebrew
from ..utils.holem_waw import holem_waw
from ..utils.qamets_qatan import convert_qamets_qatan
from .char import Char
from .cluster import Cluster
from .sequence import sequence_text
from .syllable import Syllable
from .word import Word

logger = logging.getLogger(__name__)


class TextValidationError(ValueError):
    """Raised when the input cannot be syllabified, e.g. it has no vowel points."""


class Text:
    """Pointed Hebrew text split into words, syllables, clusters and characters.

    Usage::

        text = Text(pointed_hebrew)
        [s.text for s in text.syllables]

    :param text: The input string; any normalisation form is accepted.
    :param options: A :class:`~havarot.config.SylOptions`; defaults apply
        when omitted.
    :param overrides: Individual option values applied on top of
        ``options``, e.g. ``Text(s, schema="tiberian")``.
    :raises TextValidationError: if the text has no vowel points and
        ``allow_no_niqqud`` is not set.
    :raises ValueError: for an invalid option value.
    """

    def __init__(self, text: str, options: Optional[SylOptions] = None, **overrides: Any) -> None:
        options = options or SylOptions()
        if overrides:
            options = options.replace(**overrides)
        self.original = text
        self.options = options
        self.sanitized = self._validate(unicodedata.normalize("NFKD", text).strip())
        self._words = self._correct(self.sanitized)
        self.text = "".join(word + ws for word, ws in self._words)

    def __repr__(self) -> str:
        return f"Text({self.text!r})"

    def _validate(self, text: str) -> str:
        if not self.options.allow_no_niqqud and not hebrew.has_niqqud(text):
            raise TextValidationError("Text must contain niqqud (vowel points)")
        return text

    def _correct(self, text: str) -> List[Tuple[str, str]]:
        words = []
        for word, ws in hebrew.split_words(sequence_text(text)):
            if self.options.qamets_qatan:
                word = convert_qamets_qatan(word)
            word = holem_waw(word, self.options.holem_haser)
            words.append((sequence_text(word), ws))
        logger.debug("Corrected %d words", len(words))
        return words

    @cached_property
    def words(self) -> List[Word]:
        words = []
        for index, (word, ws) in enumerate(self._words):
            obj = Word(word, self.options, ws)
            obj.text_obj = self
            obj._index = index
            words.append(obj)
        return words

    @property
    def syllables(self) -> List[Syllable]:
        return [s for word in self.words for s in word.syllables]

    @property
    def clusters(self) -> List[Cluster]:
        return [c for word in self.words for c in word.clusters]

    @property
    def chars(self) -> List[Char]:
        return [c for word in self.words for c in word.chars]
