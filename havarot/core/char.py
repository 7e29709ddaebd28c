"""A single classified character of a Hebrew text."""

from __future__ import annotations

from dataclasses import dataclass

from ..utils import hebrew


@dataclass(frozen=True)
class Char:
    """One Unicode code point plus its derived attributes.

    The sequence class is looked up from :func:`havarot.utils.hebrew.sequence_class`:
    consonant 0, dagesh 1, shin/sin dot 2, vowel point 3, cantillation
    mark 4 and anything unknown 10.
    """

    text: str

    @property
    def sequence_position(self) -> int:
        return hebrew.sequence_class(self.text)

    @property
    def is_char_known(self) -> bool:
        return self.sequence_position != hebrew.OTHER_CLASS

    @property
    def is_consonant(self) -> bool:
        return self.sequence_position == hebrew.CONSONANT_CLASS

    @property
    def is_dagesh(self) -> bool:
        return self.text == hebrew.DAGESH

    @property
    def is_ligature(self) -> bool:
        return self.sequence_position == hebrew.LIGATURE_CLASS

    @property
    def is_vowel(self) -> bool:
        return self.sequence_position == hebrew.VOWEL_CLASS

    @property
    def is_sheva(self) -> bool:
        return self.text == hebrew.SHEVA

    @property
    def is_taam(self) -> bool:
        return self.sequence_position == hebrew.TAAM_CLASS

    @property
    def is_meteg(self) -> bool:
        return self.text == hebrew.METEG

    @property
    def is_mark(self) -> bool:
        return hebrew.is_mark(self.text)

    @property
    def is_punctuation(self) -> bool:
        return hebrew.is_punctuation(self.text)

    @property
    def is_hebrew(self) -> bool:
        return hebrew.is_hebrew(self.text)

    @property
    def is_not_hebrew(self) -> bool:
        return not self.is_hebrew

    def __str__(self) -> str:
        return self.text
