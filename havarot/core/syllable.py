"""Syllables and their onset/nucleus/coda structure.

A :class:`Syllable` is built by the syllabifier from a run of clusters
and three flags.  Its ``parts`` decompose the characters into typed
:class:`~havarot.core.syllable_part.SyllablePart` objects, and its
``structure`` groups those parts into onset, nucleus and coda.  Both
are computed on first access and cached for the lifetime of the
syllable.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..utils import hebrew
from .char import Char
from .cluster import Cluster
from .syllable_part import ConsonantRole, SyllablePart

if TYPE_CHECKING:
    from .word import Word

logger = logging.getLogger(__name__)

Structure = Tuple[List[SyllablePart], List[SyllablePart], List[SyllablePart]]


class SyllableStructureError(ValueError):
    """Raised when a syllable's parts do not reduce to a (C)V(C) shape."""


class Syllable:
    """A run of clusters forming one syllable of a word.

    :param clusters: The clusters of the syllable, in text order.
    :param is_closed: True if a consonant closes the syllable.
    :param is_accented: True if the syllable carries the word stress.
    :param is_final: True for the last syllable of a word.
    :param is_fallback: True when the word could not be syllabified and
        this syllable holds all of it; its structure is then read
        leniently instead of raising.
    """

    def __init__(self, clusters: Sequence[Cluster], *, is_closed: bool = False,
                 is_accented: bool = False, is_final: bool = False, is_fallback: bool = False) -> None:
        self.clusters: List[Cluster] = list(clusters)
        self.is_closed = is_closed
        self.is_accented = is_accented
        self.is_final = is_final
        self.is_fallback = is_fallback
        # set by the owning Word
        self.word: Optional["Word"] = None
        self._index = 0
        self._parts: Optional[List[SyllablePart]] = None
        self._structure: Optional[Structure] = None

    def __repr__(self) -> str:
        flags = "".join(
            flag for flag, on in (("C", self.is_closed), ("A", self.is_accented), ("F", self.is_final)) if on
        )
        return f"Syllable({self.text!r}, {flags or '-'})"

    @property
    def text(self) -> str:
        return "".join(cluster.text for cluster in self.clusters)

    @property
    def chars(self) -> List[Char]:
        return [char for cluster in self.clusters for char in cluster.chars]

    @property
    def taamim(self) -> List[str]:
        return [t for cluster in self.clusters for t in cluster.taamim]

    # ── Neighbours within the word ──────────────────────────────────

    @property
    def next(self) -> Optional["Syllable"]:
        """The following syllable of the same word, or ``None``."""
        if self.word is None:
            return None
        syllables = self.word.syllables
        index = self._index + 1
        return syllables[index] if index < len(syllables) else None

    @property
    def previous(self) -> Optional["Syllable"]:
        """The preceding syllable of the same word, or ``None``."""
        if self.word is None or self._index == 0:
            return None
        return self.word.syllables[self._index - 1]

    # ── Parts ───────────────────────────────────────────────────────

    @property
    def parts(self) -> List[SyllablePart]:
        """The syllable decomposed into consonant, vowel, mark and non-Hebrew parts.

        Vowel letters (matres lectionis) are folded into the vowel they
        lengthen, a furtive patah is placed before its consonant, and an
        open syllable followed by a doubled consonant receives that
        consonant as an extra coda part.
        """
        if self._parts is None:
            self._parts = self._build_parts()
        return self._parts

    def _build_parts(self) -> List[SyllablePart]:
        parts: List[SyllablePart] = []
        first_hebrew = next((i for i, c in enumerate(self.clusters) if not c.is_not_hebrew), 0)

        for i, cluster in enumerate(self.clusters):
            chars = cluster.chars
            if cluster.is_shureq:
                parts.append(SyllablePart.vowel(chars[:2], self))
                chars = chars[2:]
            elif cluster.is_mater and self._merge_mater(parts, cluster.chars[0]):
                chars = chars[1:]
            elif self._has_furtive_patah(i):
                patah = next(c for c in chars if c.is_vowel)
                parts.append(SyllablePart.vowel([patah], self))
                consonant = [c for c in chars if c.sequence_position <= hebrew.LIGATURE_CLASS]
                parts.append(SyllablePart.consonant(consonant, ConsonantRole.CODA, self))
                chars = [c for c in chars if c is not patah and c not in consonant]
            for char in chars:
                self._add_char(parts, char, in_first_cluster=(i == first_hebrew))

        geminate = self._gemination(parts)
        if geminate is not None:
            parts.append(geminate)
        return parts

    def _merge_mater(self, parts: List[SyllablePart], mater: Char) -> bool:
        for idx in range(len(parts) - 1, -1, -1):
            if parts[idx].is_vowel:
                parts[idx] = dataclasses.replace(parts[idx], chars=parts[idx].chars + (mater,))
                return True
        return False

    def _has_furtive_patah(self, index: int) -> bool:
        if not self.is_final or not self.clusters[index].has_furtive_patah:
            return False
        return all(c.is_not_hebrew or c.is_punctuation for c in self.clusters[index + 1:])

    def _add_char(self, parts: List[SyllablePart], char: Char, in_first_cluster: bool) -> None:
        position = char.sequence_position
        if position == hebrew.CONSONANT_CLASS:
            has_vowel = any(p.is_vowel for p in parts)
            role = ConsonantRole.CODA if has_vowel else ConsonantRole.ONSET
            parts.append(SyllablePart.consonant([char], role, self))
        elif position in (hebrew.DAGESH_CLASS, hebrew.LIGATURE_CLASS):
            if parts and parts[-1].is_consonant:
                parts[-1] = dataclasses.replace(parts[-1], chars=parts[-1].chars + (char,))
            else:
                parts.append(SyllablePart.hebrew_mark([char], self))
        elif position == hebrew.VOWEL_CLASS:
            # a sheva past the first cluster is silent and closes the syllable
            if char.is_sheva and not in_first_cluster:
                parts.append(SyllablePart.hebrew_mark([char], self))
            else:
                parts.append(SyllablePart.vowel([char], self))
        elif char.is_hebrew:
            parts.append(SyllablePart.hebrew_mark([char], self))
        else:
            parts.append(SyllablePart.non_hebrew([char], self))

    def _gemination(self, parts: List[SyllablePart]) -> Optional[SyllablePart]:
        following = self.next
        if following is None or not following.clusters:
            return None
        if not any(c.has_vowel or c.is_shureq for c in self.clusters):
            return None
        if any(p.part_of_coda for p in parts):
            return None
        first = following.clusters[0]
        if not first.has_dagesh or first.is_shureq:
            return None
        chars = [c for c in first.chars if c.sequence_position <= hebrew.LIGATURE_CLASS]
        return SyllablePart.consonant(chars, ConsonantRole.CODA_GEMINATION, self)

    # ── Structure ───────────────────────────────────────────────────

    @property
    def structure(self) -> Structure:
        """The ``(onset, nucleus, coda)`` grouping of :attr:`parts`.

        Marks and non-Hebrew parts are left out.  The lists hold the
        same part objects as :attr:`parts`.

        A fallback syllable (see :attr:`is_fallback`) never raises: its
        first vowel is the nucleus and any later vowels are left out.

        :raises SyllableStructureError: if a vowel follows a coda consonant.
        """
        if self._structure is None:
            self._structure = self._build_structure()
        return self._structure

    def _build_structure(self) -> Structure:
        onset: List[SyllablePart] = []
        nucleus: List[SyllablePart] = []
        coda: List[SyllablePart] = []
        for part in self.parts:
            if part.is_vowel and self.is_fallback:
                if not nucleus:
                    nucleus.append(part)
            elif part.is_vowel:
                if coda:
                    raise SyllableStructureError(
                        f"Syllable {self.text!r} has a vowel after its coda"
                    )
                nucleus.append(part)
            elif part.is_consonant:
                (coda if nucleus else onset).append(part)
        return onset, nucleus, coda

    @property
    def onset(self) -> List[SyllablePart]:
        return self.structure[0]

    @property
    def nucleus(self) -> List[SyllablePart]:
        return self.structure[1]

    @property
    def coda(self) -> List[SyllablePart]:
        return self.structure[2]

    @property
    def coda_without_gemination(self) -> List[SyllablePart]:
        return [p for p in self.coda if not p.from_gemination]

    # ── Vowels ──────────────────────────────────────────────────────

    @property
    def vowel(self) -> Optional[str]:
        """The syllable's vowel as written, e.g. U+05B7, or vav + U+05BC for shureq.

        A vowel lengthened by a mater is reported without the mater.
        ``None`` if the syllable has no vowel at all.
        """
        nucleus = "".join(p.text for p in self.nucleus)
        if nucleus in hebrew.VOWEL_SPELLINGS:
            return nucleus
        if any(c.is_shureq for c in self.clusters):
            return hebrew.SHUREQ
        match = hebrew.VOWEL_RE.search(self.text)
        return match.group(0) if match else None

    @property
    def vowel_name(self) -> Optional[str]:
        vowel = self.vowel
        return hebrew.VOWEL_SPELLINGS.get(vowel) if vowel else None

    @property
    def vowel_names(self) -> List[str]:
        names = ["SHUREQ" for c in self.clusters if c.is_shureq]
        names.extend(hebrew.VOWEL_SPELLINGS[c.text] for c in self.chars if c.is_vowel)
        return names

    def has_vowel_name(self, name: str) -> bool:
        """Return True if the syllable contains the named vowel.

        A sheva only counts when it is the syllable's vowel, not when it
        is a silent sheva after another vowel.

        :param name: One of the keys of :data:`havarot.utils.hebrew.VOWEL_NAMES`.
        :raises ValueError: for an unknown name.
        """
        if name not in hebrew.VOWEL_NAMES:
            raise ValueError(f"{name!r} is not a valid vowel name")
        if name == "SHUREQ":
            return any(c.is_shureq for c in self.clusters)
        text = self.text
        if name == "SHEVA":
            return hebrew.SHEVA in text and not any(c.has_vowel or c.is_shureq for c in self.clusters)
        return hebrew.VOWEL_NAMES[name] in text
