"""Orthographic clusters.

A cluster is one consonant together with every mark written on it
(dagesh, shin/sin dot, vowel, cantillation), or a run of non-Hebrew
characters.  Clusters are the units the syllabifier works with; the
flags below answer the questions it asks of each one.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from ..utils import hebrew
from .char import Char
from .sequence import sequence

MATRES = frozenset({hebrew.ALEF, hebrew.HE, hebrew.VAV, hebrew.YOD})
FURTIVE_LETTERS = frozenset({hebrew.HET, hebrew.AYIN})


class Cluster:
    """A consonant and its marks, or a run of non-Hebrew characters.

    :param chars: Either a string, which is sequenced first, or an
        already sequenced list of :class:`Char`.
    """

    def __init__(self, chars: Union[str, Sequence[Char]]) -> None:
        if isinstance(chars, str):
            chars = [c for run in sequence(chars) for c in run]
        self.chars: List[Char] = list(chars)
        self.prev: Optional[Cluster] = None
        self.next: Optional[Cluster] = None

    def __repr__(self) -> str:
        return f"Cluster({self.text!r})"

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.chars)

    def _has(self, options) -> bool:
        return any(c.text in options for c in self.chars)

    # ── Consonants ──────────────────────────────────────────────────

    @property
    def consonant(self) -> Optional[Char]:
        """The cluster's base consonant, if it has one."""
        return next((c for c in self.chars if c.is_consonant), None)

    @property
    def has_consonant(self) -> bool:
        return self.consonant is not None

    @property
    def has_dagesh(self) -> bool:
        return self._has({hebrew.DAGESH})

    # ── Vowels ──────────────────────────────────────────────────────

    @property
    def has_long_vowel(self) -> bool:
        return self._has(hebrew.LONG_VOWELS)

    @property
    def has_short_vowel(self) -> bool:
        return self._has(hebrew.SHORT_VOWELS)

    @property
    def has_half_vowel(self) -> bool:
        return self._has(hebrew.HALF_VOWELS)

    @property
    def has_vowel(self) -> bool:
        """True for any vowel point other than sheva."""
        return self.has_long_vowel or self.has_short_vowel or self.has_half_vowel

    @property
    def has_sheva(self) -> bool:
        return self._has({hebrew.SHEVA})

    @property
    def is_shureq(self) -> bool:
        """A vav with dagesh acting as the vowel *u*.

        The vav must carry no vowel or sheva of its own and the previous
        cluster must not have a vowel (otherwise it is a doubled vav).
        """
        if self.has_vowel or self.has_sheva:
            return False
        if hebrew.SHUREQ not in self.text:
            return False
        return not (self.prev is not None and self.prev.has_vowel)

    @property
    def is_mater(self) -> bool:
        """A bare alef, he, vav or yod lengthening the preceding vowel."""
        consonant = self.consonant
        if consonant is None or consonant.text not in MATRES:
            return False
        if self.has_vowel or self.has_sheva or self.has_dagesh or self.is_shureq:
            return False
        if any(c.is_ligature for c in self.chars):
            return False
        if self.prev is None or not (self.prev.has_vowel or self.prev.is_shureq):
            return False
        # a vav mater only follows holem or shureq
        if consonant.text == hebrew.VAV and not (
            self.prev.is_shureq or hebrew.HOLAM in self.prev.text or hebrew.HOLAM_HASER in self.prev.text
        ):
            return False
        return not (self.next is not None and self.next.is_shureq)

    # ── Marks ───────────────────────────────────────────────────────

    @property
    def has_meteg(self) -> bool:
        return self._has({hebrew.METEG})

    @property
    def taamim(self) -> List[str]:
        """The cantillation accents written on this cluster."""
        return [c.text for c in self.chars if hebrew.is_accent(c.text)]

    @property
    def has_taamim(self) -> bool:
        return bool(self.taamim)

    @property
    def is_punctuation(self) -> bool:
        return bool(self.chars) and all(c.is_punctuation for c in self.chars)

    @property
    def is_not_hebrew(self) -> bool:
        return not any(c.is_hebrew for c in self.chars)

    @property
    def has_furtive_patah(self) -> bool:
        """A het or ayin, or a he with mapiq, whose only vowel is patah.

        Whether the patah is really furtive also depends on the cluster
        ending its word; callers check that.
        """
        consonant = self.consonant
        if consonant is None:
            return False
        vowels = [c.text for c in self.chars if c.is_vowel]
        if vowels != [hebrew.PATAH]:
            return False
        if consonant.text == hebrew.HE:
            return self.has_dagesh
        return consonant.text in FURTIVE_LETTERS and not self.has_dagesh


def _is_base_of_new_cluster(char: Char, current: Optional[List[Char]]) -> bool:
    if current is None or char.is_consonant or char.is_punctuation:
        return True
    # non-Hebrew characters run together until something Hebrew interrupts them
    base = current[0]
    return not (base.is_not_hebrew and not base.is_punctuation and char.is_not_hebrew)


def build_clusters(text: str) -> List[Cluster]:
    """Group the characters of one word into linked clusters.

    A new cluster starts at each consonant, at each punctuation mark
    and at the start of a run of non-Hebrew characters; marks join the
    cluster before them.  A second vowel point on the same consonant
    (as in the patah-hiriq spelling of Jerusalem) starts a vowel-only
    cluster.

    :param text: A single word.
    :return: Clusters in text order, linked through ``prev``/``next``.
    """
    groups: List[List[Char]] = []
    current: Optional[List[Char]] = None
    for run in sequence(text):
        base, marks = run[0], run[1:]
        if base.is_mark:
            marks = run
        elif _is_base_of_new_cluster(base, current):
            current = [base]
            groups.append(current)
        else:
            current.append(base)
        for mark in marks:
            if current is None or (mark.is_vowel and any(c.is_vowel for c in current)):
                current = [mark]
                groups.append(current)
            else:
                current.append(mark)

    clusters = [Cluster(group) for group in groups]
    for prev, nxt in zip(clusters, clusters[1:]):
        prev.next = nxt
        nxt.prev = prev
    return clusters
