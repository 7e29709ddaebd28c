"""Canonical ordering of Hebrew combining marks.

Unicode normalisation orders marks by combining class, which puts
most vowel points *before* the dagesh (a bet with patah and dagesh
decomposes as bet, patah, dagesh).  Every rule downstream assumes the Masoretic order
instead: consonant, dagesh, shin/sin dot, vowel, cantillation.  The
functions here re-sequence each run of marks into that order with a
stable sort so that ties keep their original order.
"""

from __future__ import annotations

from typing import List

from ..utils import hebrew
from .char import Char


def _sort_marks(marks: List[Char]) -> List[Char]:
    ordered = sorted(marks, key=lambda c: c.sequence_position)
    texts = [c.text for c in ordered]
    # Jerusalem is spelled with patah and hiriq on the lamed; the patah is read first
    if hebrew.HIRIQ in texts and hebrew.PATAH in texts:
        hiriq = texts.index(hebrew.HIRIQ)
        patah = texts.index(hebrew.PATAH)
        if hiriq < patah:
            ordered.insert(hiriq, ordered.pop(patah))
    return ordered


def sequence(text: str) -> List[List[Char]]:
    """Split ``text`` into runs of a base character and its marks.

    Each run starts with a base character (anything that is not a
    combining mark) followed by the marks attached to it, sorted by
    sequence class.  Marks at the very start of the string, with no
    base to attach to, form a run of their own.

    :param text: A decomposed (NFD/NFKD) string.
    :return: List of runs, each a list of :class:`Char`.
    """
    runs: List[List[Char]] = []
    for ch in text:
        char = Char(ch)
        if char.is_mark and runs:
            runs[-1].append(char)
        else:
            runs.append([char])

    sequenced: List[List[Char]] = []
    for run in runs:
        if run[0].is_mark:
            sequenced.append(_sort_marks(run))
        else:
            sequenced.append([run[0]] + _sort_marks(run[1:]))
    return sequenced


def sequence_text(text: str) -> str:
    """Return ``text`` with every run of marks in canonical order."""
    return "".join(c.text for run in sequence(text) for c in run)
