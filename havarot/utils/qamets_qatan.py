"""Qamets qatan disambiguation.

The same glyph serves for the long *qamets gadol* (ā) and the short
*qamets qatan* (o).  The short reading occurs in a closed, unaccented
syllable.  This pass recognises a fixed table of contexts where that
is certain and rewrites the qamets (U+05B8) as the dedicated qamets
qatan character (U+05C7).

Matching runs on a view of the word with every cantillation mark
removed; the offset map from :func:`~havarot.utils.hebrew.remove_taamim`
locates the qamets in the original word, whose accents are left
untouched.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Pattern

from .hebrew import (
    QAMATS,
    QAMATS_QATAN,
    cluster_span,
    is_taam,
    is_accent,
    remove_taamim,
    splice,
)

logger = logging.getLogger(__name__)

_CONSONANT = "[א-ת]"
_DOT = "[\u05C1\u05C2]?"
_DAGESH = "\u05BC?"
_PREFIX = "(?:[בוכלמה]\u05BC?[\u05B0\u05B4\u05B7\u05B8]|ו\u05BC)"

# Stems whose first radical takes qamets qatan before a silent sheva,
# given as (first, second, third) radicals.
QATAN_STEMS = [
    ("ק", "ד", "ש"),   # qodesh
    ("ח", "כ", "מ"),   # hokhmah
    ("א", "ז", "נ"),   # ozen
    ("א", "כ", "ל"),   # okhel
    ("ש", "ר", "ש"),   # shoresh
    ("ת", "כ", "נ"),   # tokhen
    ("ג", "ד", "ל"),   # godel
    ("ע", "מ", "ק"),   # omeq
    ("ר", "ח", "ב"),   # rohav
    ("ח", "פ", "ש"),   # hofesh
    ("ח", "ד", "ש"),   # hodesh
    ("א", "מ", "נ"),   # omnam
    ("ע", "נ", "י"),   # oni
    ("ג", "ב", "ה"),   # govah
    ("ח", "ז", "ק"),   # hozqah
    ("צ", "ר", "כ"),   # tsorekh
    ("ט", "ה", "ר"),   # tohar
]


@dataclass(frozen=True)
class QametsQatanRule:
    """A named pattern whose ``q`` group marks the qamets to convert."""

    name: str
    pattern: Pattern[str]
    allow_meteg: bool = False


def _stem_pattern(first: str, second: str, third: str) -> Pattern[str]:
    return re.compile(
        f"{first}{_DAGESH}{_DOT}(?P<q>{QAMATS}){second}{_DOT}\u05B0{third}"
    )


RULES: List[QametsQatanRule] = [
    QametsQatanRule(
        "kol",
        re.compile(f"^{_PREFIX}{{0,2}}כ{_DAGESH}(?P<q>{QAMATS})ל(?=\u05BE|$)"),
    ),
    QametsQatanRule(
        "hatef-qamets",
        re.compile(f"(?P<q>{QAMATS})(?={_CONSONANT}{_DAGESH}{_DOT}\u05B3)"),
        allow_meteg=True,
    ),
    QametsQatanRule(
        "dagesh-lene",
        re.compile(
            f"(?P<q>{QAMATS})(?={_CONSONANT}{_DOT}\u05B0[בגדכפת]\u05BC)"
        ),
    ),
] + [
    QametsQatanRule("stem " + "".join(stem), _stem_pattern(*stem))
    for stem in QATAN_STEMS
]


def _is_accented(word: str, index: int, allow_meteg: bool) -> bool:
    """Return True if the letter carrying ``word[index]`` bears an accent."""
    start, end = cluster_span(word, index)
    marks = word[start:end]
    if allow_meteg:
        return any(is_accent(ch) for ch in marks)
    return any(is_taam(ch) for ch in marks)


def convert_qamets_qatan(word: str) -> str:
    """Return ``word`` with qamets qatan characters where the rule table applies.

    :param word: A single sequenced word (no whitespace).
    :return: The corrected word; unchanged when no rule matches.
    """
    if QAMATS not in word:
        return word

    stripped, positions = remove_taamim(word)
    targets: Dict[int, str] = {}
    for rule in RULES:
        for match in rule.pattern.finditer(stripped):
            idx = match.start("q")
            if idx in targets:
                continue
            if _is_accented(word, positions[idx], rule.allow_meteg):
                logger.debug("Skipping accented qamets in %r (rule %s)", word, rule.name)
                continue
            targets[idx] = rule.name

    for idx in sorted(targets, reverse=True):
        logger.debug("Qamets qatan in %r at %d (rule %s)", word, idx, targets[idx])
        word = splice(word, positions, idx, idx + 1, QAMATS_QATAN)
    return word
