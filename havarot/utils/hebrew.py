"""Hebrew text utilities.

Functions in this module operate on decomposed Unicode Hebrew strings,
particularly those containing cantillation marks (te'amim) and vowels
(niqqud).  They provide the character lookup table used by the
sequencer, the word splitter used by :class:`~havarot.core.text.Text`
and the cantillation-stripped view shared by the correction passes.

Unicode ranges used:
    Trope marks (te'amim): U+0591 – U+05AF
    Vowels (niqqud):       U+05B0 – U+05BB, U+05C7
    Dagesh / Rafe:         U+05BC, U+05BF
    Shin / Sin dots:       U+05C1 – U+05C2
    Hebrew letters:        U+05D0 – U+05F2
"""

from __future__ import annotations

import re
import unicodedata
from typing import List, Tuple


# ── Unicode constants ───────────────────────────────────────────────

SHEVA        = '\u05B0'
HATAF_SEGOL  = '\u05B1'
HATAF_PATAH  = '\u05B2'
HATAF_QAMATS = '\u05B3'
HIRIQ        = '\u05B4'
TSERE        = '\u05B5'
SEGOL        = '\u05B6'
PATAH        = '\u05B7'
QAMATS       = '\u05B8'
HOLAM        = '\u05B9'
HOLAM_HASER  = '\u05BA'   # holam haser for vav
QUBUTS       = '\u05BB'
QAMATS_QATAN = '\u05C7'

DAGESH   = '\u05BC'       # also mapiq and the dot of shureq
METEG    = '\u05BD'
MAQAF    = '\u05BE'
RAFE     = '\u05BF'
PASEQ    = '\u05C0'
SHIN_DOT = '\u05C1'
SIN_DOT  = '\u05C2'
SOF_PASUQ = '\u05C3'
UPPER_DOT = '\u05C4'
LOWER_DOT = '\u05C5'
NUN_HAFUKHA = '\u05C6'
GERESH_PUNCT = '׳'
GERSHAYIM_PUNCT = '״'

ALEF = 'א'
HE   = 'ה'
VAV  = 'ו'
HET  = 'ח'
YOD  = 'י'
AYIN = 'ע'

# Prepositive accents sit on the first letter of a word whatever its stress.
YETIV          = '\u059A'
TELISHA_GEDOLA = '\u05A0'
DEHI           = '\u05AD'
PREPOSITIVE_ACCENTS = frozenset({YETIV, TELISHA_GEDOLA, DEHI})

SHUREQ = VAV + DAGESH

VOWEL_POINTS = frozenset(
    chr(cp) for cp in range(0x05B0, 0x05BC)
) | {QAMATS_QATAN}
LONG_VOWELS = frozenset({TSERE, QAMATS, HOLAM, HOLAM_HASER})
SHORT_VOWELS = frozenset({HIRIQ, SEGOL, PATAH, QUBUTS, QAMATS_QATAN})
HALF_VOWELS = frozenset({HATAF_SEGOL, HATAF_PATAH, HATAF_QAMATS})
HEBREW_PUNCTUATION = frozenset({MAQAF, PASEQ, SOF_PASUQ, NUN_HAFUKHA,
                                GERESH_PUNCT, GERSHAYIM_PUNCT})

# Vowel names accepted by Syllable.has_vowel_name
VOWEL_NAMES = {
    "SHEVA": SHEVA,
    "HATAF_SEGOL": HATAF_SEGOL,
    "HATAF_PATAH": HATAF_PATAH,
    "HATAF_QAMATS": HATAF_QAMATS,
    "HIRIQ": HIRIQ,
    "TSERE": TSERE,
    "SEGOL": SEGOL,
    "PATAH": PATAH,
    "QAMATS": QAMATS,
    "HOLAM": HOLAM,
    "HOLAM_HASER": HOLAM_HASER,
    "QUBUTS": QUBUTS,
    "QAMATS_QATAN": QAMATS_QATAN,
    "SHUREQ": SHUREQ,
}
VOWEL_SPELLINGS = {spelling: name for name, spelling in VOWEL_NAMES.items()}

VOWEL_RE = re.compile("[\u05B0-\u05BB\u05C7]")
# vowel points plus the dot of shureq, which is the only vowel of words like hu
NIQQUD_RE = re.compile("[\u05B0-\u05BC\u05C7]")

# ── Sequence classes ────────────────────────────────────────────────

CONSONANT_CLASS = 0
DAGESH_CLASS = 1
LIGATURE_CLASS = 2
VOWEL_CLASS = 3
TAAM_CLASS = 4
OTHER_CLASS = 10


def sequence_class(ch: str) -> int:
    """Return the sequence class of a single character.

    Consonants sort first, followed by dagesh/mapiq/rafe, the shin and
    sin dots, vowel points and finally cantillation marks (meteg and
    the upper/lower dots included).  Everything else is trailing.
    """
    cp = ord(ch)
    if 0x05D0 <= cp <= 0x05F2:
        return CONSONANT_CLASS
    if ch in (DAGESH, RAFE):
        return DAGESH_CLASS
    if ch in (SHIN_DOT, SIN_DOT):
        return LIGATURE_CLASS
    if ch in VOWEL_POINTS:
        return VOWEL_CLASS
    if 0x0591 <= cp <= 0x05AF or ch in (METEG, UPPER_DOT, LOWER_DOT):
        return TAAM_CLASS
    return OTHER_CLASS


def is_hebrew_letter(ch: str) -> bool:
    """Return True if the character is a Hebrew base letter (not a mark)."""
    return sequence_class(ch) == CONSONANT_CLASS


def is_hebrew(ch: str) -> bool:
    """Return True for any character of the Hebrew block or its presentation forms."""
    cp = ord(ch)
    return 0x0590 <= cp <= 0x05FF or 0xFB1D <= cp <= 0xFB4F


def is_mark(ch: str) -> bool:
    """Return True if the character attaches to a preceding base character."""
    return unicodedata.category(ch).startswith("M")


def is_taam(ch: str) -> bool:
    return sequence_class(ch) == TAAM_CLASS


def is_accent(ch: str) -> bool:
    """Cantillation accents proper, i.e. without meteg and the dots."""
    return 0x0591 <= ord(ch) <= 0x05AE


def is_punctuation(ch: str) -> bool:
    return ch in HEBREW_PUNCTUATION or unicodedata.category(ch).startswith("P")


def has_niqqud(text: str) -> bool:
    """Return True if ``text`` contains at least one vowel point or dagesh."""
    return NIQQUD_RE.search(text) is not None


def strip_marks(text: str) -> str:
    """Remove every combining mark, leaving base characters only."""
    return "".join(ch for ch in text if not is_mark(ch))


# ── Word splitting ──────────────────────────────────────────────────

# A maqaf stays attached to the word before it.
_WORD_RE = re.compile(r"([^\s\u05BE]*\u05BE|[^\s\u05BE]+)(\s*)")


def split_words(text: str) -> List[Tuple[str, str]]:
    """Split text into ``(word, whitespace_after)`` pairs.

    Words are separated by whitespace and after a maqaf; the maqaf
    itself is kept at the end of the word it follows.  Leading
    whitespace is dropped.
    """
    return [(m.group(1), m.group(2)) for m in _WORD_RE.finditer(text)]


# ── Cantillation-stripped view ──────────────────────────────────────

def remove_taamim(word: str) -> Tuple[str, List[int]]:
    """Return ``word`` without cantillation marks plus an offset map.

    ``positions[i]`` is the index in ``word`` of the i-th character of
    the stripped view.  A sentinel equal to ``len(word)`` is appended so
    that exclusive end offsets can be mapped as well.
    """
    kept: List[str] = []
    positions: List[int] = []
    for idx, ch in enumerate(word):
        if is_taam(ch):
            continue
        kept.append(ch)
        positions.append(idx)
    positions.append(len(word))
    return "".join(kept), positions


def splice(word: str, positions: List[int], start: int, end: int, replacement: str) -> str:
    """Replace the original span behind stripped-view ``[start, end)``.

    Cantillation marks found inside the original span are re-appended
    after ``replacement`` so that no accent is lost.
    """
    orig_start = positions[start]
    orig_end = positions[end - 1] + 1 if end > start else orig_start
    inner_taamim = "".join(ch for ch in word[orig_start:orig_end] if is_taam(ch))
    return word[:orig_start] + replacement + inner_taamim + word[orig_end:]


def cluster_span(word: str, index: int) -> Tuple[int, int]:
    """Return the ``[start, end)`` span of the letter and marks around ``index``."""
    start = index
    while start > 0 and is_mark(word[start]):
        start -= 1
    end = index + 1
    while end < len(word) and is_mark(word[end]):
        end += 1
    return start, end
