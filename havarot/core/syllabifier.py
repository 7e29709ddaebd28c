"""Syllabification of a word's clusters.

The algorithm runs in three steps:

1. every sheva is classified as vocal (it carries a syllable of its
   own) or silent (it closes the preceding syllable);
2. the clusters are cut into syllables at each nucleus, i.e. a full
   vowel, a shureq or a vocal sheva;
3. each syllable is flagged closed, accented and final.

Words that do not follow ordinary syllabification (the Divine Name,
non-Hebrew runs, isolated punctuation) are returned as one syllable.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Dict, List, Sequence

from ..utils import hebrew
from .cluster import Cluster
from .syllable import Syllable

if TYPE_CHECKING:
    from ..config import SylOptions

logger = logging.getLogger(__name__)

DIVINE_NAME_RE = re.compile("י[\u0591-\u05C7]*ה[\u0591-\u05C7]*ו[\u0591-\u05C7]*ה")

# letters after which a sheva stays vocal when the consecutive-vav dagesh is dropped
SQNMLVY = frozenset("שסצנמלויק")


def is_divine_name(text: str) -> bool:
    return DIVINE_NAME_RE.search(text) is not None


def _is_full_vowel(cluster: Cluster) -> bool:
    return cluster.has_vowel or cluster.is_shureq


# ── Sheva ───────────────────────────────────────────────────────────

def _is_sqnmlvy(cluster: Cluster) -> bool:
    prev = cluster.prev
    consonant = cluster.consonant
    if prev is None or prev.consonant is None or consonant is None:
        return False
    if consonant.text not in SQNMLVY or cluster.has_dagesh:
        return False
    return prev.consonant.text in (hebrew.VAV, hebrew.HE) and hebrew.PATAH in prev.text


def _follows_long_vowel(cluster: Cluster) -> bool:
    prev = cluster.prev
    if prev is None or prev.is_shureq:
        return False
    if prev.has_long_vowel:
        return True
    # a quiescent letter passes on the vowel before it, as in yomru
    if prev.is_mater and prev.prev is not None and prev.prev.has_long_vowel:
        return True
    consonant = prev.consonant
    return (prev.is_mater and consonant is not None
            and consonant.text in (hebrew.YOD, hebrew.VAV))


def _is_vocal_sheva(clusters: Sequence[Cluster], index: int, vocal: Dict[int, bool],
                    options: "SylOptions") -> bool:
    cluster = clusters[index]
    prev = cluster.prev
    nxt = cluster.next

    if not any(_is_full_vowel(c) for c in clusters[index + 1:]):
        return False
    if not any(_is_full_vowel(c) for c in clusters[:index]):
        return True
    if prev is not None and prev.has_sheva and not vocal.get(index - 1, True):
        return True
    if nxt is not None and nxt.has_sheva:
        return False
    if cluster.has_dagesh and prev is not None and (_is_full_vowel(prev) or prev.is_mater):
        return True
    if prev is not None and prev.has_meteg:
        return True
    if options.sqnmlvy and _is_sqnmlvy(cluster):
        return True
    if options.waw_shureq and prev is not None and prev.is_shureq:
        return True
    if options.long_vowels and _follows_long_vowel(cluster):
        return True
    return False


def classify_shevas(clusters: Sequence[Cluster], options: "SylOptions") -> Dict[int, bool]:
    """Map the index of every sheva-bearing cluster to True (vocal) or False (silent).

    Rules are tried in order and the first that applies decides; later
    shevas see the decisions made for earlier ones.
    """
    vocal: Dict[int, bool] = {}
    for index, cluster in enumerate(clusters):
        if cluster.has_sheva and not cluster.has_vowel:
            vocal[index] = _is_vocal_sheva(clusters, index, vocal, options)
    return vocal


# ── Grouping ────────────────────────────────────────────────────────

def _is_bare_consonant(cluster: Cluster) -> bool:
    return (cluster.has_consonant and not cluster.has_vowel and not cluster.has_sheva
            and not cluster.is_shureq and not cluster.is_mater)


def _group(clusters: Sequence[Cluster], nuclei: Sequence[bool]) -> List[List[Cluster]]:
    groups: List[List[Cluster]] = []
    current: List[Cluster] = []
    has_nucleus = False
    for cluster, is_nucleus in zip(clusters, nuclei):
        if is_nucleus and has_nucleus:
            carried: List[Cluster] = []
            # a shureq has no consonant of its own and takes the one before it
            if cluster.is_shureq and current and _is_bare_consonant(current[-1]):
                carried.append(current.pop())
            groups.append(current)
            current = carried
        current.append(cluster)
        has_nucleus = has_nucleus or is_nucleus
    if current:
        groups.append(current)
    return groups


# ── Flags ───────────────────────────────────────────────────────────

def _is_closed(group: Sequence[Cluster], nuclei: Sequence[bool],
               following: Sequence[Cluster], is_last: bool) -> bool:
    nucleus_at = next((i for i, flag in enumerate(nuclei) if flag), None)
    if nucleus_at is None:
        return False
    for cluster in group[nucleus_at + 1:]:
        if cluster.has_consonant and not cluster.is_mater:
            return True
    if is_last:
        trailing = group[nucleus_at:]
        for offset, cluster in enumerate(trailing):
            if cluster.has_furtive_patah and all(
                c.is_not_hebrew or c.is_punctuation for c in trailing[offset + 1:]
            ):
                return True
    if following and _is_full_vowel(group[nucleus_at]):
        first = following[0]
        return first.has_dagesh and not first.is_shureq
    return False


def _accented_index(groups: Sequence[Sequence[Cluster]]) -> int:
    for index in range(len(groups) - 1, -1, -1):
        taamim = [t for c in groups[index] for t in c.taamim]
        if any(t not in hebrew.PREPOSITIVE_ACCENTS for t in taamim):
            return index
    return len(groups) - 1


# ── Entry point ─────────────────────────────────────────────────────

def _single_syllable(clusters: Sequence[Cluster]) -> List[Syllable]:
    return [Syllable(clusters, is_accented=True, is_final=True, is_fallback=True)]


def syllabify(clusters: Sequence[Cluster], options: "SylOptions") -> List[Syllable]:
    """Cut a word's clusters into flagged syllables.

    :param clusters: The linked clusters of one word.
    :param options: Sheva options controlling the vocal/silent decision.
    :return: The syllables in order; at least one for a non-empty word.
    """
    if not clusters:
        return []
    text = "".join(c.text for c in clusters)
    if is_divine_name(text) or not any(c.has_consonant for c in clusters):
        logger.debug("Single syllable for %r", text)
        return _single_syllable(clusters)

    vocal = classify_shevas(clusters, options)
    nuclei = [_is_full_vowel(c) or vocal.get(i, False) for i, c in enumerate(clusters)]
    if not any(nuclei):
        logger.debug("No vowel in %r, keeping a single syllable", text)
        return _single_syllable(clusters)

    groups = _group(clusters, nuclei)
    flags: List[List[bool]] = []
    start = 0
    for group in groups:
        flags.append(nuclei[start:start + len(group)])
        start += len(group)

    accented = _accented_index(groups)
    last = len(groups) - 1
    syllables = []
    for index, group in enumerate(groups):
        following = groups[index + 1] if index < last else []
        syllables.append(Syllable(
            group,
            is_closed=_is_closed(group, flags[index], following, index == last),
            is_accented=index == accented,
            is_final=index == last,
        ))
    return syllables
