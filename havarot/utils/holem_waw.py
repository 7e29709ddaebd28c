"""Holem-waw disambiguation.

A vav carrying a holem is either a consonantal vav pronounced *vo*
(*mitsvot*) or the holem male vowel of the preceding consonant
(*shalom*).  Decomposed text always places the holem on the vav, so
when the preceding letter has no vowel of its own the holem is moved
onto that letter and the vav is left as a bare mater lectionis.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .hebrew import HOLAM, HOLAM_HASER, VAV, remove_taamim, splice

logger = logging.getLogger(__name__)

# vav + holem whose previous character is a letter, dagesh, rafe or shin/sin dot
_WAW_HOLEM = re.compile(r"(?<=[א-ת\u05BC\u05BF\u05C1\u05C2])ו\u05B9")


def holem_waw(word: str, holem_haser: Optional[str] = None) -> str:
    """Move the holem of a holem-waw onto the preceding consonant.

    :param word: A single sequenced word.
    :param holem_haser: ``"remove"`` replaces holam haser for vav
        (U+05BA) by a plain holem before matching.
    :return: The corrected word; unchanged when no holem-waw is found.
    """
    if holem_haser == "remove" and HOLAM_HASER in word:
        word = word.replace(HOLAM_HASER, HOLAM)

    if VAV + HOLAM not in word:
        return word

    stripped, positions = remove_taamim(word)
    matches = list(_WAW_HOLEM.finditer(stripped))
    for match in reversed(matches):
        logger.debug("Holem-waw in %r at %d", word, match.start())
        word = splice(word, positions, match.start(), match.end(), HOLAM + VAV)
    return word
