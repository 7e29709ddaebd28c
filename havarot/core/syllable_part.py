"""Typed parts of a syllable.

A syllable's characters are decomposed into four kinds of parts:
consonants, vowels, other Hebrew marks (cantillation, punctuation,
a silent sheva) and non-Hebrew characters.  Consonants additionally
record their role in the syllable, i.e. onset, coda, or a coda
borrowed from the doubled onset of the following syllable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from .char import Char

if TYPE_CHECKING:
    from .syllable import Syllable


class PartKind(str, Enum):
    CONSONANT = "C"
    VOWEL = "V"
    HEBREW_MARK = "H"
    NON_HEBREW = "N"


class ConsonantRole(str, Enum):
    ONSET = "OC"
    CODA = "CC"
    CODA_GEMINATION = "CGC"


@dataclass(frozen=True)
class SyllablePart:
    """One consonant, vowel, mark or non-Hebrew part of a syllable.

    :param kind: The part's :class:`PartKind`.
    :param chars: The characters making up the part, in text order.
        A vowel lengthened by a mater lectionis also holds the mater.
    :param role: For consonants only, the :class:`ConsonantRole`.
    :param syllable: The owning syllable; ignored by equality.
    """

    kind: PartKind
    chars: Tuple[Char, ...]
    role: Optional[ConsonantRole] = None
    syllable: Optional["Syllable"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if (self.kind is PartKind.CONSONANT) != (self.role is not None):
            raise ValueError(f"Only consonant parts carry a role, got {self.kind} with {self.role}")

    # ── Factories ───────────────────────────────────────────────────

    @classmethod
    def consonant(cls, chars: Iterable[Char], role: ConsonantRole,
                  syllable: Optional["Syllable"] = None) -> "SyllablePart":
        return cls(PartKind.CONSONANT, tuple(chars), role, syllable)

    @classmethod
    def vowel(cls, chars: Iterable[Char], syllable: Optional["Syllable"] = None) -> "SyllablePart":
        return cls(PartKind.VOWEL, tuple(chars), None, syllable)

    @classmethod
    def hebrew_mark(cls, chars: Iterable[Char], syllable: Optional["Syllable"] = None) -> "SyllablePart":
        return cls(PartKind.HEBREW_MARK, tuple(chars), None, syllable)

    @classmethod
    def non_hebrew(cls, chars: Iterable[Char], syllable: Optional["Syllable"] = None) -> "SyllablePart":
        return cls(PartKind.NON_HEBREW, tuple(chars), None, syllable)

    # ── Accessors ───────────────────────────────────────────────────

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.chars)

    @property
    def is_consonant(self) -> bool:
        return self.kind is PartKind.CONSONANT

    @property
    def is_vowel(self) -> bool:
        return self.kind is PartKind.VOWEL

    @property
    def part_of_onset(self) -> bool:
        return self.role is ConsonantRole.ONSET

    @property
    def part_of_coda(self) -> bool:
        return self.role in (ConsonantRole.CODA, ConsonantRole.CODA_GEMINATION)

    @property
    def from_gemination(self) -> bool:
        """True if the consonant doubles the onset of the next syllable."""
        return self.role is ConsonantRole.CODA_GEMINATION
