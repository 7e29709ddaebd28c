"""Core syllabification model: characters, clusters, syllables, words and texts."""

from .char import Char
from .cluster import Cluster, build_clusters
from .sequence import sequence, sequence_text
from .syllabifier import syllabify
from .syllable import Syllable, SyllableStructureError
from .syllable_part import ConsonantRole, PartKind, SyllablePart
from .text import Text, TextValidationError
from .word import Word

__all__ = [
    "Char",
    "Cluster",
    "ConsonantRole",
    "PartKind",
    "Syllable",
    "SyllablePart",
    "SyllableStructureError",
    "Text",
    "TextValidationError",
    "Word",
    "build_clusters",
    "sequence",
    "sequence_text",
    "syllabify",
]
