"""Tests for the qamets qatan and holem waw correction passes."""

from __future__ import annotations

import unicodedata

import pytest

from havarot.core.sequence import sequence_text
from havarot.utils.hebrew import (
    HOLAM,
    HOLAM_HASER,
    QAMATS,
    QAMATS_QATAN,
    cluster_span,
    is_taam,
    remove_taamim,
    splice,
    split_words,
)
from havarot.utils.holem_waw import holem_waw
from havarot.utils.qamets_qatan import convert_qamets_qatan


def _seq(text: str) -> str:
    return sequence_text(unicodedata.normalize("NFKD", text))


def _taamim(text: str) -> str:
    return "".join(ch for ch in text if is_taam(ch))


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


class TestStrippedView:
    def test_remove_taamim_maps_offsets(self):
        stripped, positions = remove_taamim("ב֖ר֣")
        assert stripped == "בר"
        assert positions == [0, 2, 4]

    def test_remove_taamim_drops_meteg(self):
        stripped, _ = remove_taamim("הַֽי")
        assert stripped == "הַי"

    def test_splice_keeps_inner_taamim(self):
        word = "אָ֖ב"
        stripped, positions = remove_taamim(word)
        assert stripped == "אָב"
        # replace the qamets and the bet; the accent between them survives
        assert splice(word, positions, 1, 3, "XY") == "אXY֖"

    def test_cluster_span(self):
        word = "שָׁלום"
        assert cluster_span(word, 2) == (0, 3)
        assert cluster_span(word, 3) == (3, 4)


class TestSplitWords:
    def test_whitespace_is_kept_per_word(self):
        assert split_words("אב  גד\n") == [("אב", "  "), ("גד", "\n")]

    def test_maqaf_stays_with_preceding_word(self):
        assert split_words("כל־הארץ") == [("כל־", ""), ("הארץ", "")]


# ---------------------------------------------------------------------------
# Qamets qatan
# ---------------------------------------------------------------------------


class TestQametsQatan:
    @pytest.mark.parametrize("word", [
        "כָּל",
        "כָּל־",
        "וְכָל־",
        "בְּכָל",
    ])
    def test_kol(self, word):
        result = convert_qamets_qatan(_seq(word))
        assert QAMATS_QATAN in result
        assert QAMATS not in result

    def test_kol_inside_longer_word_is_not_converted(self):
        word = _seq("כָּלָה")
        assert convert_qamets_qatan(word) == word

    def test_accented_kol_is_not_converted(self):
        word = _seq("כָּ֣ל")
        assert convert_qamets_qatan(word) == word

    def test_before_hatef_qamets(self):
        result = convert_qamets_qatan(_seq("צָהֳרַיִם"))
        assert result == _seq("צׇהֳרַיִם")

    def test_before_dagesh_lene(self):
        result = convert_qamets_qatan(_seq("אָבְדָּן"))
        assert result == _seq("אׇבְדָּן")

    @pytest.mark.parametrize("word, expected", [
        ("קָדְשֵׁ֧י", "קׇדְשֵׁ֧י"),
        ("חָכְמָה", "חׇכְמָה"),
        ("אָזְנְךָ", "אׇזְנְךָ"),
    ])
    def test_qatan_stems(self, word, expected):
        assert convert_qamets_qatan(_seq(word)) == _seq(expected)

    def test_taamim_are_preserved(self):
        word = _seq("קָדְשֵׁ֧י")
        result = convert_qamets_qatan(word)
        assert _taamim(result) == _taamim(word)
        assert len(result) == len(word)

    @pytest.mark.parametrize("word", ["דָּבָר", "שָׁמְרוּ", "מֶלֶךְ"])
    def test_no_match_leaves_word_unchanged(self, word):
        word = _seq(word)
        assert convert_qamets_qatan(word) == word


# ---------------------------------------------------------------------------
# Holem waw
# ---------------------------------------------------------------------------


class TestHolemWaw:
    def test_holem_moves_to_preceding_consonant(self):
        result = holem_waw(_seq("שָׁלוֹם"))
        assert result == _seq("שָׁלֹום")

    def test_consonantal_vav_is_kept(self):
        word = _seq("מִצְוֹת")
        assert holem_waw(word) == word

    def test_after_dagesh(self):
        result = sequence_text(holem_waw(_seq("בַּיּ֣וֹם")))
        assert result == _seq("בַּיֹּ֣ום")

    def test_doubled_vav(self):
        result = sequence_text(holem_waw(_seq("הַוּֽוֹת׃")))
        assert result == _seq("הַוֹּֽות׃")

    def test_holem_haser_is_normalised_on_request(self):
        word = "מִצְו" + HOLAM_HASER + "ת"
        assert holem_waw(word) == word
        assert holem_waw(word, holem_haser="remove") == "מִצְו" + HOLAM + "ת"

    def test_word_without_holem_waw(self):
        word = _seq("דָּבָר")
        assert holem_waw(word) == word
