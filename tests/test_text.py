"""Tests for finding part numbers in free text."""

import pytest

from mpn_resolver import engine
from mpn_resolver.text import candidate_words, clean_word


class TestCleanWord:
    @pytest.mark.parametrize("word,expected", [
        ("P/N:BAV99", "BAV99"),
        ("MPN:LM358DR", "LM358DR"),
        ("mpn=lm358dr", "LM358DR"),
        ("IC-LM7805CT", "LM7805CT"),
        ("BAV99-SMD", "BAV99"),
        ("BAV99-ROHS", "BAV99"),
        ("(PMBT2222A)", "PMBT2222A"),
        ("ITEM:R1", "R1"),
    ])
    def test_clean(self, word, expected):
        assert clean_word(word) == expected

    def test_candidate_words_skip_short_tokens(self):
        assert candidate_words("U3; R1 | LM358DR, C5") == ["LM358DR"]


class TestFindMpnInText:
    @pytest.mark.parametrize("text,expected", [
        ("U3 P/N: LM358DR; op-amp", "LM358DR"),
        ("MPN:BAV99-SMD qty 10", "BAV99"),
        ("mpn=PMBT2222A qty=100", "PMBT2222A"),
        ("REF:R1 RC0603FR-0710KL 10k 1%", "RC0603FR-0710KL"),
        ("header|61300211121|2 pin", "61300211121"),
    ])
    def test_found(self, text, expected):
        assert engine.find_mpn_in_text(text) == expected

    def test_manufacturer_pattern_preferred_over_generic(self):
        """2N2222 only matches a generic pattern; BAV99 has manufacturer entries."""
        assert engine.find_mpn_in_text("use 2N2222 or BAV99") == "BAV99"

    def test_generic_fallback(self):
        assert engine.find_mpn_in_text("use 2N2222 here") == "2N2222"

    @pytest.mark.parametrize("text", [None, "", "hello world", "10k 1% 0603"])
    def test_not_found(self, text):
        assert engine.find_mpn_in_text(text) is None
