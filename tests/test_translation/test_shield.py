"""Unit tests for keyword shielding."""

import pytest

from event_translator.translation.shield import (
    make_placeholder,
    shield_keywords,
    unshield_keywords,
)
from tests.constants import FEST_TEXT


@pytest.mark.unit
class TestMakePlaceholder:
    def test_format(self):
        assert make_placeholder(0) == "KW0PLH"
        assert make_placeholder(12) == "KW12PLH"

    def test_short_index_is_not_substring_of_long_index(self):
        assert make_placeholder(1) not in make_placeholder(10)
        assert make_placeholder(1) not in make_placeholder(11)


@pytest.mark.unit
class TestShieldKeywords:
    def test_replaces_each_keyword_with_its_placeholder(self):
        shielded, mapping = shield_keywords(FEST_TEXT, ["Fest", "Lyon"])
        assert shielded == "KW0PLH Location: KW1PLH Details: Fun "
        assert mapping == {"KW0PLH": "Fest", "KW1PLH": "Lyon"}

    def test_replaces_every_occurrence(self):
        shielded, _ = shield_keywords("Acme and Acme and Acme", ["Acme"])
        assert shielded == "KW0PLH and KW0PLH and KW0PLH"

    def test_empty_keyword_list_is_identity(self):
        shielded, mapping = shield_keywords(FEST_TEXT, [])
        assert shielded == FEST_TEXT
        assert mapping == {}

    def test_absent_keyword_is_noop_but_mapped(self):
        shielded, mapping = shield_keywords(FEST_TEXT, ["Paris"])
        assert shielded == FEST_TEXT
        assert mapping == {"KW0PLH": "Paris"}

    def test_first_keyword_wins_overlap(self):
        shielded, _ = shield_keywords("New York City", ["New York", "York City"])
        assert shielded == "KW0PLH City"

    def test_order_is_not_rearranged_by_length(self):
        shielded, _ = shield_keywords("Acme Corp", ["Acme", "Acme Corp"])
        assert shielded == "KW0PLH Corp"

    def test_empty_keyword_raises(self):
        with pytest.raises(ValueError, match="index 1"):
            shield_keywords("text", ["ok", ""])

    def test_is_case_sensitive(self):
        shielded, _ = shield_keywords("fest Fest", ["Fest"])
        assert shielded == "fest KW0PLH"


@pytest.mark.unit
class TestUnshieldKeywords:
    def test_round_trip_restores_text(self):
        text = "Jazz by the Acme Quartet at Blue Room, sponsored by Acme"
        keywords = ["Acme Quartet", "Acme", "Blue Room"]
        shielded, mapping = shield_keywords(text, keywords)
        assert unshield_keywords(shielded, mapping) == text

    def test_empty_mapping_is_identity(self):
        assert unshield_keywords(FEST_TEXT, {}) == FEST_TEXT

    def test_restores_inside_translated_text(self):
        mapping = {"KW0PLH": "Fest", "KW1PLH": "Lyon"}
        translated = "KW0PLH Lieu : KW1PLH Détails : Amusant"
        assert unshield_keywords(translated, mapping) == "Fest Lieu : Lyon Détails : Amusant"

    def test_many_keywords_do_not_clobber_each_other(self):
        keywords = [f"word{i}x" for i in range(12)]
        text = " ".join(keywords)
        shielded, mapping = shield_keywords(text, keywords)
        assert "word" not in shielded
        assert unshield_keywords(shielded, mapping) == text
