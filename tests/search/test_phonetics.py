import pytest

from koolihub_trips.search import PHONETIC_RULES, normalize_for_phonetics


@pytest.mark.unit
class TestNormalizeForPhonetics:
    @pytest.mark.parametrize(
        "variant,canonical",
        [
            ("Rayachoty", "Rayachoti"),
            ("Tirupathi", "Tirupati"),
            ("Kolkatta", "Kolkata"),
            ("Vizag", "Visag"),
            ("Shimla", "Simla"),
            ("Poona", "Puna"),
        ],
    )
    def test_transliteration_variants_collapse(self, variant, canonical):
        assert normalize_for_phonetics(variant) == normalize_for_phonetics(canonical)

    def test_rayachoty(self):
        assert normalize_for_phonetics("Rayachoty") == "raiacot"

    def test_abad_suffix_is_stripped(self):
        assert normalize_for_phonetics("Hyderabad") == "hider"

    def test_pally_suffix_is_stripped(self):
        assert normalize_for_phonetics("Kukatpally") == "kukat"

    def test_w_folds_to_v(self):
        assert normalize_for_phonetics("Vijayawada") == "vijaiavad"

    def test_trims_and_lowercases(self):
        assert normalize_for_phonetics("  TIRUPATI ") == "tirupat"

    def test_only_one_trailing_vowel_is_removed(self):
        assert normalize_for_phonetics("Ooty") == "ut"

    def test_empty_string(self):
        assert normalize_for_phonetics("") == ""

    def test_rules_apply_in_order(self):
        """Running the same rules backwards gives a different answer for Poona."""
        reversed_result = "poona"
        for pattern, replacement in reversed(PHONETIC_RULES):
            reversed_result = pattern.sub(replacement, reversed_result)

        assert normalize_for_phonetics("Poona") == "pun"
        assert reversed_result == "pon"
