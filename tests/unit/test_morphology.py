"""
Unit tests for keyphrase morphology (word forms and dehyphenation).
"""

import pytest
from seo_research.language.morphology import (
    KeyphraseForms,
    build_topic_forms,
    dehyphenate_keyphrase_forms,
    is_exact_match,
    split_keyphrase,
    word_forms,
)
from seo_research.language.rules import DEFAULT_MORPHOLOGY_RULES

pytestmark = pytest.mark.unit

ENGLISH = DEFAULT_MORPHOLOGY_RULES["en"]


class TestWordForms:
    """Test per-word form generation"""

    def test_english_plural_and_possessive(self):
        """Test plural and possessive forms of a -y noun"""
        assert word_forms("gallery", ENGLISH) == ("gallery", "galleries", "gallery's")

    def test_sibilant_plural(self):
        """Test that words ending in x take -es, not -s"""
        forms = word_forms("box", ENGLISH)
        assert forms[0] == "box"
        assert "boxes" in forms
        assert "boxs" not in forms

    def test_word_itself_is_first_form(self):
        """Test that the keyphrase word always comes first"""
        for word in ["pop", "art", "exhibits", "gallery"]:
            assert word_forms(word, ENGLISH)[0] == word

    def test_forms_share_stem(self):
        """Test that candidates with a different stem are dropped"""
        forms = word_forms("pop", ENGLISH)
        assert "pops" in forms
        assert "popes" not in forms

    def test_no_rules_literal_word_only(self):
        """Test identity forms without rules"""
        assert word_forms("gallery", None) == ("gallery",)

    def test_deterministic(self):
        """Test same input gives the same forms in the same order"""
        assert word_forms("exhibit", ENGLISH) == word_forms("exhibit", ENGLISH)


class TestBuildTopicForms:
    """Test keyphrase and synonyms expansion"""

    def test_one_group_per_word(self):
        """Test one word group per content word"""
        forms = build_topic_forms("pop art exhibit", rules=ENGLISH)
        assert len(forms.keyphrase_forms) == 3
        assert [group[0] for group in forms.keyphrase_forms] == ["pop", "art", "exhibit"]

    def test_unsupported_locale_fallback(self):
        """Test lowercased literal words when no rules exist"""
        forms = build_topic_forms("Pop Art", rules=None, locale="xx_XX")
        assert forms.keyphrase_forms == (("pop",), ("art",))

    def test_synonyms(self):
        """Test blank synonyms skipped, others expanded per word"""
        forms = build_topic_forms("pop art", ["modern art", " ", "street art"])
        assert forms.synonyms_forms == (
            (("modern",), ("art",)),
            (("street",), ("art",)),
        )

    def test_function_words_dropped(self):
        """Test function words removed from the keyphrase"""
        forms = build_topic_forms("the art of pop", rules=ENGLISH)
        assert [group[0] for group in forms.keyphrase_forms] == ["art", "pop"]

    def test_only_function_words_kept(self):
        """Test keyphrase of only function words is kept as is"""
        forms = build_topic_forms("the", rules=ENGLISH)
        assert forms.keyphrase_forms[0][0] == "the"

    def test_exact_match_keyphrase(self):
        """Test quoted keyphrase becomes a single literal group"""
        forms = build_topic_forms('"Pop Art"', rules=ENGLISH)
        assert forms.keyphrase_forms == (("pop art",),)

    def test_empty_keyphrase(self):
        """Test empty keyphrase gives no word groups"""
        forms = build_topic_forms("", rules=ENGLISH)
        assert forms.keyphrase_forms == ()
        assert forms.synonyms_forms == ()

    def test_html_in_keyphrase_ignored(self):
        """Test markup removed before splitting"""
        forms = build_topic_forms("<b>pop</b> art")
        assert forms.keyphrase_forms == (("pop",), ("art",))

    def test_to_dict_shape(self):
        """Test camelCase dict output"""
        forms = build_topic_forms("pop art", ["modern art"])
        assert forms.to_dict() == {
            "keyphraseForms": [["pop"], ["art"]],
            "synonymsForms": [[["modern"], ["art"]]],
        }

    def test_japanese_keyphrase_split_on_whitespace(self):
        """Test Japanese keyphrase words separated by spaces"""
        forms = build_topic_forms("ポップ アート", locale="ja")
        assert forms.keyphrase_forms == (("ポップ",), ("アート",))


class TestKeyphraseHelpers:
    """Test exact-match detection and keyphrase splitting"""

    @pytest.mark.parametrize("keyphrase,expected", [
        ('"pop art"', True),
        ("“pop art”", True),
        ("pop art", False),
        ('"pop art', False),
    ])
    def test_is_exact_match(self, keyphrase, expected):
        """Test straight and typographic double quotes"""
        assert is_exact_match(keyphrase) is expected

    def test_split_keyphrase(self):
        """Test lowercasing, punctuation removal, hyphens kept"""
        assert split_keyphrase("Pop-Art  Exhibits!") == ["pop-art", "exhibits"]


class TestDehyphenation:
    """Test hyphen splitting of keyphrase forms for slug matching"""

    def test_compounds_become_groups(self):
        """Test each compound becomes its own group"""
        forms = KeyphraseForms(keyphrase_forms=(("pop-art",), ("exhibit",)))
        result = dehyphenate_keyphrase_forms(forms)
        assert result.keyphrase_forms == (("pop",), ("art",), ("exhibit",))

    def test_every_form_split_in_order(self):
        """Test compounds of every form, in order, without de-duplication"""
        forms = KeyphraseForms(keyphrase_forms=(("pop-art", "pop-arts"),))
        result = dehyphenate_keyphrase_forms(forms)
        assert result.keyphrase_forms == (("pop",), ("art",), ("pop",), ("arts",))

    def test_english_hyphenated_keyphrase(self):
        """Test English forms pop-art, pop-arts, pop-art's give six groups"""
        forms = build_topic_forms("pop-art", rules=ENGLISH)
        assert forms.keyphrase_forms == (("pop-art", "pop-arts", "pop-art's"),)

        result = dehyphenate_keyphrase_forms(forms)

        assert result.keyphrase_forms == (
            ("pop",), ("art",),
            ("pop",), ("arts",),
            ("pop",), ("art's",),
        )

    def test_original_not_mutated(self):
        """Test a new object is returned and the input is unchanged"""
        forms = build_topic_forms("pop-art exhibit", ["street-art"], rules=ENGLISH)
        before = forms.to_dict()

        result = dehyphenate_keyphrase_forms(forms)

        assert result is not forms
        assert forms.to_dict() == before
        assert forms.keyphrase_forms[0][0] == "pop-art"

    def test_synonyms_untouched(self):
        """Test hyphenated synonyms are kept as they are"""
        forms = build_topic_forms("pop-art", ["street-art"])
        result = dehyphenate_keyphrase_forms(forms)
        assert result.synonyms_forms == forms.synonyms_forms

    @pytest.mark.parametrize("keyphrase", ["pop art", "pop-art exhibit", "pop--art", "gallery"])
    def test_idempotent(self, keyphrase):
        """Test dehyphenating twice equals dehyphenating once"""
        once = dehyphenate_keyphrase_forms(build_topic_forms(keyphrase, rules=ENGLISH))
        twice = dehyphenate_keyphrase_forms(once)
        assert twice == once

    def test_no_hyphens_unchanged(self):
        """Test forms without hyphens come back equal"""
        forms = build_topic_forms("pop art", rules=ENGLISH)
        assert dehyphenate_keyphrase_forms(forms) == forms

    def test_empty_forms(self):
        """Test empty forms stay empty"""
        assert dehyphenate_keyphrase_forms(KeyphraseForms()) == KeyphraseForms()

    def test_forms_immutable(self):
        """Test KeyphraseForms cannot be reassigned"""
        forms = build_topic_forms("pop art")
        with pytest.raises(AttributeError):
            forms.keyphrase_forms = ()
