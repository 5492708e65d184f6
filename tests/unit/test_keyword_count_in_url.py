"""
Unit tests for the keyphrase-in-URL research.
"""

import pytest
from seo_research.paper import Paper
from seo_research.researcher import Researcher
from seo_research.researches import KeywordInUrlResult, ResearchName

pytestmark = pytest.mark.unit


def research_url(**fields):
    return Researcher(Paper(**fields)).get_research(ResearchName.KEYWORD_COUNT_IN_URL)


class TestKeywordCountInUrl:
    """Test keyphrase matching against the slug"""

    def test_all_words_in_slug(self):
        """Test every keyphrase word found in the slug"""
        result = research_url(keyword="pop art", slug="pop-art-exhibit")
        assert result.to_dict() == {"keyphraseLength": 2, "percentWordMatches": 100.0}

    def test_keyphrase_not_in_slug(self):
        """Test no keyphrase word in the slug gives 0"""
        result = research_url(keyword="gallery", slug="pop-art-exhibit")
        assert result.keyphrase_length == 1
        assert result.percent_word_matches == 0.0

    def test_partial_match(self):
        """Test 2 of 3 words rounds to 67"""
        result = research_url(keyword="pop art gallery", slug="pop-art-exhibit")
        assert result.keyphrase_length == 3
        assert result.percent_word_matches == 67.0

    def test_hyphenated_keyphrase(self):
        """Test every compound of every English form counted as a word group"""
        # pop-art, pop-arts, pop-art's: six compounds, arts and art's not in the slug
        result = research_url(keyword="pop-art", slug="pop-art-exhibit")
        assert result.keyphrase_length == 6
        assert result.percent_word_matches == 67.0

    def test_hyphenated_keyphrase_literal_forms(self):
        """Test hyphenated keyphrase without morphology rules"""
        result = research_url(keyword="pop-art", slug="pop-art-exhibit", locale="xx_XX")
        assert result.to_dict() == {"keyphraseLength": 2, "percentWordMatches": 100.0}

    def test_underscores_in_slug(self):
        """Test underscores separate slug words"""
        result = research_url(keyword="pop art", slug="pop_art_exhibit")
        assert result.percent_word_matches == 100.0

    def test_inflected_form_in_slug(self):
        """Test plural in the slug matches the singular keyphrase"""
        result = research_url(keyword="gallery", slug="best-galleries-2024")
        assert result.percent_word_matches == 100.0

    def test_loose_matching_inside_slug_words(self):
        """Test slug words are matched without word boundaries"""
        result = research_url(keyword="art", slug="party-time")
        assert result.percent_word_matches == 100.0

    def test_case_insensitive(self):
        """Test uppercase keyphrase and slug match"""
        result = research_url(keyword="Pop Art", slug="POP-ART")
        assert result.percent_word_matches == 100.0

    def test_empty_keyphrase(self):
        """Test empty keyphrase gives zero length and zero percent"""
        result = research_url(keyword="", slug="pop-art-exhibit")
        assert result == KeywordInUrlResult(keyphrase_length=0, percent_word_matches=0.0)

    def test_missing_slug_gives_empty_result(self):
        """Test no slug and no URL gives the empty result"""
        result = research_url(keyword="pop art")
        assert result == KeywordInUrlResult(keyphrase_length=0, percent_word_matches=0.0)

    def test_slug_taken_from_url(self):
        """Test slug derived from the last URL path segment"""
        result = research_url(keyword="pop art", url="https://example.com/blog/pop-art-exhibit/")
        assert result.percent_word_matches == 100.0

    def test_unsupported_locale_literal_forms(self):
        """Test literal word forms for a locale without rules"""
        result = research_url(keyword="pop art", slug="pop-art", locale="xx_XX")
        assert result.to_dict() == {"keyphraseLength": 2, "percentWordMatches": 100.0}

    def test_cached_morphology_not_modified(self):
        """Test the shared morphology result keeps its hyphenated forms"""
        researcher = Researcher(Paper(keyword="pop-art exhibit", slug="pop-art-exhibit"))
        morphology = researcher.get_research("morphology")
        before = morphology.to_dict()

        result = researcher.get_research("keywordCountInUrl")

        # Six compound groups from pop-art plus exhibit
        assert result.keyphrase_length == 7
        assert researcher.get_research("morphology") is morphology
        assert morphology.to_dict() == before
        assert morphology.keyphrase_forms[0][0] == "pop-art"

    def test_url_research_before_morphology_request(self):
        """Test morphology requested after the URL research is still hyphenated"""
        researcher = Researcher(Paper(keyword="pop-art", slug="pop-art"))
        researcher.get_research("keywordCountInUrl")
        assert researcher.get_research("morphology").keyphrase_forms[0][0] == "pop-art"
