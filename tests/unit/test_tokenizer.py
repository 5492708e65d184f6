"""
Unit tests for the document tokenizer.
"""

import pytest
from seo_research.language.tokenizer import (
    get_paragraphs,
    get_sentences,
    get_words,
    normalize,
    normalize_apostrophes,
    strip_html_tags,
    uses_word_boundaries,
)

pytestmark = pytest.mark.unit


class TestStripHtml:
    """Test HTML removal"""

    def test_inline_tags_removed(self):
        """Test inline markup removed without breaking the paragraph"""
        assert strip_html_tags("<p>Pop <b>art</b></p>") == "Pop art"

    def test_block_tags_become_paragraph_breaks(self):
        """Test each block element becomes its own paragraph"""
        text = strip_html_tags("<p>First</p><p>Second</p>")
        assert text == "First\n\nSecond"

    def test_entities_decoded(self):
        """Test HTML entities decoded"""
        assert strip_html_tags("Tom &amp; Jerry") == "Tom & Jerry"

    def test_script_content_dropped(self):
        """Test script and style bodies are not text"""
        text = strip_html_tags("<p>Visible</p><script>var hidden = 1;</script><style>p {}</style>")
        assert text == "Visible"

    def test_angle_bracket_in_attribute(self):
        """Test ">" inside a quoted attribute value does not end the tag"""
        assert strip_html_tags('<p data-note="a > b">Pop art</p>') == "Pop art"
        assert get_words('<p data-note="a > b">Pop art</p>') == ["Pop", "art"]

    def test_comments_dropped(self):
        """Test comment text, including ">" inside it, is removed"""
        assert strip_html_tags("<!-- hidden > comment -->Gallery") == "Gallery"

    def test_plain_text_unchanged(self):
        """Test plain text only has whitespace collapsed"""
        assert strip_html_tags("Pop  art\n\nexhibit") == "Pop art\n\nexhibit"

    def test_empty(self):
        """Test empty input"""
        assert strip_html_tags("") == ""


class TestNormalize:
    """Test text normalization used before matching"""

    def test_typographic_apostrophes(self):
        """Test curly quotes become plain apostrophes"""
        assert normalize_apostrophes("Tom’s ‘art’") == "Tom's 'art'"

    def test_lowercase_and_whitespace(self):
        """Test lowercased, tag-free, single-spaced output"""
        assert normalize("  <b>Pop</b>   ART\n\nExhibit ") == "pop art exhibit"


class TestWords:
    """Test word splitting"""

    def test_basic_words(self):
        """Test whitespace-separated words"""
        assert get_words("Pop art exhibit") == ["Pop", "art", "exhibit"]

    def test_hyphens_and_apostrophes_kept(self):
        """Test inner hyphens and apostrophes stay inside the word"""
        words = get_words("Pop-art exhibits, don't miss them!")
        assert words == ["Pop-art", "exhibits", "don't", "miss", "them"]

    def test_punctuation_removed(self):
        """Test punctuation not part of words"""
        assert get_words("Art! Art? (Art)") == ["Art", "Art", "Art"]

    def test_html_ignored(self):
        """Test tags and attributes not counted as words"""
        assert get_words("<p>Pop <a href='x'>art</a></p>") == ["Pop", "art"]

    def test_empty_string(self):
        """Test empty and whitespace-only input"""
        assert get_words("") == []
        assert get_words("   ") == []
        assert get_words("\n\t") == []

    def test_accented_letters(self):
        """Test accented letters kept inside words"""
        assert get_words("Café crème brûlée", "fr_FR") == ["Café", "crème", "brûlée"]

    def test_japanese_split_per_character(self):
        """Test one token per Japanese character"""
        assert get_words("ポップアート", "ja") == ["ポ", "ッ", "プ", "ア", "ー", "ト"]

    def test_word_boundary_locales(self):
        """Test which locales delimit words with spaces"""
        assert uses_word_boundaries("en_US")
        assert uses_word_boundaries("de-DE")
        assert not uses_word_boundaries("ja")
        assert not uses_word_boundaries("zh_CN")


class TestSentencesAndParagraphs:
    """Test sentence and paragraph splitting"""

    def test_sentences(self):
        """Test split after . ! ? before uppercase letters and digits"""
        sentences = get_sentences("Pop art is fun. Visit the exhibit! It opens at 9.")
        assert sentences == ["Pop art is fun.", "Visit the exhibit!", "It opens at 9."]

    def test_lowercase_continuation_is_not_a_new_sentence(self):
        """Test abbreviation followed by lowercase stays one sentence"""
        assert get_sentences("See e.g. the museum.") == ["See e.g. the museum."]

    def test_accented_lowercase_continuation(self):
        """Test non-ASCII lowercase letters continue the sentence"""
        assert get_sentences("Fin. émile arrive.") == ["Fin. émile arrive."]

    def test_accented_uppercase_starts_sentence(self):
        """Test non-ASCII uppercase letters start a sentence"""
        assert get_sentences("Fin. Émile arrive.") == ["Fin.", "Émile arrive."]

    def test_quoted_sentence_start(self):
        """Test opening quote before the uppercase letter"""
        assert get_sentences('It ended. "Pop art" began.') == ["It ended.", '"Pop art" began.']

    def test_cjk_full_stops(self):
        """Test Japanese full stops end sentences"""
        assert get_sentences("ポップアート。展示です。") == ["ポップアート。", "展示です。"]

    def test_paragraph_break_ends_sentence(self):
        """Test sentences do not cross block boundaries"""
        sentences = get_sentences("<p>No full stop here</p><p>Second paragraph.</p>")
        assert sentences == ["No full stop here", "Second paragraph."]

    def test_paragraphs(self):
        """Test empty block elements produce no paragraph"""
        paragraphs = get_paragraphs("<p>One.</p>\n<p></p><p>Two.</p>")
        assert paragraphs == ["One.", "Two."]

    def test_plain_text_paragraphs(self):
        """Test blank lines separate plain text paragraphs"""
        assert get_paragraphs("One.\n\nTwo.") == ["One.", "Two."]

    @pytest.mark.parametrize("text", ["", "   ", "<p></p>"])
    def test_empty_text(self, text):
        """Test no sentences or paragraphs in empty input"""
        assert get_sentences(text) == []
        assert get_paragraphs(text) == []
