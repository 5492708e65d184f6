"""
Tokenizer for document analysis.

Tokenization pipeline:
1. Strip HTML tags (body text and meta fields may contain markup)
2. Normalize apostrophes and whitespace
3. Split into paragraphs, sentences or words

Word splitting is locale-aware: languages written without spaces
(Japanese, Chinese, Thai) are split per character instead of on whitespace.
"""

import re
from typing import List

from bs4 import BeautifulSoup, Comment

from .rules import language_of

# Languages without whitespace-delimited words
NO_WORD_BOUNDARY_LANGUAGES = frozenset(["ja", "zh", "th"])

# Tags that end a paragraph in the extracted text
BLOCK_TAGS = [
    "p", "div", "section", "article", "header", "footer", "aside",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "dl", "dt", "dd",
    "blockquote", "pre", "table", "tr", "td", "th", "br", "hr",
]

_WS_RE = re.compile(r"\s+")
_APOSTROPHES_RE = re.compile(r"[\u2018\u2019\u201b`\u00b4]")

# Words: letters/digits with inner hyphens and apostrophes ("pop-art", "don't")
_WORD_RE = re.compile(r"[^\W_]+(?:['\-][^\W_]+)*")
_CJK_CHAR_RE = re.compile(r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\u0e00-\u0e7f]")

# Candidate sentence ends: terminal punctuation plus whitespace, or CJK full stops
_SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s+|(?<=[。！？])")
_SENTENCE_OPENERS = "\"'(["
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def _html_to_text(markup: str) -> str:
    soup = BeautifulSoup(markup, "html.parser")
    for node in soup(["script", "style", "noscript"]):
        node.decompose()
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()
    for block in soup.find_all(BLOCK_TAGS):
        block.insert_before("\n\n")
        block.insert_after("\n\n")
    return soup.get_text()


def strip_html_tags(text: str) -> str:
    """
    Remove HTML tags and decode entities, keeping block boundaries as paragraph breaks.

    Examples:
        >>> strip_html_tags("<p>Pop <b>art</b></p>")
        'Pop art'
        >>> strip_html_tags('<p data-note="a > b">Pop art</p><!-- draft -->')
        'Pop art'
    """
    if not text:
        return ""
    if "<" in text or "&" in text:
        text = _html_to_text(text)
    # Collapse spaces but keep paragraph breaks
    paragraphs = [_WS_RE.sub(" ", p).strip() for p in _PARAGRAPH_SPLIT_RE.split(text)]
    return "\n\n".join(p for p in paragraphs if p)


def normalize_apostrophes(text: str) -> str:
    """Replace typographic apostrophes and backticks with a plain apostrophe"""
    return _APOSTROPHES_RE.sub("'", text)


def normalize(text: str) -> str:
    """Lowercase, tag-free, single-spaced text with plain apostrophes"""
    text = normalize_apostrophes(strip_html_tags(text))
    return _WS_RE.sub(" ", text).strip().lower()


def uses_word_boundaries(locale: str) -> bool:
    """Whether words of the locale are delimited by whitespace/punctuation"""
    return language_of(locale) not in NO_WORD_BOUNDARY_LANGUAGES


def get_words(text: str, locale: str = "en_US") -> List[str]:
    """
    Split text into words.

    Args:
        text: Input text (HTML allowed)
        locale: Locale of the text

    Returns:
        List of words in document order, original casing kept

    Examples:
        >>> get_words("Pop-art exhibits, don't miss them!")
        ['Pop-art', 'exhibits', "don't", 'miss', 'them']

        >>> get_words("   ")
        []
    """
    if not text:
        return []

    text = normalize_apostrophes(strip_html_tags(text))

    if not uses_word_boundaries(locale):
        # One token per ideographic/Thai character, other runs split as usual
        tokens = []
        for chunk in _WORD_RE.findall(text):
            if _CJK_CHAR_RE.search(chunk):
                tokens.extend(c for c in chunk if not c.isspace())
            else:
                tokens.append(chunk)
        return tokens

    return _WORD_RE.findall(text)


def get_paragraphs(text: str) -> List[str]:
    """Split text into non-empty paragraphs (HTML blocks or blank-line separated)"""
    text = strip_html_tags(text)
    return [p.strip() for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def get_sentences(text: str) -> List[str]:
    """
    Split text into sentences.

    Paragraph breaks always end a sentence.

    Examples:
        >>> get_sentences("Pop art is fun. Visit the exhibit! It opens at 9.")
        ['Pop art is fun.', 'Visit the exhibit!', 'It opens at 9.']
    """
    sentences = []
    for paragraph in get_paragraphs(text):
        sentences.extend(s for s in _split_paragraph(paragraph) if s)
    return sentences


def _split_paragraph(paragraph: str) -> List[str]:
    # After . ! ? the next sentence starts with an uppercase letter or a digit,
    # so "Fin. émile arrive" stays one sentence. CJK full stops always split.
    parts = []
    start = 0
    for match in _SENTENCE_END_RE.finditer(paragraph):
        following = paragraph[match.end():].lstrip(_SENTENCE_OPENERS)[:1]
        if match.group() and (not following.isalnum() or following.islower()):
            continue
        parts.append(paragraph[start:match.end()].strip())
        start = match.end()
    parts.append(paragraph[start:].strip())
    return parts
