"""
Language processing for document research.

Components:
- tokenizer: HTML stripping, word/sentence/paragraph splitting
- stemmer: Snowball stemmers per language (NLTK)
- rules: locale → morphology rule tables
- morphology: keyphrase/synonym word forms (KeyphraseForms)
- matcher: matching word forms against text, with or without word boundaries
- url: slug parsing
"""

from .tokenizer import get_words, get_sentences, get_paragraphs, strip_html_tags
from .stemmer import stem
from .rules import DEFAULT_MORPHOLOGY_RULES, MorphologyRules, resolve_rules
from .morphology import KeyphraseForms, build_topic_forms, dehyphenate_keyphrase_forms
from .matcher import TopicMatch, find_topic_forms_in_string
from .url import parse_slug, slug_from_url

__all__ = [
    "get_words",
    "get_sentences",
    "get_paragraphs",
    "strip_html_tags",
    "stem",
    "DEFAULT_MORPHOLOGY_RULES",
    "MorphologyRules",
    "resolve_rules",
    "KeyphraseForms",
    "build_topic_forms",
    "dehyphenate_keyphrase_forms",
    "TopicMatch",
    "find_topic_forms_in_string",
    "parse_slug",
    "slug_from_url",
]
