"""
Keyphrase morphology: expand a keyphrase and its synonyms into word forms.

Every keyphrase word becomes a word group: an ordered tuple of surface forms
considered equivalent ("gallery", "galleries", "gallery's"). The word itself
is always the first form. Locales without rules keep the literal word only.

KeyphraseForms is immutable. Researches that need a modified version (e.g.
dehyphenated forms for slug matching) build a new instance, so the cached
morphology result shared by all researches of a run never changes.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .rules import MorphologyRules
from .stemmer import stem
from .tokenizer import get_words, normalize, uses_word_boundaries

logger = logging.getLogger(__name__)

WordGroup = Tuple[str, ...]

_EXACT_MATCH_RE = re.compile(r'^["“”„](.+)["“”„]$')


@dataclass(frozen=True)
class KeyphraseForms:
    """Word forms of the keyphrase and of each synonym"""

    keyphrase_forms: Tuple[WordGroup, ...] = ()
    synonyms_forms: Tuple[Tuple[WordGroup, ...], ...] = ()

    def to_dict(self) -> Dict[str, List]:
        return {
            "keyphraseForms": [list(group) for group in self.keyphrase_forms],
            "synonymsForms": [[list(group) for group in synonym] for synonym in self.synonyms_forms],
        }


def is_exact_match(keyphrase: str) -> bool:
    """Keyphrases wrapped in double quotes must be matched as a whole"""
    return bool(_EXACT_MATCH_RE.match(keyphrase.strip()))


def split_keyphrase(keyphrase: str, locale: str = "en_US") -> List[str]:
    """
    Lowercase words of a keyphrase.

    Hyphens and apostrophes stay inside words. For locales without
    whitespace word boundaries only whitespace separates words.

    Examples:
        >>> split_keyphrase("Pop-Art Exhibits")
        ['pop-art', 'exhibits']
    """
    text = normalize(keyphrase)
    if not text:
        return []
    if not uses_word_boundaries(locale):
        return text.split()
    return [w.lower() for w in get_words(text, locale)]


def filter_function_words(words: Sequence[str], rules: Optional[MorphologyRules]) -> List[str]:
    """Drop function words from multi-word keyphrases, unless nothing would remain"""
    if rules is None or len(words) < 2:
        return list(words)
    content_words = [w for w in words if w not in rules.function_words]
    return content_words or list(words)


def word_forms(word: str, rules: Optional[MorphologyRules]) -> WordGroup:
    """
    Generate the surface forms of one lowercase word.

    Candidates come from the suffix rules and are kept only when they share
    the word's Snowball stem.

    Examples:
        >>> word_forms("gallery", DEFAULT_MORPHOLOGY_RULES["en"])
        ('gallery', 'galleries', "gallery's")
        >>> word_forms("gallery", None)
        ('gallery',)
    """
    if rules is None or not word:
        return (word,)

    root = stem(word, rules.language)
    forms = [word]
    for pattern, replacement in rules.suffix_rules:
        candidate, applied = re.subn(pattern, replacement, word, count=1)
        if not applied or not candidate or candidate in forms:
            continue
        if stem(candidate, rules.language) == root:
            forms.append(candidate)
    return tuple(forms)


def _phrase_forms(phrase: str, rules: Optional[MorphologyRules], locale: str) -> Tuple[WordGroup, ...]:
    stripped = phrase.strip()
    match = _EXACT_MATCH_RE.match(stripped)
    if match:
        exact = normalize(match.group(1))
        return ((exact,),) if exact else ()

    words = filter_function_words(split_keyphrase(stripped, locale), rules)
    return tuple(word_forms(w, rules) for w in words)


def build_topic_forms(
    keyphrase: str,
    synonyms: Iterable[str] = (),
    rules: Optional[MorphologyRules] = None,
    locale: str = "en_US",
) -> KeyphraseForms:
    """
    Build the forms of a keyphrase and its synonyms.

    Args:
        keyphrase: Focus keyphrase (may be empty)
        synonyms: Synonym phrases, in order
        rules: Morphology rules for the locale, None for literal forms only
        locale: Locale of the paper (controls keyphrase word splitting)

    Returns:
        KeyphraseForms with one word group per keyphrase word

    Example:
        >>> build_topic_forms("pop art", ["modern art"]).to_dict()
        {'keyphraseForms': [['pop'], ['art']], 'synonymsForms': [[['modern'], ['art']]]}
    """
    keyphrase_forms = _phrase_forms(keyphrase or "", rules, locale)
    synonyms_forms = tuple(_phrase_forms(s, rules, locale) for s in synonyms if s and s.strip())

    logger.debug(
        f"Built topic forms: {len(keyphrase_forms)} keyphrase word groups, "
        f"{len(synonyms_forms)} synonyms (rules: {rules.language if rules else 'literal'})"
    )
    return KeyphraseForms(keyphrase_forms=keyphrase_forms, synonyms_forms=synonyms_forms)


def dehyphenate_keyphrase_forms(topic_forms: KeyphraseForms) -> KeyphraseForms:
    """
    Split hyphenated keyphrase words into single-compound word groups.

    Slugs are parsed on hyphens, so "pop-art" in the keyphrase has to become
    "pop" and "art" before it can be found in the slug "pop-art-exhibit".
    Every compound of every form becomes its own group, in order:
    ("pop-art", "pop-arts") becomes ("pop",), ("art",), ("pop",), ("arts",).
    Groups whose first form has no hyphen are kept as they are. Synonyms
    forms are not touched.

    Returns:
        New KeyphraseForms; the input is never modified
    """
    groups: List[WordGroup] = []
    for word_group in topic_forms.keyphrase_forms:
        if not word_group or "-" not in word_group[0]:
            groups.append(word_group)
            continue

        for form in word_group:
            groups.extend((part,) for part in form.split("-") if part)

    return replace(topic_forms, keyphrase_forms=tuple(groups))
