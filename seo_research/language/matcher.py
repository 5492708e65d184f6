"""
Matching keyphrase forms against text.

Two matching modes:
- word boundaries: a form only matches when surrounded by non-word
  characters or the string edges ("art" matches "pop art" but not "party")
- loose: plain substring containment ("art" matches "party")

Locales written without spaces (ja, zh, th) always use containment, since
word boundaries cannot be detected with a regex there.

Matching is case-insensitive; apostrophes are normalized on both sides.
"""

import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Sequence, Tuple

from .morphology import KeyphraseForms, WordGroup
from .tokenizer import normalize, uses_word_boundaries


@dataclass(frozen=True)
class WordMatch:
    """Result of matching one phrase (keyphrase or a synonym) against a text"""

    count_word_matches: int
    percent_word_matches: float
    matches: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TopicMatch(WordMatch):
    """Best match of keyphrase or synonyms in a text"""

    keyphrase_or_synonym: str = "keyphrase"

    def to_dict(self) -> dict:
        return {
            "countWordMatches": self.count_word_matches,
            "percentWordMatches": self.percent_word_matches,
            "keyphraseOrSynonym": self.keyphrase_or_synonym,
            "matches": list(self.matches),
        }


@lru_cache(maxsize=4096)
def _group_pattern(forms: Tuple[str, ...], use_word_boundaries: bool) -> "re.Pattern":
    # Longest forms first so "gallery's" wins over "gallery" at the same position
    alternatives = "|".join(re.escape(f) for f in sorted(set(forms), key=len, reverse=True))
    if use_word_boundaries:
        # \w is unicode-aware, so accented letters count as word characters
        return re.compile(r"(?<!\w)(?:" + alternatives + r")(?!\w)")
    return re.compile(alternatives)


def match_word_group(
    word_group: WordGroup,
    text: str,
    use_word_boundaries: bool = True,
    locale: str = "en_US",
) -> List[str]:
    """
    Find all non-overlapping occurrences of any form of a word group.

    Args:
        word_group: Surface forms of one word
        text: Already normalized (lowercase, tag-free) text
        use_word_boundaries: Require whole-word matches
        locale: Locale of the text

    Returns:
        Matched forms in text order
    """
    forms = tuple(f for f in (normalize(form) for form in word_group) if f)
    if not forms or not text:
        return []
    boundaries = use_word_boundaries and uses_word_boundaries(locale)
    return _group_pattern(forms, boundaries).findall(text)


def percentage(count: int, total: int) -> float:
    """
    Share of matched word groups, rounded half up and clamped to [0, 100].

    Examples:
        >>> percentage(1, 3)
        33.0
        >>> percentage(0, 0)
        0.0
    """
    if total <= 0:
        return 0.0
    value = math.floor(count / total * 100 + 0.5)
    return float(min(100, max(0, value)))


def find_word_forms_in_string(
    word_groups: Sequence[WordGroup],
    text: str,
    use_word_boundaries: bool = True,
    locale: str = "en_US",
) -> WordMatch:
    """
    Count how many word groups have at least one form present in text.

    Args:
        word_groups: Word groups of one phrase
        text: Text to search (HTML allowed)
        use_word_boundaries: Require whole-word matches
        locale: Locale of the text

    Returns:
        WordMatch with matched group count, percentage and matched forms
    """
    normalized = normalize(text)
    matches: List[str] = []
    count = 0

    for group in word_groups:
        found = match_word_group(group, normalized, use_word_boundaries, locale)
        if found:
            matches.extend(found)
            count += 1

    return WordMatch(
        count_word_matches=count,
        percent_word_matches=percentage(count, len(word_groups)),
        matches=tuple(matches),
    )


def find_topic_forms_in_string(
    topic_forms: KeyphraseForms,
    text: str,
    use_word_boundaries: bool = True,
    locale: str = "en_US",
    use_synonyms: bool = False,
) -> TopicMatch:
    """
    Match the keyphrase (and optionally its synonyms) in a text.

    The keyphrase is tried first. If it is not fully matched and synonyms
    are enabled, each synonym is tried and the one with the highest
    percentage wins; ties keep the earlier candidate.

    Example:
        >>> forms = build_topic_forms("pop art")
        >>> find_topic_forms_in_string(forms, "pop art exhibit", False).percent_word_matches
        100.0
    """
    result = find_word_forms_in_string(topic_forms.keyphrase_forms, text, use_word_boundaries, locale)
    best = TopicMatch(
        count_word_matches=result.count_word_matches,
        percent_word_matches=result.percent_word_matches,
        matches=result.matches,
        keyphrase_or_synonym="keyphrase",
    )

    if not use_synonyms or best.percent_word_matches == 100:
        return best

    for synonym_forms in topic_forms.synonyms_forms:
        result = find_word_forms_in_string(synonym_forms, text, use_word_boundaries, locale)
        if result.percent_word_matches > best.percent_word_matches:
            best = TopicMatch(
                count_word_matches=result.count_word_matches,
                percent_word_matches=result.percent_word_matches,
                matches=result.matches,
                keyphrase_or_synonym="synonym",
            )
    return best


def first_match_position(
    word_group: WordGroup,
    text: str,
    use_word_boundaries: bool = True,
    locale: str = "en_US",
) -> int:
    """Character index of the first match of any form in normalized text, -1 if none"""
    forms = tuple(f for f in (normalize(form) for form in word_group) if f)
    if not forms or not text:
        return -1
    boundaries = use_word_boundaries and uses_word_boundaries(locale)
    match = _group_pattern(forms, boundaries).search(text)
    return match.start() if match else -1


def count_phrase_in_sentence(
    word_groups: Sequence[WordGroup],
    sentence: str,
    locale: str = "en_US",
) -> Tuple[int, List[str]]:
    """
    Whole-word occurrences of a phrase in one sentence.

    A sentence only counts when every word group occurs in it; it then
    counts as often as its least frequent word group.

    Returns:
        (occurrence count, matched forms)
    """
    if not word_groups:
        return 0, []
    normalized = normalize(sentence)
    found = [match_word_group(group, normalized, True, locale) for group in word_groups]
    if not all(found):
        return 0, []
    return min(len(f) for f in found), [form for f in found for form in f]
