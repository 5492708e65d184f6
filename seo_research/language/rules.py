"""
Locale morphology rule tables.

A rule set tells the form generator how to inflect a keyphrase word:
- language: Snowball stemmer used to validate generated candidates
- suffix_rules: (regex, replacement) pairs applied to the end of a word
- function_words: words dropped from multi-word keyphrases

Candidates produced by suffix rules are only kept when they stem to the same
root as the original word, so rules can be generous without producing forms
of unrelated words.

The built-in table covers a handful of languages; a YAML file can extend or
replace entries (see seo_research.config).
"""

import re
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import RuleTableError
from .stemmer import SUPPORTED_LANGUAGES


class MorphologyRules(BaseModel):
    """Inflection rules for one language"""

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., description="Snowball language name")
    suffix_rules: Tuple[Tuple[str, str], ...] = Field(default=())
    function_words: frozenset = Field(default=frozenset())

    @field_validator("language")
    @classmethod
    def _known_language(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported Snowball language: {value}")
        return value

    @field_validator("suffix_rules")
    @classmethod
    def _compilable(cls, value: Tuple[Tuple[str, str], ...]) -> Tuple[Tuple[str, str], ...]:
        for pattern, _ in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid suffix rule {pattern!r}: {e}") from e
        return value

    @field_validator("function_words", mode="before")
    @classmethod
    def _lowercase_words(cls, value) -> frozenset:
        return frozenset(w.lower() for w in (value or ()))


# Plurals and possessives; the stem check discards candidates that drift
_ENGLISH_SUFFIX_RULES = (
    (r"(?<![^aeiou]y)(?<![sxz])(?<![cs]h)$", "s"),
    (r"([sxz]|[cs]h)$", r"\1es"),
    (r"([^aeiou])y$", r"\1ies"),
    (r"([^aeiou])ies$", r"\1y"),
    (r"([sxz]|[cs]h)es$", r"\1"),
    (r"([^su])s$", r"\1"),
    (r"(?<!')$", "'s"),
)

_ENGLISH_FUNCTION_WORDS = (
    "a", "an", "the", "and", "or", "but", "of", "in", "on", "at", "to", "for",
    "with", "by", "from", "into", "about", "as", "is", "are", "was", "were",
    "be", "been", "it", "its", "this", "that", "these", "those", "my", "your",
    "our", "their", "his", "her", "how", "what", "which", "who", "why",
)

DEFAULT_MORPHOLOGY_RULES: Dict[str, MorphologyRules] = {
    "en": MorphologyRules(
        language="english",
        suffix_rules=_ENGLISH_SUFFIX_RULES,
        function_words=_ENGLISH_FUNCTION_WORDS,
    ),
    "de": MorphologyRules(
        language="german",
        suffix_rules=(
            (r"$", "e"), (r"$", "en"), (r"$", "er"), (r"$", "es"),
            (r"$", "n"), (r"$", "s"), (r"e$", ""), (r"en$", ""),
        ),
        function_words=("der", "die", "das", "ein", "eine", "und", "oder", "mit", "von", "zu", "für", "im", "in"),
    ),
    "nl": MorphologyRules(
        language="dutch",
        suffix_rules=((r"$", "en"), (r"$", "s"), (r"e$", "es"), (r"en$", ""), (r"s$", "")),
        function_words=("de", "het", "een", "en", "of", "van", "met", "voor", "in", "op"),
    ),
    "fr": MorphologyRules(
        language="french",
        suffix_rules=((r"(?<![sxz])$", "s"), (r"al$", "aux"), (r"aux$", "al"), (r"([^s])s$", r"\1")),
        function_words=("le", "la", "les", "un", "une", "des", "de", "du", "et", "ou", "en", "pour", "avec"),
    ),
    "es": MorphologyRules(
        language="spanish",
        suffix_rules=((r"([aeiou])$", r"\1s"), (r"([^aeiou])$", r"\1es"), (r"([aeiou])s$", r"\1"), (r"([^aeiou])es$", r"\1")),
        function_words=("el", "la", "los", "las", "un", "una", "y", "o", "de", "del", "en", "con", "para"),
    ),
    "it": MorphologyRules(
        language="italian",
        suffix_rules=((r"o$", "i"), (r"a$", "e"), (r"e$", "i"), (r"i$", "o"), (r"i$", "e")),
        function_words=("il", "lo", "la", "i", "gli", "le", "un", "una", "e", "o", "di", "da", "in", "con", "per"),
    ),
    "pt": MorphologyRules(
        language="portuguese",
        suffix_rules=((r"([aeiou])$", r"\1s"), (r"([^aeiou])$", r"\1es"), (r"([aeiou])s$", r"\1")),
        function_words=("o", "a", "os", "as", "um", "uma", "e", "ou", "de", "do", "da", "em", "com", "para"),
    ),
    "sv": MorphologyRules(
        language="swedish",
        suffix_rules=((r"$", "ar"), (r"$", "er"), (r"$", "en"), (r"$", "et"), (r"$", "s")),
        function_words=("en", "ett", "och", "eller", "av", "med", "för", "i", "på"),
    ),
}


def language_of(locale: str) -> str:
    """
    Primary language subtag of a locale tag.

    Examples:
        >>> language_of("en_US")
        'en'
        >>> language_of("pt-BR")
        'pt'
    """
    return (locale or "").replace("-", "_").split("_")[0].lower()


def resolve_rules(locale: str, table: Dict[str, MorphologyRules]) -> Optional[MorphologyRules]:
    """
    Find the rule set for a locale.

    Full tags ("pt_BR") win over bare languages ("pt"). Returns None when the
    table has no entry, callers then fall back to identity rules.
    """
    if not locale:
        return None
    normalized = locale.replace("-", "_")
    for key in (normalized, normalized.lower(), language_of(locale)):
        if key in table:
            return table[key]
    return None


def parse_rule_table(raw: Dict) -> Dict[str, MorphologyRules]:
    """
    Validate a raw rule table (e.g. loaded from YAML).

    Expected shape:
        en:
          language: english
          suffix_rules: [["$", "s"], ...]
          function_words: [the, a, ...]

    Raises:
        RuleTableError: table is not a mapping or an entry is invalid
    """
    if not isinstance(raw, dict):
        raise RuleTableError(f"Rule table must be a mapping of locale to rules, got {type(raw).__name__}")

    table: Dict[str, MorphologyRules] = {}
    for locale, entry in raw.items():
        if not isinstance(entry, dict):
            raise RuleTableError(f"Rules for {locale!r} must be a mapping")
        try:
            rules = [tuple(rule) for rule in entry.get("suffix_rules", [])]
            table[str(locale)] = MorphologyRules(
                language=entry.get("language", ""),
                suffix_rules=tuple(rules),
                function_words=entry.get("function_words", ()),
            )
        except (ValidationError, TypeError) as e:
            raise RuleTableError(f"Invalid rules for {locale!r}: {e}") from e
    return table
