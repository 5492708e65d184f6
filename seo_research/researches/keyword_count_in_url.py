"""
Keyphrase in URL research.

Matches the keyphrase against the slug. The slug is split on dashes and
underscores, so hyphenated keyphrase words are split into their compounds
first ("pop-art" → "pop", "art"); otherwise "pop-art" could never match the
slug words "pop" and "art".
"""

from dataclasses import dataclass

from ..language.matcher import find_topic_forms_in_string
from ..language.morphology import dehyphenate_keyphrase_forms
from ..language.url import parse_slug, slug_from_url
from ..errors import InvalidInputError
from .base import BaseResearch, ResearchName


@dataclass(frozen=True)
class KeywordInUrlResult:
    keyphrase_length: int
    percent_word_matches: float

    def to_dict(self) -> dict:
        return {
            "keyphraseLength": self.keyphrase_length,
            "percentWordMatches": self.percent_word_matches,
        }


class KeywordCountInUrlResearch(BaseResearch):
    """Share of keyphrase words found in the slug"""

    name = ResearchName.KEYWORD_COUNT_IN_URL
    dependencies = (ResearchName.MORPHOLOGY,)

    def run(self, paper, researcher) -> KeywordInUrlResult:
        slug = paper.slug or slug_from_url(paper.url)
        if not slug.strip():
            raise InvalidInputError("slug", self.name.value)

        # New object: the cached morphology result stays as it is
        topic_forms = dehyphenate_keyphrase_forms(researcher.get_research(ResearchName.MORPHOLOGY))
        parsed_slug = parse_slug(slug)

        keyphrase_in_slug = find_topic_forms_in_string(topic_forms, parsed_slug, False, paper.locale)

        return KeywordInUrlResult(
            keyphrase_length=len(topic_forms.keyphrase_forms),
            percent_word_matches=keyphrase_in_slug.percent_word_matches,
        )

    def empty_result(self) -> KeywordInUrlResult:
        return KeywordInUrlResult(keyphrase_length=0, percent_word_matches=0.0)
