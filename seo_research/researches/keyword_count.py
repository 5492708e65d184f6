"""
Keyphrase count and density in the body text.

A keyphrase occurrence is counted per sentence: a sentence containing every
keyphrase word counts as many occurrences as its least frequent keyphrase
word. "Pop art fans love pop art" contains "pop art" twice; "Pop fans love
art" once; "Pop fans" not at all.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..language.matcher import count_phrase_in_sentence
from ..language.tokenizer import get_sentences
from .base import BaseResearch, ResearchName


@dataclass(frozen=True)
class KeywordCountResult:
    count: int
    matches: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"count": self.count, "matches": list(self.matches)}


@dataclass(frozen=True)
class KeywordDensityResult:
    density: float

    def to_dict(self) -> dict:
        return {"density": self.density}


class KeywordCountResearch(BaseResearch):
    """Number of keyphrase occurrences in the body text"""

    name = ResearchName.KEYWORD_COUNT
    dependencies = (ResearchName.MORPHOLOGY,)

    def run(self, paper, researcher) -> KeywordCountResult:
        self.require(paper, "keyword")
        self.require(paper, "text")

        word_groups = researcher.get_research(ResearchName.MORPHOLOGY).keyphrase_forms
        if not word_groups:
            return self.empty_result()

        count = 0
        matches: List[str] = []
        for sentence in get_sentences(paper.text):
            sentence_count, found = count_phrase_in_sentence(word_groups, sentence, paper.locale)
            count += sentence_count
            matches.extend(found)

        return KeywordCountResult(count=count, matches=tuple(matches))

    def empty_result(self) -> KeywordCountResult:
        return KeywordCountResult(count=0)


class KeywordDensityResearch(BaseResearch):
    """Keyphrase occurrences per 100 words of body text"""

    name = ResearchName.KEYWORD_DENSITY
    dependencies = (ResearchName.KEYWORD_COUNT, ResearchName.WORD_COUNT_IN_TEXT)

    def run(self, paper, researcher) -> KeywordDensityResult:
        word_count = researcher.get_research(ResearchName.WORD_COUNT_IN_TEXT).count
        if word_count == 0:
            return self.empty_result()

        keyword_count = researcher.get_research(ResearchName.KEYWORD_COUNT).count
        return KeywordDensityResult(density=keyword_count / word_count * 100)

    def empty_result(self) -> KeywordDensityResult:
        return KeywordDensityResult(density=0.0)
