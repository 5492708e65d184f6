"""
Flesch reading ease of the body text (via textstat).

Score interpretation (English):
- 90-100: very easy
- 60-70: plain language
- 0-30: very difficult

textstat ships language-specific Flesch constants for a fixed set of
languages; other locales get no score.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import textstat

from ..language.tokenizer import get_sentences
from .base import BaseResearch, ResearchName

logger = logging.getLogger(__name__)

FLESCH_LANGUAGES = frozenset(["en", "de", "es", "fr", "it", "nl", "ru"])


@dataclass(frozen=True)
class FleschReadingEaseResult:
    score: Optional[float] = None

    def to_dict(self) -> dict:
        return {"score": self.score}


class FleschReadingEaseResearch(BaseResearch):
    """Flesch reading ease score, rounded to one decimal"""

    name = ResearchName.FLESCH_READING_EASE

    def run(self, paper, researcher) -> FleschReadingEaseResult:
        self.require(paper, "text")

        language = paper.language
        if language not in FLESCH_LANGUAGES:
            logger.debug(f"No Flesch reading ease formula for language {language!r}")
            return self.empty_result()

        text = " ".join(get_sentences(paper.text))
        if not text:
            return self.empty_result()

        # textstat keeps the language in module state; set it right before scoring
        textstat.set_lang(language)
        score = textstat.flesch_reading_ease(text)
        return FleschReadingEaseResult(score=round(float(score), 1))

    def empty_result(self) -> FleschReadingEaseResult:
        return FleschReadingEaseResult()
