"""Keyphrase length research"""

from dataclasses import dataclass
from typing import Tuple

from ..language.morphology import filter_function_words, is_exact_match, split_keyphrase
from .base import BaseResearch, ResearchName


@dataclass(frozen=True)
class KeyphraseLengthResult:
    keyphrase_length: int
    function_words: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "keyphraseLength": self.keyphrase_length,
            "functionWords": list(self.function_words),
        }


class KeyphraseLengthResearch(BaseResearch):
    """
    Number of content words in the keyphrase.

    Function words of the locale ("the", "of") are not counted unless the
    keyphrase consists of function words only. Exact-match keyphrases
    ("pop art" in double quotes) count every word.
    """

    name = ResearchName.KEYPHRASE_LENGTH

    def run(self, paper, researcher) -> KeyphraseLengthResult:
        self.require(paper, "keyword")

        words = split_keyphrase(paper.keyword.strip().strip('"“”„'), paper.locale)
        if is_exact_match(paper.keyword):
            return KeyphraseLengthResult(keyphrase_length=len(words))

        rules = researcher.config.rules_for(paper.locale)
        content_words = filter_function_words(words, rules)
        dropped = tuple(w for w in words if w not in content_words)
        return KeyphraseLengthResult(keyphrase_length=len(content_words), function_words=dropped)

    def empty_result(self) -> KeyphraseLengthResult:
        return KeyphraseLengthResult(keyphrase_length=0)
