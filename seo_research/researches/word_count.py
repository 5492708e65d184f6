"""Word and sentence counts of the body text"""

from dataclasses import dataclass
from typing import Tuple

from ..language.tokenizer import get_sentences, get_words, strip_html_tags
from .base import BaseResearch, ResearchName


@dataclass(frozen=True)
class WordCountResult:
    text: str
    count: int

    def to_dict(self) -> dict:
        return {"text": self.text, "count": self.count}


@dataclass(frozen=True)
class SentenceLength:
    sentence: str
    sentence_length: int

    def to_dict(self) -> dict:
        return {"sentence": self.sentence, "sentenceLength": self.sentence_length}


@dataclass(frozen=True)
class SentenceLengthsResult:
    sentence_lengths: Tuple[SentenceLength, ...] = ()

    def to_dict(self) -> dict:
        return {"sentenceLengths": [s.to_dict() for s in self.sentence_lengths]}


class WordCountInTextResearch(BaseResearch):
    """Number of words in the body text (characters for ja/zh/th)"""

    name = ResearchName.WORD_COUNT_IN_TEXT

    def run(self, paper, researcher) -> WordCountResult:
        self.require(paper, "text")
        text = strip_html_tags(paper.text)
        return WordCountResult(text=text, count=len(get_words(text, paper.locale)))

    def empty_result(self) -> WordCountResult:
        return WordCountResult(text="", count=0)


class CountSentencesFromTextResearch(BaseResearch):
    """Length in words of every sentence of the body text"""

    name = ResearchName.SENTENCES_FROM_TEXT

    def run(self, paper, researcher) -> SentenceLengthsResult:
        self.require(paper, "text")
        lengths = tuple(
            SentenceLength(sentence=s, sentence_length=len(get_words(s, paper.locale)))
            for s in get_sentences(paper.text)
        )
        return SentenceLengthsResult(sentence_lengths=lengths)

    def empty_result(self) -> SentenceLengthsResult:
        return SentenceLengthsResult()
