"""
Keyphrase placement researches: SEO title, meta description, first paragraph.
"""

from dataclasses import dataclass

from ..language.matcher import count_phrase_in_sentence, find_topic_forms_in_string, first_match_position
from ..language.morphology import is_exact_match, split_keyphrase
from ..language.tokenizer import get_paragraphs, get_sentences, normalize
from .base import BaseResearch, ResearchName

_QUOTES = '"“”„'


@dataclass(frozen=True)
class KeywordInTitleResult:
    exact_match_found: bool = False
    all_words_found: bool = False
    position: int = -1
    exact_match_keyphrase: bool = False

    def to_dict(self) -> dict:
        return {
            "exactMatchFound": self.exact_match_found,
            "allWordsFound": self.all_words_found,
            "position": self.position,
            "exactMatchKeyphrase": self.exact_match_keyphrase,
        }


@dataclass(frozen=True)
class MetaDescriptionKeywordResult:
    count: int = 0

    def to_dict(self) -> dict:
        return {"count": self.count}


@dataclass(frozen=True)
class FirstParagraphResult:
    found_in_one_sentence: bool = False
    found_in_paragraph: bool = False
    keyphrase_or_synonym: str = ""

    def to_dict(self) -> dict:
        return {
            "foundInOneSentence": self.found_in_one_sentence,
            "foundInParagraph": self.found_in_paragraph,
            "keyphraseOrSynonym": self.keyphrase_or_synonym,
        }


class KeywordInPageTitleResearch(BaseResearch):
    """
    Where and how the keyphrase appears in the SEO title.

    position is the character index of the exact keyphrase in the title, or 0
    when only function words precede it ("The pop art guide"), -1 when the
    exact keyphrase is absent. Quoted keyphrases are only matched exactly.
    """

    name = ResearchName.KEYWORD_IN_PAGE_TITLE
    dependencies = (ResearchName.MORPHOLOGY,)

    def run(self, paper, researcher) -> KeywordInTitleResult:
        self.require(paper, "title")
        self.require(paper, "keyword")

        exact_keyphrase = is_exact_match(paper.keyword)
        title = normalize(paper.title)
        phrase = normalize(paper.keyword.strip().strip(_QUOTES))

        position = first_match_position((phrase,), title, True, paper.locale)
        if position >= 0:
            rules = researcher.config.rules_for(paper.locale)
            preceding = split_keyphrase(title[:position], paper.locale)
            if position > 0 and rules is not None and all(w in rules.function_words for w in preceding):
                position = 0
            return KeywordInTitleResult(
                exact_match_found=True,
                all_words_found=True,
                position=position,
                exact_match_keyphrase=exact_keyphrase,
            )

        if exact_keyphrase:
            return KeywordInTitleResult(exact_match_keyphrase=True)

        topic_forms = researcher.get_research(ResearchName.MORPHOLOGY)
        match = find_topic_forms_in_string(topic_forms, title, True, paper.locale)
        return KeywordInTitleResult(all_words_found=match.percent_word_matches == 100)

    def empty_result(self) -> KeywordInTitleResult:
        return KeywordInTitleResult()


class MetaDescriptionKeywordResearch(BaseResearch):
    """
    Keyphrase occurrences in the meta description.

    Counted per sentence like the body keyphrase count. When the keyphrase
    does not occur, the best synonym count is reported instead.
    """

    name = ResearchName.META_DESCRIPTION_KEYWORD
    dependencies = (ResearchName.MORPHOLOGY,)

    def run(self, paper, researcher) -> MetaDescriptionKeywordResult:
        self.require(paper, "description")

        topic_forms = researcher.get_research(ResearchName.MORPHOLOGY)
        sentences = get_sentences(paper.description)

        def occurrences(word_groups) -> int:
            return sum(count_phrase_in_sentence(word_groups, s, paper.locale)[0] for s in sentences)

        count = occurrences(topic_forms.keyphrase_forms)
        if count == 0 and topic_forms.synonyms_forms:
            count = max(occurrences(forms) for forms in topic_forms.synonyms_forms)
        return MetaDescriptionKeywordResult(count=count)

    def empty_result(self) -> MetaDescriptionKeywordResult:
        return MetaDescriptionKeywordResult()


class KeywordInFirstParagraphResearch(BaseResearch):
    """Whether the keyphrase or a synonym occurs in the first paragraph"""

    name = ResearchName.KEYWORD_IN_FIRST_PARAGRAPH
    dependencies = (ResearchName.MORPHOLOGY,)

    def run(self, paper, researcher) -> FirstParagraphResult:
        self.require(paper, "text")

        topic_forms = researcher.get_research(ResearchName.MORPHOLOGY)
        if not topic_forms.keyphrase_forms and not topic_forms.synonyms_forms:
            return self.empty_result()

        paragraphs = get_paragraphs(paper.text)
        if not paragraphs:
            return self.empty_result()
        first_paragraph = paragraphs[0]

        for sentence in get_sentences(first_paragraph):
            match = find_topic_forms_in_string(topic_forms, sentence, True, paper.locale, use_synonyms=True)
            if match.percent_word_matches == 100:
                return FirstParagraphResult(True, True, match.keyphrase_or_synonym)

        match = find_topic_forms_in_string(topic_forms, first_paragraph, True, paper.locale, use_synonyms=True)
        if match.percent_word_matches == 100:
            return FirstParagraphResult(False, True, match.keyphrase_or_synonym)
        return self.empty_result()

    def empty_result(self) -> FirstParagraphResult:
        return FirstParagraphResult()
