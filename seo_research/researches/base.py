"""
Abstract base class for researches.

A research is one named analysis of a Paper. All researches implement this
interface so the Researcher can run, cache and chain them.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Tuple

from ..errors import InvalidInputError, UnknownResearchError

if TYPE_CHECKING:
    from ..paper import Paper
    from ..researcher import Researcher


class ResearchName(str, Enum):
    """Identifiers of the built-in researches (values are the public names)"""

    MORPHOLOGY = "morphology"
    KEYPHRASE_LENGTH = "keyphraseLength"
    KEYWORD_COUNT_IN_URL = "keywordCountInUrl"
    WORD_COUNT_IN_TEXT = "wordCountInText"
    KEYWORD_COUNT = "keywordCount"
    KEYWORD_DENSITY = "getKeywordDensity"
    KEYWORD_IN_PAGE_TITLE = "findKeywordInPageTitle"
    META_DESCRIPTION_KEYWORD = "metaDescriptionKeyword"
    KEYWORD_IN_FIRST_PARAGRAPH = "findKeywordInFirstParagraph"
    SENTENCES_FROM_TEXT = "countSentencesFromText"
    FLESCH_READING_EASE = "fleschReadingEase"

    @classmethod
    def parse(cls, name: "str | ResearchName") -> "ResearchName":
        """
        Convert a public research name to its identifier.

        Raises:
            UnknownResearchError: name is not a known research
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownResearchError(str(name)) from None


class BaseResearch(ABC):
    """
    Abstract base class for researches.

    Subclasses set `name` and, when they consume other researches,
    `dependencies`. Dependencies are computed by the Researcher before run()
    is called and are available through researcher.get_research().
    """

    name: ResearchName
    dependencies: Tuple[ResearchName, ...] = ()

    @abstractmethod
    def run(self, paper: "Paper", researcher: "Researcher") -> Any:
        """
        Compute the research result.

        Args:
            paper: Document under analysis (read-only)
            researcher: Researcher of the current run, for dependencies

        Returns:
            Immutable result object with a to_dict() method

        Raises:
            InvalidInputError: paper lacks a field this research requires
        """
        pass

    @abstractmethod
    def empty_result(self) -> Any:
        """Result reported when the paper lacks required input"""
        pass

    def require(self, paper: "Paper", field: str) -> None:
        """Raise InvalidInputError when a Paper field is empty"""
        value = getattr(paper, field, None)
        if not value or (isinstance(value, str) and not value.strip()):
            raise InvalidInputError(field, self.name.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name.value!r})"
