"""
Registry of researches available to a Researcher.

Researches are registered under their ResearchName. The registry is checked
once, before analysis starts: duplicate names, undeclared dependencies and
dependency cycles are wiring bugs and raise ResearchRegistrationError.
"""

import logging
from typing import Dict, Iterator, List, Optional

from ..errors import ResearchRegistrationError, UnknownResearchError
from .base import BaseResearch, ResearchName
from .keyphrase_length import KeyphraseLengthResearch
from .keyword_count import KeywordCountResearch, KeywordDensityResearch
from .keyword_count_in_url import KeywordCountInUrlResearch
from .keyword_placement import (
    KeywordInFirstParagraphResearch,
    KeywordInPageTitleResearch,
    MetaDescriptionKeywordResearch,
)
from .morphology import MorphologyResearch
from .readability import FleschReadingEaseResearch
from .word_count import CountSentencesFromTextResearch, WordCountInTextResearch

logger = logging.getLogger(__name__)


class ResearchRegistry:
    """Ordered mapping of ResearchName → research"""

    def __init__(self, researches: Optional[List[BaseResearch]] = None):
        self._researches: Dict[ResearchName, BaseResearch] = {}
        for research in researches or []:
            self.register(research)

    def register(self, research: BaseResearch) -> None:
        """
        Add a research.

        Raises:
            ResearchRegistrationError: not a research, unknown name, or name taken
        """
        if not isinstance(research, BaseResearch):
            raise ResearchRegistrationError(f"Not a research: {research!r}")

        name = getattr(research, "name", None)
        if not isinstance(name, ResearchName):
            raise ResearchRegistrationError(f"{type(research).__name__} has no ResearchName (got {name!r})")
        if name in self._researches:
            raise ResearchRegistrationError(f"Research {name.value!r} is already registered")

        for dependency in research.dependencies:
            if not isinstance(dependency, ResearchName):
                raise ResearchRegistrationError(
                    f"Research {name.value!r} declares an invalid dependency: {dependency!r}"
                )

        self._researches[name] = research
        logger.debug(f"Registered research: {name.value}")

    def get(self, name: ResearchName) -> BaseResearch:
        """
        Raises:
            UnknownResearchError: name is not registered
        """
        try:
            return self._researches[name]
        except KeyError:
            raise UnknownResearchError(getattr(name, "value", str(name))) from None

    def has(self, name: ResearchName) -> bool:
        return name in self._researches

    def names(self) -> List[ResearchName]:
        return list(self._researches)

    def __iter__(self) -> Iterator[BaseResearch]:
        return iter(self._researches.values())

    def __len__(self) -> int:
        return len(self._researches)

    def validate(self) -> None:
        """
        Check that every dependency is registered and that there are no cycles.

        Raises:
            ResearchRegistrationError: missing dependency or dependency cycle
        """
        for research in self._researches.values():
            for dependency in research.dependencies:
                if dependency not in self._researches:
                    raise ResearchRegistrationError(
                        f"Research {research.name.value!r} depends on unregistered research {dependency.value!r}"
                    )

        # Depth-first search, gray nodes are on the current path
        state: Dict[ResearchName, str] = {}

        def visit(name: ResearchName, path: List[ResearchName]) -> None:
            if state.get(name) == "done":
                return
            if state.get(name) == "visiting":
                cycle = " -> ".join(n.value for n in path + [name])
                raise ResearchRegistrationError(f"Research dependency cycle: {cycle}")
            state[name] = "visiting"
            for dependency in self._researches[name].dependencies:
                visit(dependency, path + [name])
            state[name] = "done"

        for name in self._researches:
            visit(name, [])


def default_researches() -> List[BaseResearch]:
    """Built-in researches, in the order run_all() reports them"""
    return [
        MorphologyResearch(),
        KeyphraseLengthResearch(),
        KeywordCountInUrlResearch(),
        WordCountInTextResearch(),
        KeywordCountResearch(),
        KeywordDensityResearch(),
        KeywordInPageTitleResearch(),
        MetaDescriptionKeywordResearch(),
        KeywordInFirstParagraphResearch(),
        CountSentencesFromTextResearch(),
        FleschReadingEaseResearch(),
    ]


def default_registry() -> ResearchRegistry:
    """Validated registry with all built-in researches"""
    registry = ResearchRegistry(default_researches())
    registry.validate()
    return registry
