"""
Researcher - runs researches for one Paper and caches their results.

One Researcher per analysis run:
- results are computed lazily, on first request
- declared dependencies are computed first, whatever the request order
- every later request returns the identical cached object
- a research missing input (InvalidInputError) yields its empty result

Results are immutable (frozen dataclasses, tuples), so a research cannot
change a shared intermediate result such as the keyphrase forms.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .config import AnalysisConfig
from .errors import InvalidInputError, ResearchCycleError, UnknownResearchError, UnsupportedLocaleError
from .paper import Paper
from .researches.base import ResearchName
from .researches.registry import ResearchRegistry, default_registry

logger = logging.getLogger(__name__)

NameLike = Union[str, ResearchName]


class Researcher:
    """Per-run research cache for one Paper"""

    def __init__(
        self,
        paper: Paper,
        registry: Optional[ResearchRegistry] = None,
        config: Optional[AnalysisConfig] = None,
    ):
        """
        Args:
            paper: Document under analysis
            registry: Researches to expose (default: all built-in researches)
            config: Rule tables etc. (default: built-in rules)

        Raises:
            ResearchRegistrationError: registry is inconsistent
        """
        if registry is None:
            registry = default_registry()
        else:
            registry.validate()

        self.paper = paper
        self.registry = registry
        self.config = config or AnalysisConfig()
        self.warnings: List[UnsupportedLocaleError] = []
        self._cache: Dict[ResearchName, Any] = {}
        self._in_progress: List[ResearchName] = []

    def _resolve(self, name: NameLike) -> ResearchName:
        key = ResearchName.parse(name)
        if not self.registry.has(key):
            raise UnknownResearchError(key.value)
        return key

    def has_research(self, name: NameLike) -> bool:
        try:
            self._resolve(name)
        except UnknownResearchError:
            return False
        return True

    def registered_names(self) -> List[str]:
        return [name.value for name in self.registry.names()]

    def get_research(self, name: NameLike) -> Any:
        """
        Get a research result, computing it on first request.

        Args:
            name: ResearchName or its public string value ("keywordCountInUrl")

        Returns:
            The cached result object (same instance on every call)

        Raises:
            UnknownResearchError: name is not registered
            ResearchCycleError: research requested while it is being computed
        """
        key = self._resolve(name)
        if key in self._cache:
            return self._cache[key]

        if key in self._in_progress:
            raise ResearchCycleError([n.value for n in self._in_progress] + [key.value])

        research = self.registry.get(key)
        self._in_progress.append(key)
        try:
            for dependency in research.dependencies:
                self.get_research(dependency)
            try:
                result = research.run(self.paper, self)
            except InvalidInputError as e:
                logger.debug(f"{e}, reporting empty result")
                result = research.empty_result()
        finally:
            self._in_progress.pop()

        self._cache[key] = result
        logger.debug(f"Computed research: {key.value}")
        return result

    def run_all(self, names: Optional[Iterable[NameLike]] = None) -> Dict[str, Any]:
        """
        Compute researches and return them by public name.

        Args:
            names: Researches to run (default: every registered research,
                in registration order)
        """
        keys = [self._resolve(n) for n in names] if names is not None else self.registry.names()
        return {key.value: self.get_research(key) for key in keys}

    def report_unsupported_locale(self, locale: str) -> None:
        """Record (once per locale) that identity morphology rules were used"""
        if any(w.locale == locale for w in self.warnings):
            return
        warning = UnsupportedLocaleError(locale)
        logger.warning(str(warning))
        self.warnings.append(warning)


def analyze(
    paper: Paper,
    config: Optional[AnalysisConfig] = None,
    names: Optional[Iterable[NameLike]] = None,
) -> Dict[str, Any]:
    """
    Run one analysis and return plain results.

    Returns:
        {research name: result.to_dict()}

    Example:
        >>> paper = Paper(keyword="pop art", slug="pop-art-exhibit")
        >>> analyze(paper, names=["keywordCountInUrl"])
        {'keywordCountInUrl': {'keyphraseLength': 2, 'percentWordMatches': 100.0}}
    """
    researcher = Researcher(paper, config=config)
    results = researcher.run_all(names)
    return {name: result.to_dict() for name, result in results.items()}
