"""
SEO research - keyphrase and readability analysis of a document.

Architecture:
- Paper: immutable document snapshot (title, text, slug, keyphrase, ...)
- language: tokenization, keyphrase morphology, form matching, slug parsing
- researches: independent named analyses (keyword in URL, density, ...)
- Researcher: per-run cache that resolves research dependencies

Usage:
    from seo_research import Paper, Researcher

    researcher = Researcher(Paper(keyword="pop art", slug="pop-art-exhibit"))
    researcher.get_research("keywordCountInUrl").to_dict()
    # {'keyphraseLength': 2, 'percentWordMatches': 100.0}
"""

from .config import AnalysisConfig, load_config
from .errors import (
    InvalidInputError,
    ResearchCycleError,
    ResearchError,
    ResearchRegistrationError,
    RuleTableError,
    UnknownResearchError,
    UnsupportedLocaleError,
)
from .paper import Paper
from .researcher import Researcher, analyze
from .researches import ResearchName, ResearchRegistry, default_registry

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "load_config",
    "InvalidInputError",
    "ResearchCycleError",
    "ResearchError",
    "ResearchRegistrationError",
    "RuleTableError",
    "UnknownResearchError",
    "UnsupportedLocaleError",
    "Paper",
    "Researcher",
    "analyze",
    "ResearchName",
    "ResearchRegistry",
    "default_registry",
]
