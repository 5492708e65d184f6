"""
Researches: named, independent analyses of a Paper.

Usage:
    from seo_research.researches import default_registry, ResearchName

    registry = default_registry()
    research = registry.get(ResearchName.KEYWORD_COUNT_IN_URL)

Researches are run through a Researcher, which resolves their dependencies
and caches every result for the duration of one analysis run.
"""

from .base import BaseResearch, ResearchName
from .registry import ResearchRegistry, default_registry, default_researches
from .keyword_count_in_url import KeywordCountInUrlResearch, KeywordInUrlResult
from .morphology import MorphologyResearch

__all__ = [
    "BaseResearch",
    "ResearchName",
    "ResearchRegistry",
    "default_registry",
    "default_researches",
    "KeywordCountInUrlResearch",
    "KeywordInUrlResult",
    "MorphologyResearch",
]
