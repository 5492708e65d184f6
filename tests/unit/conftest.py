"""Unit test configuration - environment isolation and shared papers"""

import pytest

from seo_research.config import DEFAULT_LOCALE_ENV, RULES_PATH_ENV, AnalysisConfig
from seo_research.paper import Paper


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Unit tests never read config from the developer's environment.

    A local .env.local may point SEO_RESEARCH_RULES_PATH at a custom table.
    """
    monkeypatch.delenv(RULES_PATH_ENV, raising=False)
    monkeypatch.delenv(DEFAULT_LOCALE_ENV, raising=False)


@pytest.fixture
def config():
    """Config with the built-in rule table"""
    return AnalysisConfig()


@pytest.fixture
def pop_art_paper():
    """Complete English paper about pop art"""
    return Paper(
        keyword="pop art",
        synonyms="modern art, street art",
        title="The Pop Art Guide",
        description="Discover pop art today. Pop art for everyone.",
        slug="pop-art-exhibit",
        url="https://example.com/blog/pop-art-exhibit/",
        text=(
            "<p>Pop art fans love pop art. Pop fans love art.</p>"
            "<p>Visit the exhibit! It opens at 9.</p>"
        ),
        locale="en_US",
    )
