"""
Snowball stemmers per language (via NLTK).

Uses the Snowball stemming algorithms (improved Porter2 family):
https://snowballstem.org/

Stems are only used to decide whether two surface forms belong to the
same word, they are never shown to the user or matched against text.

Examples (english):
- "galleries" → "galleri"
- "gallery" → "galleri"
- "running" → "run"
"""

from functools import lru_cache

from nltk.stem.snowball import SnowballStemmer

SUPPORTED_LANGUAGES = frozenset(SnowballStemmer.languages)


@lru_cache(maxsize=None)
def get_stemmer(language: str) -> SnowballStemmer:
    """
    Get a shared stemmer for a Snowball language name.

    Stemmers are created once per process and only read afterwards.

    Args:
        language: Snowball language name ("english", "german", ...)

    Raises:
        ValueError: language is not supported by NLTK Snowball
    """
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported Snowball language: {language}. "
            f"Valid options: {', '.join(sorted(SUPPORTED_LANGUAGES))}"
        )
    return SnowballStemmer(language)


def stem(word: str, language: str = "english") -> str:
    """
    Stem a single lowercase word.

    Examples:
        >>> stem("galleries")
        'galleri'
        >>> stem("exhibits")
        'exhibit'
    """
    return get_stemmer(language).stem(word)
