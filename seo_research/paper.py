"""
Paper - immutable snapshot of the document under analysis.

A Paper is shared read-only by every research of an analysis run.
Derived values (words, sentences, keyphrase forms) are never stored here,
they are computed by researches and cached by the Researcher.
"""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .language.rules import language_of


class Paper(BaseModel):
    """Document under analysis"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(default="", description="Body text (HTML or plain text)")
    keyword: str = Field(default="", description="Focus keyphrase")
    synonyms: Tuple[str, ...] = Field(default=(), description="Keyphrase synonyms, in order")
    title: str = Field(default="", description="SEO title")
    description: str = Field(default="", description="Meta description")
    slug: str = Field(default="", description="URL slug")
    url: str = Field(default="", description="Full permalink")
    locale: str = Field(default="en_US", description="Language tag, e.g. en_US or de-DE")
    title_width: int = Field(default=0, ge=0, alias="titleWidth", description="Rendered title width in pixels")

    @field_validator("synonyms", mode="before")
    @classmethod
    def _split_synonyms(cls, value: Any) -> Tuple[str, ...]:
        # Editors send synonyms as one comma-separated string
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        return tuple(s.strip() for s in value if s and s.strip())

    @field_validator("text", "keyword", "title", "description", "slug", "url", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("locale", mode="before")
    @classmethod
    def _default_locale(cls, value: Any) -> Any:
        return value or "en_US"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Paper":
        """Build a Paper from a plain mapping (unknown keys are ignored)"""
        known = set(cls.model_fields) | {"titleWidth"}
        return cls.model_validate({k: v for k, v in data.items() if k in known})

    @property
    def language(self) -> str:
        """Primary language subtag: 'en_US' -> 'en'"""
        return language_of(self.locale)

    def has_keyword(self) -> bool:
        return bool(self.keyword.strip())

    def has_synonyms(self) -> bool:
        return len(self.synonyms) > 0

    def has_text(self) -> bool:
        return bool(self.text.strip())

    def has_title(self) -> bool:
        return bool(self.title.strip())

    def has_description(self) -> bool:
        return bool(self.description.strip())

    def has_slug(self) -> bool:
        return bool(self.slug.strip())

    def has_url(self) -> bool:
        return bool(self.url.strip())
