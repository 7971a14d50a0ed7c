"""Core data models for newsview."""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

# Raw article object as returned by the news API. Every field is untrusted.
ArticleRecord = dict[str, Any]

NO_RESULTS_MESSAGE = "No news articles found for this selection."


class Category(StrEnum):
    """Top-headline topics offered by the viewer."""

    GENERAL = "general"
    BUSINESS = "business"
    TECHNOLOGY = "technology"
    SPORTS = "sports"
    HEALTH = "health"
    ENTERTAINMENT = "entertainment"
    SCIENCE = "science"

    @property
    def label(self) -> str:
        """Display name, e.g. ``"Technology"``."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: str) -> "Category":
        """Look up a category by name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the name is not a recognized category.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            msg = f"Unknown category: {name!r}. Expected one of: {valid}"
            raise ValueError(msg) from None


@dataclass(frozen=True)
class CategoryIntent:
    """Browse top headlines for a category."""

    category: str = Category.GENERAL.value


@dataclass(frozen=True)
class SearchIntent:
    """Free-text search."""

    text: str


QueryIntent = CategoryIntent | SearchIntent


@dataclass(frozen=True)
class DisplayArticle:
    """Render-ready article with every optional field resolved."""

    title: str
    description: str
    url: str
    image_url: str
    image_alt: str
    source_name: str
    published: str

    @property
    def details(self) -> str:
        return f"{self.source_name} • {self.published}"

    def with_image(self, image_url: str, image_alt: str) -> "DisplayArticle":
        """Return a copy with a different image."""
        return replace(self, image_url=image_url, image_alt=image_alt)


@dataclass(frozen=True)
class EmptyResults:
    """Placeholder unit rendered when a fetch returns no articles."""

    message: str = NO_RESULTS_MESSAGE


RenderUnit = DisplayArticle | EmptyResults
