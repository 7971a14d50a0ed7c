"""Data models for newsview."""

from newsview.data.models import (
    NO_RESULTS_MESSAGE,
    ArticleRecord,
    Category,
    CategoryIntent,
    DisplayArticle,
    EmptyResults,
    QueryIntent,
    RenderUnit,
    SearchIntent,
)

__all__ = [
    "NO_RESULTS_MESSAGE",
    "ArticleRecord",
    "Category",
    "CategoryIntent",
    "DisplayArticle",
    "EmptyResults",
    "QueryIntent",
    "RenderUnit",
    "SearchIntent",
]
