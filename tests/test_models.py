"""Tests for data models."""

import dataclasses

import pytest

from newsview.data import Category, CategoryIntent, DisplayArticle, EmptyResults, SearchIntent


def test_category_labels() -> None:
    assert [c.label for c in Category] == [
        "General",
        "Business",
        "Technology",
        "Sports",
        "Health",
        "Entertainment",
        "Science",
    ]


@pytest.mark.parametrize("name", ["Technology", "TECHNOLOGY", " technology "])
def test_category_parse_is_case_insensitive(name: str) -> None:
    assert Category.parse(name) is Category.TECHNOLOGY


def test_category_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown category: 'weather'"):
        Category.parse("weather")


def test_default_intent_is_general() -> None:
    assert CategoryIntent() == CategoryIntent("general")


def test_intents_are_frozen() -> None:
    intent = SearchIntent("mars")
    with pytest.raises(dataclasses.FrozenInstanceError):
        intent.text = "venus"  # type: ignore[misc]


def test_display_article_with_image() -> None:
    article = DisplayArticle(
        title="T",
        description="D",
        url="https://example.com",
        image_url="https://example.com/a.jpg",
        image_alt="T",
        source_name="S",
        published="Unknown Date",
    )
    swapped = article.with_image("https://placehold.co/x", "placeholder")
    assert swapped.image_url == "https://placehold.co/x"
    assert swapped.image_alt == "placeholder"
    assert article.image_url == "https://example.com/a.jpg"
    assert swapped.details == "S • Unknown Date"


def test_empty_results_default_message() -> None:
    assert EmptyResults().message == "No news articles found for this selection."
