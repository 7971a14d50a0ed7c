"""Turn raw article records into display articles."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlsplit

from newsview.data import ArticleRecord, DisplayArticle, EmptyResults
from newsview.render.base import RenderTarget

logger = logging.getLogger(__name__)

NO_TITLE = "No Title Available"
NO_DESCRIPTION = "No description available."
UNKNOWN_SOURCE = "Unknown Source"
UNKNOWN_DATE = "Unknown Date"
INVALID_DATE = "Invalid Date"
DEFAULT_IMAGE_ALT = "News Article Image"
BROKEN_IMAGE_ALT = "Image failed to load, placeholder used."

# Fixed English abbreviations so output does not depend on the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def placeholder_image_url(width: int = 600, height: int = 400) -> str:
    """URL of a generated "No Image" placeholder."""
    return f"https://placehold.co/{width}x{height}/F0F0F0/888888?text=No+Image"


def format_date(value: Any) -> str:
    """Format an ISO-8601 timestamp as e.g. ``"Oct 27, 2023"``.

    Aware timestamps are converted to UTC, naive ones are taken as UTC.
    Returns ``"Unknown Date"`` for a missing value and ``"Invalid Date"`` for
    one that cannot be parsed.
    """
    if value is None or value == "":
        return UNKNOWN_DATE
    if not isinstance(value, str):
        logger.warning("Invalid date value: %r", value)
        return INVALID_DATE
    try:
        parsed = datetime.fromisoformat(value.strip())
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        parsed = parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        logger.warning("Invalid date string: %r", value)
        return INVALID_DATE

    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def _text(value: Any) -> str | None:
    """Return the value if it is a non-blank string."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def _link(value: Any) -> str:
    """Return the value if it is an http(s) URL, else an empty string."""
    url = _text(value)
    if url is None:
        return ""
    try:
        scheme = urlsplit(url.strip()).scheme
    except ValueError:
        return ""
    if scheme.lower() not in ("http", "https"):
        logger.warning("Dropping article link with scheme %r", scheme)
        return ""
    return url


class ArticleRenderer:
    """Render article records into a target.

    Args:
        target: Display surface to write into.
        placeholder_width: Width of the placeholder image.
        placeholder_height: Height of the placeholder image.
    """

    def __init__(
        self,
        target: RenderTarget,
        *,
        placeholder_width: int = 600,
        placeholder_height: int = 400,
    ) -> None:
        self._target = target
        self._placeholder = placeholder_image_url(placeholder_width, placeholder_height)

    @property
    def target(self) -> RenderTarget:
        return self._target

    @property
    def placeholder_url(self) -> str:
        return self._placeholder

    def to_display(self, record: ArticleRecord) -> DisplayArticle:
        """Resolve every field of a record, substituting fallbacks."""
        if not isinstance(record, Mapping):
            record = {}

        source = record.get("source")
        source_name = _text(source.get("name")) if isinstance(source, Mapping) else None
        title = _text(record.get("title"))

        return DisplayArticle(
            title=title or NO_TITLE,
            description=_text(record.get("description")) or NO_DESCRIPTION,
            url=_link(record.get("url")),
            image_url=_link(record.get("image")) or self._placeholder,
            image_alt=title or DEFAULT_IMAGE_ALT,
            source_name=source_name or UNKNOWN_SOURCE,
            published=format_date(record.get("publishedAt")),
        )

    def render(self, records: list[ArticleRecord]) -> list[DisplayArticle]:
        """Replace the target's contents with the given records.

        Args:
            records: Article records in API order.

        Returns:
            The display articles appended to the target, in the same order.
        """
        self._target.clear()

        if not records:
            self._target.append(EmptyResults())
            return []

        articles = [self.to_display(record) for record in records]
        for article in articles:
            self._target.append(article)
        return articles

    def on_image_error(self, article: DisplayArticle) -> DisplayArticle:
        """Post-render hook for an image that failed to load.

        Returns:
            A copy of the article showing the placeholder image.
        """
        logger.debug("Image failed to load: %s", article.image_url)
        return article.with_image(self._placeholder, BROKEN_IMAGE_ALT)
