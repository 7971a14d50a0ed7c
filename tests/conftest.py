"""Shared test fixtures."""

from __future__ import annotations

import pytest

from newsview.data import ArticleRecord, QueryIntent, RenderUnit
from newsview.errors import FetchError
from newsview.search.base import LoadingIndicator


class RecordingTarget:
    """In-memory render target and status display."""

    def __init__(self) -> None:
        self.units: list[RenderUnit] = []
        self.events: list[str] = []
        self.error: tuple[str, str] | None = None

    def clear(self) -> None:
        self.events.append("clear")
        self.units.clear()

    def append(self, unit: RenderUnit) -> None:
        self.units.append(unit)

    def begin_cycle(self) -> None:
        self.events.append("begin")
        self.error = None
        self.units.clear()

    def show_loading(self) -> None:
        self.events.append("show_loading")

    def hide_loading(self) -> None:
        self.events.append("hide_loading")

    def show_error(self, message: str, details: str = "") -> None:
        self.events.append("error")
        self.error = (message, details)
        self.units.clear()


class FakeFetcher:
    """Fetcher returning canned results and recording intents."""

    def __init__(self, result: list[ArticleRecord] | FetchError | None = None) -> None:
        self.result = result if result is not None else [{"title": "Headline"}]
        self.intents: list[QueryIntent] = []

    async def fetch_news(
        self,
        intent: QueryIntent,
        *,
        loading: LoadingIndicator | None = None,
    ) -> list[ArticleRecord]:
        self.intents.append(intent)
        if loading is not None:
            loading.show_loading()
        try:
            if isinstance(self.result, FetchError):
                raise self.result
            return list(self.result)
        finally:
            if loading is not None:
                loading.hide_loading()


@pytest.fixture
def target() -> RecordingTarget:
    return RecordingTarget()
