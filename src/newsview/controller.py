"""Drive fetch/render cycles from user actions."""

import logging
from dataclasses import dataclass

from newsview.data import Category, CategoryIntent, DisplayArticle, QueryIntent, SearchIntent
from newsview.errors import FetchError, MalformedResponseError
from newsview.render.base import StatusDisplay
from newsview.render.renderer import ArticleRenderer
from newsview.search.base import NewsFetcher

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to load news."
UNEXPECTED_FORMAT = "API response format unexpected."


@dataclass
class ViewState:
    """Mutable state owned by a single controller."""

    intent: QueryIntent
    generation: int = 0

    @property
    def active_category(self) -> str | None:
        if isinstance(self.intent, CategoryIntent):
            return self.intent.category
        return None

    @property
    def search_text(self) -> str:
        if isinstance(self.intent, SearchIntent):
            return self.intent.text
        return ""


@dataclass(frozen=True)
class CycleResult:
    """Outcome of one fetch cycle."""

    intent: QueryIntent
    articles: list[DisplayArticle]
    error: FetchError | None = None
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.stale


class NewsController:
    """Turn category and search actions into fetch/render cycles.

    Flow per action:
    1. Update the intent (category and search text are mutually exclusive)
    2. Clear the previous error and content
    3. Fetch with the loading indicator shown
    4. Render the articles, or show the error

    Args:
        fetcher: Source of raw article records.
        renderer: Renderer writing into the display target.
        status: Loading and error display.
        default_category: Category loaded at startup.
        drop_stale_responses: Discard a response when a newer cycle has
            started since its request was sent.
    """

    def __init__(
        self,
        fetcher: NewsFetcher,
        renderer: ArticleRenderer,
        status: StatusDisplay,
        *,
        default_category: str = Category.GENERAL.value,
        drop_stale_responses: bool = True,
    ) -> None:
        self._fetcher = fetcher
        self._renderer = renderer
        self._status = status
        self._default_category = Category.parse(default_category).value
        self._drop_stale = drop_stale_responses
        self.state = ViewState(intent=CategoryIntent(self._default_category))

    async def start(self) -> CycleResult:
        """Load the default category."""
        self.state.intent = CategoryIntent(self._default_category)
        return await self._run_cycle()

    async def refresh(self) -> CycleResult:
        """Re-run the current intent."""
        return await self._run_cycle()

    async def select_category(self, name: str) -> CycleResult:
        """Switch to a category, clearing any search text.

        Raises:
            ValueError: If the category is not recognized.
        """
        category = Category.parse(name)
        self.state.intent = CategoryIntent(category.value)
        return await self._run_cycle()

    async def submit_search(self, text: str) -> CycleResult:
        """Search for text, or fall back to a category when it is blank.

        Blank text re-runs the active category, or the general category when
        a search was active.
        """
        query = text.strip()
        if query:
            self.state.intent = SearchIntent(query)
        elif self.state.active_category is None:
            self.state.intent = CategoryIntent(Category.GENERAL.value)
        return await self._run_cycle()

    async def _run_cycle(self) -> CycleResult:
        self.state.generation += 1
        generation = self.state.generation
        intent = self.state.intent

        self._status.begin_cycle()
        try:
            records = await self._fetcher.fetch_news(intent, loading=self._status)
        except FetchError as e:
            if self._is_stale(generation):
                return CycleResult(intent=intent, articles=[], error=e, stale=True)
            logger.debug("Showing fetch error: %s", e)
            if isinstance(e, MalformedResponseError):
                self._status.show_error(UNEXPECTED_FORMAT, str(e))
            else:
                self._status.show_error(FETCH_FAILED, str(e))
            return CycleResult(intent=intent, articles=[], error=e)

        if self._is_stale(generation):
            return CycleResult(intent=intent, articles=[], stale=True)

        articles = self._renderer.render(records)
        logger.info("Rendered %d articles for %s", len(articles), intent)
        return CycleResult(intent=intent, articles=articles)

    def _is_stale(self, generation: int) -> bool:
        if self._drop_stale and generation != self.state.generation:
            logger.debug(
                "Dropping response from cycle %d (current: %d)", generation, self.state.generation
            )
            return True
        return False
