"""Static HTML page render target."""

from html import escape
from pathlib import Path

from newsview.data import Category, DisplayArticle, EmptyResults, RenderUnit
from newsview.render.renderer import BROKEN_IMAGE_ALT, placeholder_image_url

_STYLE = """
body { font-family: sans-serif; background: #f5f5f5; margin: 0; padding: 1rem; }
#categories button { margin: 0 .25rem .5rem 0; padding: .4rem .8rem; }
#categories button.active { background: #1d4ed8; color: #fff; }
#news-container { display: grid; grid-template-columns: repeat(auto-fill, minmax(280px, 1fr)); gap: 1rem; }
.news-article { background: #fff; border-radius: 8px; padding: 1rem; }
.news-article img { width: 100%; height: auto; }
.article-details { color: #666; font-size: .85rem; }
.hidden { display: none; }
""".strip()


class HtmlPage:
    """Collect rendered units and write them out as a self-contained page.

    Category buttons carry ``data-category`` and the active one is highlighted.
    Broken article images are swapped for the placeholder in the browser
    through an ``onerror`` handler.

    Args:
        path: File written by :meth:`write`.
        placeholder_width: Width of the broken-image placeholder.
        placeholder_height: Height of the broken-image placeholder.
    """

    def __init__(
        self,
        path: Path,
        *,
        placeholder_width: int = 600,
        placeholder_height: int = 400,
    ) -> None:
        self._path = path
        self._placeholder = placeholder_image_url(placeholder_width, placeholder_height)
        self._units: list[RenderUnit] = []
        self._loading = False
        self._error: tuple[str, str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def units(self) -> list[RenderUnit]:
        return list(self._units)

    @property
    def error(self) -> tuple[str, str] | None:
        return self._error

    @property
    def loading(self) -> bool:
        return self._loading

    # RenderTarget

    def clear(self) -> None:
        self._units.clear()

    def append(self, unit: RenderUnit) -> None:
        self._units.append(unit)

    # StatusDisplay

    def begin_cycle(self) -> None:
        self._error = None
        self._units.clear()

    def show_loading(self) -> None:
        self._loading = True

    def hide_loading(self) -> None:
        self._loading = False

    def show_error(self, message: str, details: str = "") -> None:
        self._error = (message, details)
        self._units.clear()

    def render_html(self, *, active_category: str | None = None, search_text: str = "") -> str:
        """Build the page.

        Args:
            active_category: Category whose button is highlighted, if any.
            search_text: Value shown in the search box.
        """
        buttons = []
        for category in Category:
            css = ' class="active"' if category.value == active_category else ""
            buttons.append(
                f'<button data-category="{category.value}"{css}>{escape(category.label)}</button>'
            )

        loading_css = "" if self._loading else ' class="hidden"'
        if self._error is None:
            error_html = '<div id="error-message" class="hidden"><p id="error-details"></p></div>'
        else:
            message, details = self._error
            error_html = (
                f'<div id="error-message"><p>{escape(message)}</p>'
                f'<p id="error-details">{escape(details)}</p></div>'
            )

        body = "\n".join(self._render_unit(unit) for unit in self._units)
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
            "<title>News</title>\n"
            f"<style>\n{_STYLE}\n</style>\n</head>\n<body>\n"
            f'<nav id="categories">{"".join(buttons)}</nav>\n'
            f'<input id="search-input" type="search" value="{escape(search_text)}">\n'
            f'<p id="loading-message"{loading_css}>Loading news...</p>\n'
            f"{error_html}\n"
            f'<main id="news-container">\n{body}\n</main>\n'
            "</body>\n</html>\n"
        )

    def write(self, *, active_category: str | None = None, search_text: str = "") -> Path:
        """Write the page to :attr:`path` and return it."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            self.render_html(active_category=active_category, search_text=search_text),
            encoding="utf-8",
        )
        return self._path

    def _render_unit(self, unit: RenderUnit) -> str:
        if isinstance(unit, EmptyResults):
            return f'<p class="no-results">{escape(unit.message)}</p>'
        return self._render_article(unit)

    def _render_article(self, article: DisplayArticle) -> str:
        onerror = (
            f"this.onerror=null;this.src='{self._placeholder}';"
            f"this.alt='{BROKEN_IMAGE_ALT}';"
        )
        href = f' href="{escape(article.url)}"' if article.url else ""
        return (
            '<div class="news-article">'
            f'<img src="{escape(article.image_url)}" alt="{escape(article.image_alt)}"'
            f' onerror="{escape(onerror)}">'
            f'<h2><a{href} target="_blank" rel="noopener noreferrer">'
            f"{escape(article.title)}</a></h2>"
            f"<p>{escape(article.description)}</p>"
            f'<p class="article-details">{escape(article.details)}</p>'
            "</div>"
        )
