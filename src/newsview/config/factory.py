"""Factory functions to create components from configuration."""

from newsview.config.models import (
    ConsoleOutputConfig,
    GNewsConfig,
    HtmlOutputConfig,
    NewsViewConfig,
    OutputConfig,
    PlaceholderConfig,
)
from newsview.controller import NewsController
from newsview.render.base import RenderTarget
from newsview.render.console import ConsoleTarget
from newsview.render.html import HtmlPage
from newsview.render.renderer import ArticleRenderer
from newsview.search.gnews import GNewsClient


def create_client(config: GNewsConfig) -> GNewsClient:
    """Create a GNews client from config."""
    return GNewsClient(
        api_key=config.api_key,
        base_url=config.base_url,
        lang=config.lang,
        country=config.country,
    )


def create_target(
    config: OutputConfig,
    placeholder: PlaceholderConfig,
) -> ConsoleTarget | HtmlPage:
    """Create a render target from config."""
    if isinstance(config, ConsoleOutputConfig):
        return ConsoleTarget()
    if isinstance(config, HtmlOutputConfig):
        return HtmlPage(
            config.path,
            placeholder_width=placeholder.width,
            placeholder_height=placeholder.height,
        )
    msg = f"Unknown output config type: {type(config)}"
    raise ValueError(msg)


def create_renderer(target: RenderTarget, placeholder: PlaceholderConfig) -> ArticleRenderer:
    """Create the article renderer for a target."""
    return ArticleRenderer(
        target,
        placeholder_width=placeholder.width,
        placeholder_height=placeholder.height,
    )


def create_from_config(
    config: NewsViewConfig,
    *,
    html_override: str | None = None,
) -> tuple[NewsController, ConsoleTarget | HtmlPage]:
    """Create a controller and its display target from root config.

    Args:
        config: Root configuration.
        html_override: Write an HTML page to this path instead of the
            configured output.

    Returns:
        Tuple of (controller, target).
    """
    output: OutputConfig = config.output
    if html_override is not None:
        output = HtmlOutputConfig(path=html_override)

    target = create_target(output, config.placeholder)
    controller = NewsController(
        fetcher=create_client(config.gnews),
        renderer=create_renderer(target, config.placeholder),
        status=target,
        default_category=config.viewer.default_category,
        drop_stale_responses=config.viewer.drop_stale_responses,
    )
    return (controller, target)
