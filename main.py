#!/usr/bin/env python
"""CLI for the newsview headline browser."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator, model_validator

from newsview.config import create_from_config, get_default_config_path, load_config
from newsview.controller import CycleResult, NewsController
from newsview.data import Category
from newsview.render import ConsoleTarget, HtmlPage

logger = logging.getLogger(__name__)

PROMPT = "news> "


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    category: str | None = None
    search: str | None = None
    html: str | None = None
    interactive: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("category")
    @classmethod
    def category_must_be_known(cls, v: str | None) -> str | None:
        return Category.parse(v).value if v is not None else None

    @model_validator(mode="after")
    def category_or_search(self) -> "CLIArgs":
        if self.category is not None and self.search is not None:
            raise ValueError("Use either --category or --search, not both")
        return self


def _publish(
    controller: NewsController,
    target: ConsoleTarget | HtmlPage,
    result: CycleResult,
) -> None:
    if isinstance(target, HtmlPage):
        path = target.write(
            active_category=controller.state.active_category,
            search_text=controller.state.search_text,
        )
        logger.info("Wrote %s", path)
    if result.ok:
        logger.debug("Cycle for %s rendered %d articles", result.intent, len(result.articles))


async def _interactive(controller: NewsController, target: ConsoleTarget | HtmlPage) -> None:
    """Read commands from stdin until EOF or ``:quit``.

    ``:<category>`` selects a category, anything else is a search.
    """
    print("Categories: " + ", ".join(c.label for c in Category))
    print("Type :<category> to browse, text to search, :quit to exit.")
    while True:
        try:
            line = await asyncio.to_thread(input, PROMPT)
        except EOFError:
            return

        command = line.strip()
        if command == ":quit":
            return
        if command.startswith(":"):
            try:
                result = await controller.select_category(command[1:])
            except ValueError as e:
                print(e)
                continue
        else:
            result = await controller.submit_search(command)
        _publish(controller, target, result)


async def run(args: CLIArgs) -> None:
    """Run one fetch cycle, or the interactive loop.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    logging.getLogger().setLevel(config.logging.level)
    controller, target = create_from_config(config, html_override=args.html)

    if args.search is not None:
        result = await controller.submit_search(args.search)
    elif args.category is not None:
        result = await controller.select_category(args.category)
    else:
        result = await controller.start()
    _publish(controller, target, result)

    if args.interactive:
        await _interactive(controller, target)


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Browse news headlines by category or search.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--category",
        help="Category to browse: " + ", ".join(c.value for c in Category),
    )
    group.add_argument(
        "--search",
        "-s",
        help="Free-text search query",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--html",
        type=str,
        default=None,
        help="Write an HTML page to this path instead of the configured output",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        default=False,
        help="Keep reading categories and searches from stdin",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            config=config_path,
            category=ns.category,
            search=ns.search,
            html=ns.html,
            interactive=ns.interactive,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
