"""Plain-text render target."""

import sys
from typing import TextIO

from newsview.data import DisplayArticle, EmptyResults, RenderUnit


class ConsoleTarget:
    """Print articles, loading and error state to a text stream.

    Args:
        stream: Where to write (default: stdout).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout
        self._count = 0

    def _print(self, text: str = "") -> None:
        print(text, file=self._stream)

    def clear(self) -> None:
        self._count = 0

    def append(self, unit: RenderUnit) -> None:
        if isinstance(unit, EmptyResults):
            self._print(unit.message)
            return
        if isinstance(unit, DisplayArticle):
            self._count += 1
            self._print(f"\n{self._count}. {unit.title}")
            self._print(f"   {unit.details}")
            self._print(f"   {unit.description}")
            if unit.url:
                self._print(f"   URL: {unit.url}")

    def begin_cycle(self) -> None:
        self.clear()

    def show_loading(self) -> None:
        self._print("Loading news...")

    def hide_loading(self) -> None:
        """Nothing to undo: the loading line stays in the stream."""

    def show_error(self, message: str, details: str = "") -> None:
        self.clear()
        self._print(f"Error: {message}")
        if details:
            self._print(f"   {details}")
