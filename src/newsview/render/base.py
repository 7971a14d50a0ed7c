from typing import Protocol

from newsview.data import RenderUnit


class RenderTarget(Protocol):
    """Display surface the renderer writes into."""

    def clear(self) -> None:
        """Remove all rendered units."""
        ...

    def append(self, unit: RenderUnit) -> None:
        """Add one unit after the existing ones."""
        ...


class StatusDisplay(Protocol):
    """Loading and error state shown alongside the rendered units."""

    def begin_cycle(self) -> None:
        """Hide any previous error and clear the rendered units."""
        ...

    def show_loading(self) -> None: ...

    def hide_loading(self) -> None: ...

    def show_error(self, message: str, details: str = "") -> None:
        """Show an error and clear the rendered units."""
        ...
