"""Text display widgets: scrollable viewport and error panel."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static


class ContentViewport(VerticalScroll):
    """Scrollable plain-text viewport for logs, descriptions and YAML."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._content: str | None = None

    def compose(self) -> ComposeResult:
        yield Static(id="content-text", markup=False)

    @property
    def content(self) -> str:
        return self._content or ""

    def set_content(self, content: str) -> bool:
        """Replace the text; scroll position resets on change."""
        if content == self._content:
            return False
        self._content = content
        self.query_one("#content-text", Static).update(Text(content))
        self.scroll_home(animate=False)
        return True


class ErrorPanel(Static):
    """Full-screen error overlay."""

    def show_error(self, message: str) -> None:
        self.update(Text(message, style="bold red"))
