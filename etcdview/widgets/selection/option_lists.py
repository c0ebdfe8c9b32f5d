"""List adapters for members and containers.

Both lists own their cursor. Replacing the items resets the cursor to the
first row; the session never assumes a cursor survives a content replacement.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from etcdview.models.core.member import Member


class _CursorOptionList(OptionList):
    """OptionList that remembers the items it renders."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._items: tuple = ()

    @property
    def cursor(self) -> int | None:
        """Row under the cursor, or None when the list is empty."""
        return self.highlighted

    def _replace(self, items: Sequence, options: list[Option]) -> bool:
        if tuple(items) == self._items:
            return False
        self._items = tuple(items)
        self.clear_options()
        self.add_options(options)
        if options:
            self.highlighted = 0
        return True


class MemberList(_CursorOptionList):
    """Pod list showing status, readiness, node and age per row."""

    @staticmethod
    def _prompt(member: Member) -> Text:
        prompt = Text(member.title(), style="bold")
        prompt.append("\n")
        prompt.append(member.description(), style="dim")
        return prompt

    def set_members(self, members: Sequence[Member]) -> bool:
        """Replace rows; returns False when the members are unchanged."""
        return self._replace(
            members,
            [Option(self._prompt(member), id=member.name) for member in members],
        )


class ContainerList(_CursorOptionList):
    """Container names of the selected pod."""

    def set_containers(self, names: Sequence[str]) -> bool:
        """Replace rows; returns False when the names are unchanged."""
        return self._replace(names, [Option(Text(name)) for name in names])
