"""Inspector screen - hosts the render adapters for every view."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import ContentSwitcher, Static

from etcdview.constants import ui
from etcdview.models.state.session import Session
from etcdview.screens.inspector.presenter import ScreenModel, present
from etcdview.widgets import ContainerList, ContentViewport, ErrorPanel, MemberList

logger = logging.getLogger(__name__)


class InspectorScreen(Screen[None]):
    """Single screen whose panes are switched by the session's view."""

    def compose(self) -> ComposeResult:
        yield Static(id=ui.HEADER_ID, markup=False)
        with ContentSwitcher(id=ui.SWITCHER_ID, initial=ui.MEMBER_LIST_ID):
            yield MemberList(id=ui.MEMBER_LIST_ID)
            yield ContainerList(id=ui.CONTAINER_LIST_ID)
            yield ContentViewport(id=ui.CONTENT_VIEW_ID)
        yield ErrorPanel(id=ui.ERROR_PANEL_ID)
        yield Static(id=ui.HELP_ID, markup=False)

    @property
    def member_list(self) -> MemberList:
        return self.query_one(f"#{ui.MEMBER_LIST_ID}", MemberList)

    @property
    def container_list(self) -> ContainerList:
        return self.query_one(f"#{ui.CONTAINER_LIST_ID}", ContainerList)

    @property
    def viewport(self) -> ContentViewport:
        return self.query_one(f"#{ui.CONTENT_VIEW_ID}", ContentViewport)

    def cursor_for(self, session: Session) -> int | None:
        """Cursor row of the list adapter active in ``session``'s view."""
        pane = present(session).pane
        if pane == ui.MEMBER_LIST_ID:
            return self.member_list.cursor
        if pane == ui.CONTAINER_LIST_ID:
            return self.container_list.cursor
        return None

    def render_session(self, session: Session) -> ScreenModel:
        """Push ``session`` into the widgets and return the model used."""
        model = present(session)
        switcher = self.query_one(f"#{ui.SWITCHER_ID}", ContentSwitcher)
        error_panel = self.query_one(f"#{ui.ERROR_PANEL_ID}", ErrorPanel)
        header = self.query_one(f"#{ui.HEADER_ID}", Static)
        help_line = self.query_one(f"#{ui.HELP_ID}", Static)

        # List contents are kept current in every view.
        self.member_list.set_members(session.members)
        self.member_list.loading = session.loading
        self.container_list.set_containers(session.sub_processes)

        if model.error is not None:
            error_panel.show_error(model.error)
            error_panel.display = True
            switcher.display = False
            header.display = False
            help_line.display = False
            return model

        error_panel.display = False
        switcher.display = True
        header.display = True
        help_line.display = True
        header.update(model.header)
        help_line.update(model.help)
        if model.pane == ui.CONTENT_VIEW_ID:
            self.viewport.set_content(model.content)
        if switcher.current != model.pane:
            logger.debug("Switching pane %s -> %s", switcher.current, model.pane)
            switcher.current = model.pane
        active: Widget = self.query_one(f"#{model.pane}")
        if active.focusable and self.focused is not active:
            active.focus()
        return model
