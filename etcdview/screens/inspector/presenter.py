"""Inspector presenter - maps a Session to what the screen displays.

Kept free of widgets so the header, help line and pane selection for each view
can be checked without running the app.
"""

from __future__ import annotations

from dataclasses import dataclass

from etcdview.constants import ui
from etcdview.models.state.session import Session
from etcdview.models.state.view_state import (
    Listing,
    SelectingSubProcess,
    ViewingConfig,
    ViewingDescription,
    ViewingLog,
)


@dataclass(frozen=True)
class ScreenModel:
    """Everything the inspector screen needs for one redraw."""

    header: str
    help: str
    pane: str
    content: str = ""
    error: str | None = None


def format_error(error: BaseException) -> str:
    return ui.ERROR_TEMPLATE.format(error=error)


def present(session: Session) -> ScreenModel:
    """Build the screen model for ``session``.

    A pending error overrides every view.
    """
    view = session.view
    if isinstance(view, SelectingSubProcess):
        model = ScreenModel(
            header=ui.SELECT_CONTAINER_HEADER.format(pod=view.member.name),
            help=ui.SELECT_CONTAINER_HELP,
            pane=ui.CONTAINER_LIST_ID,
        )
    elif isinstance(view, ViewingLog):
        model = ScreenModel(
            header=ui.LOG_HEADER.format(pod=view.member.name, container=view.sub_process),
            help=ui.LOG_HELP,
            pane=ui.CONTENT_VIEW_ID,
            content=view.content,
        )
    elif isinstance(view, ViewingDescription):
        model = ScreenModel(
            header=ui.DESCRIBE_HEADER.format(pod=view.member.name),
            help=ui.TEXT_VIEW_HELP,
            pane=ui.CONTENT_VIEW_ID,
            content=view.content,
        )
    elif isinstance(view, ViewingConfig):
        model = ScreenModel(
            header=ui.CONFIG_HEADER.format(pod=view.member.name),
            help=ui.TEXT_VIEW_HELP,
            pane=ui.CONTENT_VIEW_ID,
            content=view.content,
        )
    else:
        assert isinstance(view, Listing)
        model = ScreenModel(
            header=ui.LISTING_HEADER.format(
                namespace=session.namespace, name=session.resource_name
            ),
            help=ui.LISTING_HELP,
            pane=ui.MEMBER_LIST_ID,
        )

    if session.pending_error is not None:
        return ScreenModel(
            header=model.header,
            help=model.help,
            pane=ui.ERROR_PANEL_ID,
            error=format_error(session.pending_error),
        )
    return model
