"""Main application class for the etcd pod viewer.

The app is the event loop of the inspector. Key presses (through the ``press``
action) and ``FetchCompleted`` messages both arrive through Textual's message
queue, are handled one at a time, and are fed to the pure ``transition``
function. Fetches run as Textual workers and report back only by posting a
``FetchCompleted`` message.
"""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding
from textual.message import Message

from etcdview.constants import APP_TITLE
from etcdview.controllers import BaseController, PodController
from etcdview.core import FetchDispatcher, handles_key, start, transition
from etcdview.core.dispatcher import FetchOperation
from etcdview.core.events import CompletionEvent, KeyPressed
from etcdview.core.requests import Command, FetchRequest, Quit
from etcdview.keyboard import APP_BINDINGS
from etcdview.models.state.app_settings import AppSettings
from etcdview.models.state.session import Session
from etcdview.screens import InspectorScreen

logger = logging.getLogger(__name__)


class FetchCompleted(Message):
    """Message carrying a completion event back into the event loop."""

    def __init__(self, event: CompletionEvent) -> None:
        super().__init__()
        self.event = event


class EtcdViewerApp(App[None]):
    """Main TUI application for inspecting the pods of an etcd resource."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    session: Session

    def __init__(
        self,
        namespace: str,
        resource_name: str,
        provider: BaseController | None = None,
        settings: AppSettings | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings = settings or AppSettings()
        self.provider = provider or PodController(self.settings)
        self.session = Session.initial(
            namespace, resource_name, self.settings.log_tail_lines
        )
        self.dispatcher = FetchDispatcher(self.provider, self._schedule)
        self.sub_title = f"{namespace}/{resource_name}"
        self._inspector: InspectorScreen | None = None

    async def on_mount(self) -> None:
        """Show the inspector and start loading the member list."""
        self._inspector = InspectorScreen()
        await self.push_screen(self._inspector)
        self._apply(*start(self.session))

    # =========================================================================
    # Fetch dispatch
    # =========================================================================

    def _schedule(self, operation: FetchOperation, request: FetchRequest) -> None:
        self.run_worker(
            self._deliver(operation),
            name=f"fetch-{request.kind.value}",
            group="fetch",
            exclusive=False,
            exit_on_error=False,
        )

    async def _deliver(self, operation: FetchOperation) -> None:
        event = await operation()
        self.post_message(FetchCompleted(event))

    # =========================================================================
    # Event loop
    # =========================================================================

    def _apply(self, session: Session, commands: list[Command]) -> None:
        self.session = session
        if any(isinstance(command, Quit) for command in commands):
            logger.debug("Quit requested")
            self.exit()
            return
        for command in commands:
            self.dispatcher.dispatch(command)
        self._render()

    def _render(self) -> None:
        if self._inspector is not None and self._inspector.is_mounted:
            self._inspector.render_session(self.session)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Disable ``press`` bindings for keys the current view does not use."""
        if action == "press" and parameters:
            return handles_key(self.session, str(parameters[0]))
        return True

    def action_press(self, key: str) -> None:
        """Feed a navigation key into the state machine."""
        if not handles_key(self.session, key):
            return
        cursor = (
            self._inspector.cursor_for(self.session)
            if self._inspector is not None
            else None
        )
        logger.debug("Key %r in %s (cursor=%s)", key, self.session.view.kind.value, cursor)
        self._apply(*transition(self.session, KeyPressed(key, cursor)))

    def on_fetch_completed(self, message: FetchCompleted) -> None:
        self._apply(*transition(self.session, message.event))
