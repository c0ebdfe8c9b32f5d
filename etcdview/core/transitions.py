"""View state machine.

``transition`` is a pure function: it takes the current ``Session`` and one
event and returns the next session plus the commands to run. It performs no
I/O, so the whole navigation table can be exercised without a cluster.

Completion reconciliation is asymmetric. Container list, log and
config completions answer a navigating key press and force their view.
Member list and description completions can come from an in-place refresh and
leave the visible view alone. There is no request generation check, so a slow
stale completion overwrites newer content.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import TypeVar

from etcdview.constants.enums import ViewKind
from etcdview.core.events import (
    ConfigLoaded,
    DescriptionLoaded,
    Event,
    FetchFailed,
    KeyPressed,
    LogLoaded,
    MembersLoaded,
    SubProcessesLoaded,
)
from etcdview.core.requests import (
    Command,
    Describe,
    DumpConfig,
    ListMembers,
    ListSubProcesses,
    Quit,
    StreamLog,
)
from etcdview.keyboard.keys import (
    KEY_BACK,
    KEY_CONFIG,
    KEY_DESCRIBE,
    KEY_INTERRUPT,
    KEY_LOGS,
    KEY_QUIT,
    KEY_REFRESH,
    KEY_SELECT,
)
from etcdview.models.state.session import Session
from etcdview.models.state.view_state import (
    Listing,
    SelectingSubProcess,
    ViewingConfig,
    ViewingDescription,
    ViewingLog,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Transition = tuple[Session, list[Command]]

VIEW_KEYS: dict[ViewKind, frozenset[str]] = {
    ViewKind.LISTING: frozenset(
        {KEY_LOGS, KEY_DESCRIBE, KEY_CONFIG, KEY_REFRESH, KEY_QUIT}
    ),
    ViewKind.SELECTING_SUB_PROCESS: frozenset(
        {KEY_SELECT, KEY_REFRESH, KEY_BACK, KEY_QUIT}
    ),
    ViewKind.VIEWING_LOG: frozenset({KEY_REFRESH, KEY_BACK, KEY_QUIT}),
    ViewKind.VIEWING_DESCRIPTION: frozenset({KEY_REFRESH, KEY_BACK, KEY_QUIT}),
    ViewKind.VIEWING_CONFIG: frozenset({KEY_REFRESH, KEY_BACK, KEY_QUIT}),
}

# Keys honored while the error overlay is shown.
ERROR_KEYS: frozenset[str] = frozenset({KEY_INTERRUPT, KEY_QUIT})


def handles_key(session: Session, key: str) -> bool:
    """Return True when ``key`` is consumed by the table in the current view.

    Keys that are not consumed belong to the active render adapter (cursor
    movement, scrolling).
    """
    if key == KEY_INTERRUPT:
        return True
    if session.has_error:
        return key in ERROR_KEYS
    return key in VIEW_KEYS[session.view.kind]


def start(session: Session) -> Transition:
    """Commands issued once at startup: load the member list."""
    return session.evolve(loading=True), [
        ListMembers(session.namespace, session.resource_name)
    ]


def _pick(items: Sequence[T], cursor: int | None) -> T | None:
    if cursor is None or not 0 <= cursor < len(items):
        return None
    return items[cursor]


def _unchanged(session: Session) -> Transition:
    return session, []


def transition(session: Session, event: Event) -> Transition:
    """Apply one key press or fetch completion to ``session``."""
    if isinstance(event, KeyPressed):
        return _on_key(session, event)
    return _on_completion(session, event)


# ============================================================================
# Key presses
# ============================================================================


def _on_key(session: Session, event: KeyPressed) -> Transition:
    """Apply a key press to the current view.

    While an error is pending, ``q`` quits from any view instead of returning
    to the member list, as the error panel's "Press 'q' to quit" line states.
    Every other key except ``ctrl+c`` is ignored.
    """
    key = event.key
    if key == KEY_INTERRUPT:
        return session, [Quit()]
    if session.has_error:
        # The overlay freezes the session; only quitting is possible.
        if key == KEY_QUIT:
            return session, [Quit()]
        return _unchanged(session)

    view = session.view
    if isinstance(view, Listing):
        return _on_listing_key(session, event)
    if isinstance(view, SelectingSubProcess):
        return _on_selecting_key(session, view, event)
    if isinstance(view, ViewingLog):
        return _on_log_key(session, view, key)
    if isinstance(view, (ViewingDescription, ViewingConfig)):
        return _on_text_key(session, view, key)
    return _unchanged(session)


def _on_listing_key(session: Session, event: KeyPressed) -> Transition:
    """Open logs, description or YAML for the member under the cursor."""
    key = event.key
    if key == KEY_QUIT:
        return session, [Quit()]
    if key == KEY_REFRESH:
        return session.evolve(loading=True), [
            ListMembers(session.namespace, session.resource_name)
        ]
    if key not in (KEY_LOGS, KEY_DESCRIBE, KEY_CONFIG):
        return _unchanged(session)

    member = _pick(session.members, event.cursor)
    if member is None:
        return _unchanged(session)

    namespace = session.namespace
    if key == KEY_LOGS:
        return session.evolve(view=SelectingSubProcess(member), sub_processes=()), [
            ListSubProcesses(namespace, member)
        ]
    if key == KEY_DESCRIBE:
        return session.evolve(view=ViewingDescription(member)), [
            Describe(namespace, member)
        ]
    return session.evolve(view=ViewingConfig(member)), [DumpConfig(namespace, member)]


def _on_selecting_key(
    session: Session, view: SelectingSubProcess, event: KeyPressed
) -> Transition:
    """Stream the container under the cursor or leave the selection."""
    key = event.key
    if key in (KEY_BACK, KEY_QUIT):
        return session.evolve(view=Listing()), []
    if key == KEY_REFRESH:
        return session, [ListSubProcesses(session.namespace, view.member)]
    if key == KEY_SELECT:
        sub_process = _pick(session.sub_processes, event.cursor)
        if sub_process is None:
            return _unchanged(session)
        return session.evolve(view=ViewingLog(view.member, sub_process)), [
            StreamLog(
                session.namespace,
                view.member,
                sub_process,
                session.log_tail_lines,
            )
        ]
    return _unchanged(session)


def _on_log_key(session: Session, view: ViewingLog, key: str) -> Transition:
    """Navigate back from a log tail or re-stream it."""
    if key == KEY_BACK:
        # The container list fetched on the way in is kept, no re-fetch.
        return session.evolve(view=SelectingSubProcess(view.member)), []
    if key == KEY_QUIT:
        return session.evolve(view=Listing()), []
    if key == KEY_REFRESH:
        sub_process = view.sub_process or view.member.name
        return session, [
            StreamLog(
                session.namespace,
                view.member,
                sub_process,
                session.log_tail_lines,
            )
        ]
    return _unchanged(session)


def _on_text_key(
    session: Session,
    view: ViewingDescription | ViewingConfig,
    key: str,
) -> Transition:
    """Refresh or leave the description and YAML views."""
    if key in (KEY_BACK, KEY_QUIT):
        return session.evolve(view=Listing()), []
    if key == KEY_REFRESH:
        if isinstance(view, ViewingDescription):
            return session, [Describe(session.namespace, view.member)]
        return session, [DumpConfig(session.namespace, view.member)]
    return _unchanged(session)


# ============================================================================
# Fetch completions
# ============================================================================


def _on_completion(session: Session, event: Event) -> Transition:
    """Reconcile a fetch completion with the current view."""
    if isinstance(event, MembersLoaded):
        return session.evolve(members=tuple(event.members), loading=False), []

    if isinstance(event, SubProcessesLoaded):
        return session.evolve(
            sub_processes=tuple(event.sub_processes),
            view=SelectingSubProcess(event.request.member),
        ), []

    if isinstance(event, LogLoaded):
        request = event.request
        return session.evolve(
            view=ViewingLog(request.member, request.sub_process, event.content),
        ), []

    if isinstance(event, DescriptionLoaded):
        view = session.view
        if not isinstance(view, ViewingDescription):
            return _unchanged(session)
        return session.evolve(view=replace(view, content=event.content)), []

    if isinstance(event, ConfigLoaded):
        return session.evolve(
            view=ViewingConfig(event.request.member, event.content),
        ), []

    if isinstance(event, FetchFailed):
        logger.warning(
            "%s fetch failed: %s", event.request.kind.value, event.error
        )
        return session.evolve(pending_error=event.error, loading=False), []

    logger.debug("Ignoring unknown event %r", event)
    return _unchanged(session)


__all__ = [
    "ERROR_KEYS",
    "VIEW_KEYS",
    "Transition",
    "handles_key",
    "start",
    "transition",
]
