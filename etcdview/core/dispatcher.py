"""Fetch dispatcher - turns fetch requests into deferred provider calls.

Each request becomes a zero-argument coroutine function that performs exactly
one provider call and returns exactly one completion event. Failures are
returned as ``FetchFailed`` rather than raised, so a worker running the
operation never ends in an error state.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from etcdview.controllers.base import BaseController
from etcdview.core.events import (
    CompletionEvent,
    ConfigLoaded,
    DescriptionLoaded,
    FetchFailed,
    LogLoaded,
    MembersLoaded,
    SubProcessesLoaded,
)
from etcdview.core.requests import (
    Describe,
    DumpConfig,
    FetchRequest,
    ListMembers,
    ListSubProcesses,
    StreamLog,
)
from etcdview.errors import ResourceError

logger = logging.getLogger(__name__)

FetchOperation = Callable[[], Awaitable[CompletionEvent]]
Scheduler = Callable[[FetchOperation, FetchRequest], Any]


class FetchDispatcher:
    """Schedules provider calls without blocking the event loop.

    The dispatcher does not deduplicate or cancel; avoiding double dispatch is
    the state machine's job.
    """

    def __init__(self, provider: BaseController, schedule: Scheduler) -> None:
        """Initialize the dispatcher.

        Args:
            provider: Resource provider the operations call.
            schedule: Callable that runs an operation in the background and
                delivers its completion event back to the event loop.
        """
        self._provider = provider
        self._schedule = schedule

    async def _fetch(self, request: FetchRequest) -> CompletionEvent:
        provider = self._provider
        if isinstance(request, ListMembers):
            members = await provider.list_members(request.namespace, request.resource_name)
            return MembersLoaded(request, tuple(members))
        if isinstance(request, ListSubProcesses):
            names = await provider.list_sub_processes(request.namespace, request.member.name)
            return SubProcessesLoaded(request, tuple(names))
        if isinstance(request, StreamLog):
            content = await provider.stream_recent_output(
                request.namespace,
                request.member.name,
                request.sub_process,
                request.max_lines,
            )
            return LogLoaded(request, content)
        if isinstance(request, Describe):
            content = await provider.describe(request.namespace, request.member.name)
            return DescriptionLoaded(request, content)
        if isinstance(request, DumpConfig):
            content = await provider.dump_config(request.namespace, request.member.name)
            return ConfigLoaded(request, content)
        raise TypeError(f"Unsupported fetch request: {request!r}")

    def operation(self, request: FetchRequest) -> FetchOperation:
        """Build the deferred operation for ``request``."""

        async def run() -> CompletionEvent:
            started = time.monotonic()
            try:
                event = await self._fetch(request)
            except ResourceError as exc:
                event = FetchFailed(request, exc)
            except Exception as exc:
                logger.exception("Unexpected failure during %s fetch", request.kind.value)
                event = FetchFailed(request, exc)
            duration_ms = (time.monotonic() - started) * 1000
            logger.debug(
                "%s fetch finished with %s (%.2fms)",
                request.kind.value,
                type(event).__name__,
                duration_ms,
            )
            return event

        return run

    def dispatch(self, request: FetchRequest) -> None:
        """Schedule ``request``; its completion arrives later as an event."""
        logger.debug("Dispatching %s fetch", request.kind.value)
        self._schedule(self.operation(request), request)
