"""Events consumed by the transition function.

Key presses come from the terminal; every other event is the completion of a
dispatched fetch and carries the request it answers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from etcdview.core.requests import (
    Describe,
    DumpConfig,
    FetchRequest,
    ListMembers,
    ListSubProcesses,
    StreamLog,
)
from etcdview.models.core.member import Member


@dataclass(frozen=True)
class KeyPressed:
    """A key press with the cursor row of the active list, if any."""

    key: str
    cursor: int | None = None


@dataclass(frozen=True)
class MembersLoaded:
    """Member list fetched."""

    request: ListMembers
    members: tuple[Member, ...]


@dataclass(frozen=True)
class SubProcessesLoaded:
    """Container names of one member fetched."""

    request: ListSubProcesses
    sub_processes: tuple[str, ...]


@dataclass(frozen=True)
class LogLoaded:
    """Log tail of one container fetched."""

    request: StreamLog
    content: str


@dataclass(frozen=True)
class DescriptionLoaded:
    """Description text of one member built."""

    request: Describe
    content: str


@dataclass(frozen=True)
class ConfigLoaded:
    """YAML dump of one member built."""

    request: DumpConfig
    content: str


@dataclass(frozen=True)
class FetchFailed:
    """A fetch raised; ``error`` is the exception itself."""

    request: FetchRequest
    error: BaseException


CompletionEvent = Union[
    MembersLoaded,
    SubProcessesLoaded,
    LogLoaded,
    DescriptionLoaded,
    ConfigLoaded,
    FetchFailed,
]
Event = Union[KeyPressed, CompletionEvent]

__all__ = [
    "CompletionEvent",
    "ConfigLoaded",
    "DescriptionLoaded",
    "Event",
    "FetchFailed",
    "KeyPressed",
    "LogLoaded",
    "MembersLoaded",
    "SubProcessesLoaded",
]
