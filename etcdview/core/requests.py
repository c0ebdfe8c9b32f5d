"""Commands emitted by the view state machine.

A ``FetchRequest`` describes one resource provider call; the dispatcher turns
it into deferred work. ``Quit`` asks the app to terminate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from etcdview.constants.enums import FetchKind
from etcdview.constants.limits import LOG_TAIL_LINES
from etcdview.models.core.member import Member


@dataclass(frozen=True)
class ListMembers:
    namespace: str
    resource_name: str
    kind: ClassVar[FetchKind] = FetchKind.MEMBERS


@dataclass(frozen=True)
class ListSubProcesses:
    namespace: str
    member: Member
    kind: ClassVar[FetchKind] = FetchKind.SUB_PROCESSES


@dataclass(frozen=True)
class StreamLog:
    namespace: str
    member: Member
    sub_process: str
    max_lines: int = LOG_TAIL_LINES
    kind: ClassVar[FetchKind] = FetchKind.LOG


@dataclass(frozen=True)
class Describe:
    namespace: str
    member: Member
    kind: ClassVar[FetchKind] = FetchKind.DESCRIPTION


@dataclass(frozen=True)
class DumpConfig:
    namespace: str
    member: Member
    kind: ClassVar[FetchKind] = FetchKind.CONFIG


@dataclass(frozen=True)
class Quit:
    """Terminate the process."""


FetchRequest = Union[ListMembers, ListSubProcesses, StreamLog, Describe, DumpConfig]
Command = Union[FetchRequest, Quit]

__all__ = [
    "Command",
    "Describe",
    "DumpConfig",
    "FetchRequest",
    "ListMembers",
    "ListSubProcesses",
    "Quit",
    "StreamLog",
]
