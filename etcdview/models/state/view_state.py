"""View state variants.

The active screen is one of five frozen dataclasses. Every variant other than
``Listing`` carries the selected ``Member``, so a log view without a selected
pod cannot be expressed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from etcdview.constants.enums import ViewKind
from etcdview.models.core.member import Member


@dataclass(frozen=True)
class Listing:
    """Member list view."""

    kind: ClassVar[ViewKind] = ViewKind.LISTING


@dataclass(frozen=True)
class SelectingSubProcess:
    """Container selection for one member."""

    member: Member
    kind: ClassVar[ViewKind] = ViewKind.SELECTING_SUB_PROCESS


@dataclass(frozen=True)
class ViewingLog:
    """Log tail of one container."""

    member: Member
    sub_process: str
    content: str = ""
    kind: ClassVar[ViewKind] = ViewKind.VIEWING_LOG


@dataclass(frozen=True)
class ViewingDescription:
    """Structural description of one member."""

    member: Member
    content: str = ""
    kind: ClassVar[ViewKind] = ViewKind.VIEWING_DESCRIPTION


@dataclass(frozen=True)
class ViewingConfig:
    """Raw configuration dump of one member."""

    member: Member
    content: str = ""
    kind: ClassVar[ViewKind] = ViewKind.VIEWING_CONFIG


ViewState = Union[
    Listing,
    SelectingSubProcess,
    ViewingLog,
    ViewingDescription,
    ViewingConfig,
]

__all__ = [
    "Listing",
    "SelectingSubProcess",
    "ViewState",
    "ViewingConfig",
    "ViewingDescription",
    "ViewingLog",
]
