"""Data models for the etcd pod viewer."""

from etcdview.models.core.member import Member
from etcdview.models.state.session import Session
from etcdview.models.state.view_state import (
    Listing,
    SelectingSubProcess,
    ViewingConfig,
    ViewingDescription,
    ViewingLog,
    ViewState,
)

__all__ = [
    "Listing",
    "Member",
    "SelectingSubProcess",
    "Session",
    "ViewState",
    "ViewingConfig",
    "ViewingDescription",
    "ViewingLog",
]
