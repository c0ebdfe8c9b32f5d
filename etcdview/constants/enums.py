"""All enum definitions for the TUI."""

from enum import Enum


class ViewKind(Enum):
    """Identifiers of the navigable views."""

    LISTING = "listing"
    SELECTING_SUB_PROCESS = "selecting_sub_process"
    VIEWING_LOG = "viewing_log"
    VIEWING_DESCRIPTION = "viewing_description"
    VIEWING_CONFIG = "viewing_config"


class FetchKind(Enum):
    """Kinds of resource provider fetches."""

    MEMBERS = "members"
    SUB_PROCESSES = "sub_processes"
    LOG = "log"
    DESCRIPTION = "description"
    CONFIG = "config"


__all__ = [
    "FetchKind",
    "ViewKind",
]
