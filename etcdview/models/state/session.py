"""Session - the single source of truth for the running inspector."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from etcdview.constants.limits import LOG_TAIL_LINES
from etcdview.models.core.member import Member
from etcdview.models.state.view_state import Listing, ViewState


@dataclass(frozen=True)
class Session:
    """Immutable aggregate replaced wholesale by every transition.

    Fetched text lives in the ``content`` of the active view variant.
    ``pending_error`` has no expiry: once set it stays until the process
    exits.
    """

    namespace: str
    resource_name: str
    view: ViewState = field(default_factory=Listing)
    members: tuple[Member, ...] = ()
    sub_processes: tuple[str, ...] = ()
    loading: bool = False
    pending_error: BaseException | None = None
    log_tail_lines: int = LOG_TAIL_LINES

    @classmethod
    def initial(
        cls,
        namespace: str,
        resource_name: str,
        log_tail_lines: int = LOG_TAIL_LINES,
    ) -> Session:
        """Build the startup session: member list view, spinner running."""
        return cls(
            namespace=namespace,
            resource_name=resource_name,
            loading=True,
            log_tail_lines=log_tail_lines,
        )

    def evolve(self, **changes: Any) -> Session:
        return replace(self, **changes)

    @property
    def has_error(self) -> bool:
        return self.pending_error is not None
