"""Base controller defining the resource provider contract.

Controllers are awaited from Textual workers, so every operation is async and
must never block the UI event loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from etcdview.models.core.member import Member


class BaseController(ABC):
    """Read-only operations against the cluster.

    Each operation is fallible and raises a ``ResourceError`` subclass:

    - ``list_members`` / ``list_sub_processes`` / ``describe``:
      ``ResourceLookupError``
    - ``stream_recent_output``: ``LogStreamError``
    - ``dump_config``: ``SerializationError`` or ``ResourceLookupError``
    """

    @abstractmethod
    async def list_members(self, namespace: str, resource_name: str) -> list[Member]:
        """Enumerate the pods backing ``resource_name``."""
        ...

    @abstractmethod
    async def list_sub_processes(self, namespace: str, member_name: str) -> list[str]:
        """Return container names of a pod in declaration order."""
        ...

    @abstractmethod
    async def stream_recent_output(
        self,
        namespace: str,
        member_name: str,
        sub_process: str,
        max_lines: int,
    ) -> str:
        """Return at most ``max_lines`` trailing log lines of one container."""
        ...

    @abstractmethod
    async def describe(self, namespace: str, member_name: str) -> str:
        """Return a human readable description of a pod."""
        ...

    @abstractmethod
    async def dump_config(self, namespace: str, member_name: str) -> str:
        """Return the pod's full configuration as YAML."""
        ...
