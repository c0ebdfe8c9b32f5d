"""Member model - rendered snapshot of one pod backing the inspected resource."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """Immutable pod summary shown in the member list.

    Attributes:
        name: Pod name.
        namespace: Pod namespace.
        status: Lifecycle phase (``Running``, ``Pending``...).
        ready_count: Number of ready containers.
        total_count: Number of containers with a reported status.
        age: Elapsed time since creation, whole seconds (``"1h2m3s"``).
        node: Name of the node hosting the pod.
    """

    name: str
    namespace: str
    status: str
    ready_count: int
    total_count: int
    age: str
    node: str

    @property
    def ready(self) -> str:
        """Readiness ratio as ``"<ready>/<total>"``."""
        return f"{self.ready_count}/{self.total_count}"

    def title(self) -> str:
        return self.name

    def description(self) -> str:
        return (
            f"Status: {self.status} | Ready: {self.ready} | "
            f"Node: {self.node} | Age: {self.age}"
        )
