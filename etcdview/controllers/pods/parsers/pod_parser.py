"""Pod parser - turns raw pod JSON into members, container names and text."""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime, timezone
from typing import Any

from etcdview.models.core.member import Member

UNKNOWN_AGE = "<unknown>"


class PodParser:
    """Pure transformations of ``kubectl get pod -o json`` payloads."""

    @staticmethod
    def _parse_iso_timestamp(timestamp: Any) -> datetime | None:
        """Parse kubernetes timestamp strings into aware datetimes."""
        if not isinstance(timestamp, str) or not timestamp:
            return None
        with suppress(ValueError, TypeError):
            parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
        return None

    @staticmethod
    def format_age(seconds: float) -> str:
        """Format an elapsed duration truncated to whole seconds.

        Mirrors the compact duration notation used by Kubernetes tooling:
        ``45s``, ``2m5s``, ``1h0m5s``.
        """
        total = max(0, int(seconds))
        if total < 60:
            return f"{total}s"
        minutes, secs = divmod(total, 60)
        if minutes < 60:
            return f"{minutes}m{secs}s"
        hours, minutes = divmod(minutes, 60)
        return f"{hours}h{minutes}m{secs}s"

    def parse_member(self, pod: dict[str, Any], now: datetime | None = None) -> Member:
        """Summarize one pod into a ``Member`` snapshot."""
        metadata = pod.get("metadata", {})
        spec = pod.get("spec", {})
        status = pod.get("status", {})
        container_statuses = status.get("containerStatuses") or []

        ready_count = sum(1 for item in container_statuses if item.get("ready"))
        created = self._parse_iso_timestamp(metadata.get("creationTimestamp"))
        if created is None:
            age = UNKNOWN_AGE
        else:
            reference = now or datetime.now(timezone.utc)
            age = self.format_age((reference - created).total_seconds())

        return Member(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            status=status.get("phase", ""),
            ready_count=ready_count,
            total_count=len(container_statuses),
            age=age,
            node=spec.get("nodeName", ""),
        )

    def parse_members(
        self, pod_list: dict[str, Any], now: datetime | None = None
    ) -> list[Member]:
        reference = now or datetime.now(timezone.utc)
        return [self.parse_member(pod, reference) for pod in pod_list.get("items", [])]

    @staticmethod
    def parse_container_names(pod: dict[str, Any]) -> list[str]:
        containers = pod.get("spec", {}).get("containers") or []
        return [container.get("name", "") for container in containers]

    def format_description(self, pod: dict[str, Any]) -> str:
        """Build a ``kubectl describe``-like summary of a pod."""
        metadata = pod.get("metadata", {})
        spec = pod.get("spec", {})
        status = pod.get("status", {})

        created = self._parse_iso_timestamp(metadata.get("creationTimestamp"))
        created_text = (
            created.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
            if created is not None
            else UNKNOWN_AGE
        )

        lines = [
            f"Name: {metadata.get('name', '')}",
            f"Namespace: {metadata.get('namespace', '')}",
            f"Node: {spec.get('nodeName', '')}",
            f"Status: {status.get('phase', '')}",
            f"IP: {status.get('podIP', '')}",
            f"Created: {created_text}",
            "",
            "Containers:",
        ]
        for container in spec.get("containers") or []:
            lines.append(f"  {container.get('name', '')}: {container.get('image', '')}")

        lines.extend(["", "Conditions:"])
        for condition in status.get("conditions") or []:
            lines.append(f"  {condition.get('type', '')}: {condition.get('status', '')}")

        return "\n".join(lines) + "\n"
