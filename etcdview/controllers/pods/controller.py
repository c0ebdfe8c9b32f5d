"""Pod controller - kubectl-backed resource provider.

Runs kubectl in a worker thread via ``asyncio.to_thread`` so the Textual event
loop never blocks, and converts failures into the typed ``ResourceError``
hierarchy.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess

import yaml

from etcdview.controllers.base import BaseController
from etcdview.controllers.pods.fetchers import PodFetcher
from etcdview.controllers.pods.parsers import PodParser
from etcdview.errors import LogStreamError, ResourceLookupError, SerializationError
from etcdview.models.core.member import Member
from etcdview.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)

# Failures raised by the kubectl plumbing: non-zero exit (RuntimeError), hung
# process (TimeoutExpired), missing binary (OSError) and bad JSON (ValueError).
_KUBECTL_FAILURES = (RuntimeError, subprocess.TimeoutExpired, OSError, ValueError)


class PodController(BaseController):
    """Resource provider for the pods backing an etcd resource."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        """Initialize the pod controller.

        Args:
            settings: Application settings; defaults are used when omitted.
        """
        self.settings = settings or AppSettings()
        self.context = self.settings.context
        self._fetcher = PodFetcher(self._run_kubectl, self.settings.request_timeout)
        self._parser = PodParser()

    def _run_kubectl_sync(self, args: tuple[str, ...]) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=self.settings.command_timeout,
        )
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise RuntimeError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    def member_selector(self, resource_name: str) -> str:
        return self.settings.member_label_selector.format(name=resource_name)

    async def list_members(self, namespace: str, resource_name: str) -> list[Member]:
        owner = self.settings.owner_resource
        if self.settings.verify_owner:
            try:
                await self._fetcher.fetch_owner_raw(namespace, owner, resource_name)
            except _KUBECTL_FAILURES as exc:
                logger.warning("Owner lookup failed for %s/%s: %s", owner, resource_name, exc)
                raise ResourceLookupError(
                    f"failed to get {owner} resource {namespace}/{resource_name}: {exc}"
                ) from exc

        try:
            pod_list = await self._fetcher.fetch_pods_raw(
                namespace, self.member_selector(resource_name)
            )
        except _KUBECTL_FAILURES as exc:
            logger.warning("Listing members of %s/%s failed: %s", namespace, resource_name, exc)
            raise ResourceLookupError(f"failed to list etcd pods: {exc}") from exc

        members = self._parser.parse_members(pod_list)
        logger.debug("Found %d members for %s/%s", len(members), namespace, resource_name)
        return members

    async def _get_pod(self, namespace: str, member_name: str, action: str) -> dict:
        try:
            return await self._fetcher.fetch_pod_raw(namespace, member_name)
        except _KUBECTL_FAILURES as exc:
            logger.warning("Fetching pod %s/%s failed: %s", namespace, member_name, exc)
            raise ResourceLookupError(f"failed to {action} pod {member_name}: {exc}") from exc

    async def list_sub_processes(self, namespace: str, member_name: str) -> list[str]:
        pod = await self._get_pod(namespace, member_name, "get")
        return self._parser.parse_container_names(pod)

    async def stream_recent_output(
        self,
        namespace: str,
        member_name: str,
        sub_process: str,
        max_lines: int,
    ) -> str:
        try:
            return await self._fetcher.fetch_logs(namespace, member_name, sub_process, max_lines)
        except (RuntimeError, subprocess.TimeoutExpired, OSError) as exc:
            logger.warning(
                "Log stream failed for %s/%s [%s]: %s",
                namespace,
                member_name,
                sub_process,
                exc,
            )
            raise LogStreamError(
                f"failed to get logs for pod {member_name} (container {sub_process}): {exc}"
            ) from exc

    async def describe(self, namespace: str, member_name: str) -> str:
        pod = await self._get_pod(namespace, member_name, "describe")
        return self._parser.format_description(pod)

    async def dump_config(self, namespace: str, member_name: str) -> str:
        pod = await self._get_pod(namespace, member_name, "get")
        try:
            return yaml.safe_dump(pod, default_flow_style=False, sort_keys=False)
        except yaml.YAMLError as exc:
            logger.exception("Marshalling pod %s to YAML failed", member_name)
            raise SerializationError(f"failed to marshal pod to yaml: {exc}") from exc


__all__ = ["PodController"]
