"""Pod fetcher - builds kubectl queries for pods, logs and the owning resource."""

from __future__ import annotations

import json
import logging
from typing import Any

from etcdview.constants.timeouts import CLUSTER_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class PodFetcher:
    """Fetches raw pod data from the Kubernetes cluster."""

    def __init__(
        self,
        run_kubectl_func: Any,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            request_timeout: Value passed as ``--request-timeout``
        """
        self._run_kubectl = run_kubectl_func
        self._request_timeout = request_timeout

    def _timeout_arg(self) -> str:
        return f"--request-timeout={self._request_timeout}"

    @staticmethod
    def _decode(output: str) -> dict[str, Any]:
        if not output:
            return {}
        data = json.loads(output)
        return data if isinstance(data, dict) else {}

    def build_pods_args(self, namespace: str, label_selector: str) -> tuple[str, ...]:
        return (
            "get",
            "pods",
            "-n",
            namespace,
            "-l",
            label_selector,
            "-o",
            "json",
            self._timeout_arg(),
        )

    def build_pod_args(self, namespace: str, pod_name: str) -> tuple[str, ...]:
        return ("get", "pod", pod_name, "-n", namespace, "-o", "json", self._timeout_arg())

    def build_owner_args(
        self, namespace: str, owner_resource: str, name: str
    ) -> tuple[str, ...]:
        return (
            "get",
            owner_resource,
            name,
            "-n",
            namespace,
            "-o",
            "json",
            self._timeout_arg(),
        )

    def build_logs_args(
        self,
        namespace: str,
        pod_name: str,
        container: str,
        tail_lines: int,
    ) -> tuple[str, ...]:
        return (
            "logs",
            pod_name,
            "-n",
            namespace,
            "-c",
            container,
            f"--tail={tail_lines}",
            self._timeout_arg(),
        )

    async def fetch_pods_raw(self, namespace: str, label_selector: str) -> dict[str, Any]:
        """Fetch the pod list matching ``label_selector``."""
        output = await self._run_kubectl(self.build_pods_args(namespace, label_selector))
        return self._decode(output)

    async def fetch_pod_raw(self, namespace: str, pod_name: str) -> dict[str, Any]:
        """Fetch a single pod object."""
        output = await self._run_kubectl(self.build_pod_args(namespace, pod_name))
        return self._decode(output)

    async def fetch_owner_raw(
        self, namespace: str, owner_resource: str, name: str
    ) -> dict[str, Any]:
        """Fetch the custom resource that owns the pods."""
        output = await self._run_kubectl(
            self.build_owner_args(namespace, owner_resource, name)
        )
        return self._decode(output)

    async def fetch_logs(
        self,
        namespace: str,
        pod_name: str,
        container: str,
        tail_lines: int,
    ) -> str:
        """Fetch the trailing log lines of one container."""
        logger.debug(
            "Fetching %s log lines for %s/%s [%s]",
            tail_lines,
            namespace,
            pod_name,
            container,
        )
        return await self._run_kubectl(
            self.build_logs_args(namespace, pod_name, container, tail_lines)
        )
