"""Tests for pod controller."""

from __future__ import annotations

import json
import subprocess
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import yaml

from etcdview.controllers.pods.controller import PodController
from etcdview.errors import (
    LogStreamError,
    ResourceError,
    ResourceLookupError,
    SerializationError,
)
from etcdview.models.state.app_settings import AppSettings

POD = {
    "metadata": {
        "name": "etcd-main-0",
        "namespace": "shoot--dev",
        "creationTimestamp": "2024-05-01T10:00:00Z",
    },
    "spec": {
        "nodeName": "node-a",
        "containers": [{"name": "etcd"}, {"name": "backup-sidecar"}],
    },
    "status": {"phase": "Running", "containerStatuses": [{"ready": True}]},
}


def completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> MagicMock:
    return MagicMock(stdout=stdout, returncode=returncode, stderr=stderr)


class TestRunKubectl:
    """Tests for the kubectl subprocess wrapper."""

    def test_adds_context_and_timeout(self) -> None:
        controller = PodController(AppSettings(context="garden-dev", command_timeout=7))

        with patch("subprocess.run", return_value=completed("ok")) as mock_run:
            assert controller._run_kubectl_sync(("get", "pods")) == "ok"

        cmd = mock_run.call_args.args[0]
        assert cmd == ["kubectl", "--context", "garden-dev", "get", "pods"]
        assert mock_run.call_args.kwargs["timeout"] == 7

    def test_no_context_flag_by_default(self) -> None:
        with patch("subprocess.run", return_value=completed("ok")) as mock_run:
            PodController()._run_kubectl_sync(("version",))

        assert mock_run.call_args.args[0] == ["kubectl", "version"]

    def test_non_zero_exit_raises_with_stderr(self) -> None:
        failure = completed(returncode=1, stderr='Error from server (NotFound): pods "x" not found\n')

        with patch("subprocess.run", return_value=failure):
            with pytest.raises(RuntimeError, match="NotFound"):
                PodController()._run_kubectl_sync(("get", "pod", "x"))

    @pytest.mark.asyncio
    async def test_async_wrapper_runs_sync_call(self) -> None:
        with patch("subprocess.run", return_value=completed("done")):
            assert await PodController()._run_kubectl(("get", "pods")) == "done"


class TestPodController:
    """Tests for PodController provider operations."""

    @pytest.fixture
    def controller(self) -> PodController:
        return PodController(AppSettings())

    def test_member_selector_uses_resource_name(self, controller: PodController) -> None:
        assert controller.member_selector("etcd-main") == "app.kubernetes.io/name=etcd-main"

    @pytest.mark.asyncio
    async def test_list_members(self, controller: PodController) -> None:
        run = AsyncMock(return_value=json.dumps({"items": [POD]}))
        controller._fetcher._run_kubectl = run

        members = await controller.list_members("shoot--dev", "etcd-main")

        assert [m.name for m in members] == ["etcd-main-0"]
        assert members[0].ready == "1/1"
        args = run.await_args_list[0].args[0]
        assert args[args.index("-l") + 1] == "app.kubernetes.io/name=etcd-main"

    @pytest.mark.asyncio
    async def test_list_members_empty_is_not_an_error(self, controller: PodController) -> None:
        controller._fetcher._run_kubectl = AsyncMock(return_value='{"items": []}')

        assert await controller.list_members("shoot--dev", "etcd-main") == []

    @pytest.mark.asyncio
    async def test_list_members_failure_is_lookup_error(
        self, controller: PodController
    ) -> None:
        controller._fetcher._run_kubectl = AsyncMock(
            side_effect=RuntimeError("connection refused")
        )

        with pytest.raises(ResourceLookupError, match="failed to list etcd pods") as exc_info:
            await controller.list_members("shoot--dev", "etcd-main")

        assert isinstance(exc_info.value, LookupError)
        assert isinstance(exc_info.value, ResourceError)

    @pytest.mark.asyncio
    async def test_verify_owner_checks_resource_first(self) -> None:
        controller = PodController(AppSettings(verify_owner=True))
        run = AsyncMock(side_effect=['{"kind": "Etcd"}', '{"items": []}'])
        controller._fetcher._run_kubectl = run

        await controller.list_members("shoot--dev", "etcd-main")

        first = run.await_args_list[0].args[0]
        assert first[:3] == ("get", "etcds.druid.gardener.cloud", "etcd-main")
        assert run.await_count == 2

    @pytest.mark.asyncio
    async def test_verify_owner_missing_resource(self) -> None:
        controller = PodController(AppSettings(verify_owner=True))
        controller._fetcher._run_kubectl = AsyncMock(
            side_effect=RuntimeError('etcds.druid.gardener.cloud "foo" not found')
        )

        with pytest.raises(ResourceLookupError, match="not found"):
            await controller.list_members("shoot--dev", "foo")

    @pytest.mark.asyncio
    async def test_list_sub_processes(self, controller: PodController) -> None:
        controller._fetcher._run_kubectl = AsyncMock(return_value=json.dumps(POD))

        names = await controller.list_sub_processes("shoot--dev", "etcd-main-0")

        assert names == ["etcd", "backup-sidecar"]

    @pytest.mark.asyncio
    async def test_list_sub_processes_missing_pod(self, controller: PodController) -> None:
        controller._fetcher._run_kubectl = AsyncMock(
            side_effect=subprocess.TimeoutExpired("kubectl", 45)
        )

        with pytest.raises(ResourceLookupError):
            await controller.list_sub_processes("shoot--dev", "etcd-main-9")

    @pytest.mark.asyncio
    async def test_stream_recent_output(self, controller: PodController) -> None:
        run = AsyncMock(return_value="a\nb\n")
        controller._fetcher._run_kubectl = run

        logs = await controller.stream_recent_output("shoot--dev", "etcd-main-0", "etcd", 100)

        assert logs == "a\nb\n"
        assert "--tail=100" in run.await_args_list[0].args[0]

    @pytest.mark.asyncio
    async def test_stream_failure_is_log_stream_error(self, controller: PodController) -> None:
        controller._fetcher._run_kubectl = AsyncMock(
            side_effect=RuntimeError('container "nope" not found')
        )

        with pytest.raises(LogStreamError, match="container nope") as exc_info:
            await controller.stream_recent_output("shoot--dev", "etcd-main-0", "nope", 100)

        assert isinstance(exc_info.value, OSError)

    @pytest.mark.asyncio
    async def test_describe(self, controller: PodController) -> None:
        controller._fetcher._run_kubectl = AsyncMock(return_value=json.dumps(POD))

        text = await controller.describe("shoot--dev", "etcd-main-0")

        assert text.startswith("Name: etcd-main-0\n")
        assert "Created: 2024-05-01T10:00:00Z" in text

    @pytest.mark.asyncio
    async def test_dump_config_round_trips_pod(self, controller: PodController) -> None:
        controller._fetcher._run_kubectl = AsyncMock(return_value=json.dumps(POD))

        text = await controller.dump_config("shoot--dev", "etcd-main-0")

        assert yaml.safe_load(text) == POD
        assert text.startswith("metadata:")

    @pytest.mark.asyncio
    async def test_dump_config_marshal_failure(self, controller: PodController) -> None:
        controller._fetcher._run_kubectl = AsyncMock(return_value=json.dumps(POD))

        with patch("yaml.safe_dump", side_effect=yaml.YAMLError("cannot represent")):
            with pytest.raises(SerializationError, match="failed to marshal pod to yaml"):
                await controller.dump_config("shoot--dev", "etcd-main-0")
