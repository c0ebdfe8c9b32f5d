"""Shared fixtures for etcd pod viewer tests."""

from __future__ import annotations

import pytest

from etcdview.controllers.base import BaseController
from etcdview.models.core.member import Member
from etcdview.models.state.session import Session


def make_member(name: str = "etcd-main-0", namespace: str = "shoot--dev") -> Member:
    return Member(
        name=name,
        namespace=namespace,
        status="Running",
        ready_count=2,
        total_count=2,
        age="1h0m0s",
        node="node-a",
    )


class StubProvider(BaseController):
    """In-memory resource provider recording every call."""

    def __init__(
        self,
        members: list[Member] | None = None,
        containers: dict[str, list[str]] | None = None,
        logs: str = "log line 1\nlog line 2\n",
        description: str = "Name: etcd-main-0\n",
        config: str = "kind: Pod\n",
    ) -> None:
        self.members = members if members is not None else [make_member()]
        self.containers = containers or {}
        self.logs = logs
        self.description = description
        self.config = config
        self.errors: dict[str, BaseException] = {}
        self.calls: list[tuple] = []

    def _maybe_fail(self, operation: str) -> None:
        error = self.errors.get(operation)
        if error is not None:
            raise error

    async def list_members(self, namespace, resource_name):
        self.calls.append(("list_members", namespace, resource_name))
        self._maybe_fail("list_members")
        return list(self.members)

    async def list_sub_processes(self, namespace, member_name):
        self.calls.append(("list_sub_processes", namespace, member_name))
        self._maybe_fail("list_sub_processes")
        return list(self.containers.get(member_name, ["etcd"]))

    async def stream_recent_output(self, namespace, member_name, sub_process, max_lines):
        self.calls.append(("stream_recent_output", namespace, member_name, sub_process, max_lines))
        self._maybe_fail("stream_recent_output")
        return self.logs

    async def describe(self, namespace, member_name):
        self.calls.append(("describe", namespace, member_name))
        self._maybe_fail("describe")
        return self.description

    async def dump_config(self, namespace, member_name):
        self.calls.append(("dump_config", namespace, member_name))
        self._maybe_fail("dump_config")
        return self.config


@pytest.fixture
def member() -> Member:
    return make_member()


@pytest.fixture
def members() -> tuple[Member, ...]:
    return (make_member("etcd-main-0"), make_member("etcd-main-1"))


@pytest.fixture
def session(members: tuple[Member, ...]) -> Session:
    """Listing session with two members loaded."""
    return Session(namespace="shoot--dev", resource_name="etcd-main", members=members)


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider(
        members=[make_member("etcd-main-0"), make_member("etcd-main-1")],
        containers={
            "etcd-main-0": ["etcd", "backup-sidecar"],
            "etcd-main-1": ["etcd", "backup-sidecar"],
        },
    )


@pytest.fixture
def member_factory():
    return make_member


@pytest.fixture
def provider_factory():
    return StubProvider
