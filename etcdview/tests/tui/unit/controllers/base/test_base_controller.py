"""Tests for base controller module."""

from __future__ import annotations

import pytest

from etcdview.controllers.base.base_controller import BaseController


class TestBaseController:
    """Tests for BaseController abstract class."""

    def test_base_controller_is_abstract(self) -> None:
        """Test that BaseController cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseController()

    def test_partial_implementation_is_abstract(self) -> None:
        """A provider missing any operation cannot be instantiated."""

        class ListOnly(BaseController):
            async def list_members(self, namespace, resource_name):
                return []

        with pytest.raises(TypeError):
            ListOnly()

    @pytest.mark.asyncio
    async def test_stub_provider_satisfies_interface(self, stub_provider) -> None:
        assert isinstance(stub_provider, BaseController)
        assert await stub_provider.list_sub_processes("shoot--dev", "etcd-main-0") == [
            "etcd",
            "backup-sidecar",
        ]
