"""Screens module for the etcd pod viewer."""

from etcdview.screens.inspector import InspectorScreen

__all__ = ["InspectorScreen"]
