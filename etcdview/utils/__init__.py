"""Utility helpers."""

from etcdview.utils.logging import configure_logging

__all__ = ["configure_logging"]
