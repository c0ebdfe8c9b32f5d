"""Core resource models."""

from etcdview.models.core.member import Member

__all__ = ["Member"]
