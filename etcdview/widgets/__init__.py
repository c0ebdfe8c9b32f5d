"""Widgets module for the etcd pod viewer.

Render adapters the core feeds with content:
- selection: MemberList, ContainerList
- display: ContentViewport, ErrorPanel
"""

from etcdview.widgets.display import ContentViewport, ErrorPanel
from etcdview.widgets.selection import ContainerList, MemberList

__all__ = [
    "ContainerList",
    "ContentViewport",
    "ErrorPanel",
    "MemberList",
]
