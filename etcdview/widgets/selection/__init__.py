"""Selection widgets."""

from etcdview.widgets.selection.option_lists import ContainerList, MemberList

__all__ = ["ContainerList", "MemberList"]
