"""Display widgets."""

from etcdview.widgets.display.panels import ContentViewport, ErrorPanel

__all__ = ["ContentViewport", "ErrorPanel"]
