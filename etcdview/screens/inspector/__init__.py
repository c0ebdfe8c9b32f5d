"""Inspector screen and presenter."""

from etcdview.screens.inspector.inspector_screen import InspectorScreen
from etcdview.screens.inspector.presenter import ScreenModel, present

__all__ = ["InspectorScreen", "ScreenModel", "present"]
