"""App-level keyboard bindings.

Every key of the navigation table is a priority binding routed to the app's
``press`` action. ``check_action`` on the app disables the binding when the
current view does not use the key, so the key reaches the focused widget.
"""

from textual.binding import Binding

from etcdview.keyboard.keys import (
    KEY_BACK,
    KEY_CONFIG,
    KEY_DESCRIBE,
    KEY_INTERRUPT,
    KEY_LOGS,
    KEY_QUIT,
    KEY_REFRESH,
    KEY_SELECT,
)


def _press(key: str, description: str) -> Binding:
    return Binding(key, f"press('{key}')", description, show=False, priority=True)


APP_BINDINGS: list[Binding] = [
    _press(KEY_INTERRUPT, "Quit"),
    _press(KEY_QUIT, "Quit/Back"),
    _press(KEY_REFRESH, "Refresh"),
    _press(KEY_LOGS, "Logs"),
    _press(KEY_DESCRIBE, "Describe"),
    _press(KEY_CONFIG, "YAML"),
    _press(KEY_SELECT, "Select"),
    _press(KEY_BACK, "Back"),
]

__all__ = [
    "APP_BINDINGS",
]
