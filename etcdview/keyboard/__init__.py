"""Keyboard bindings module.

- keys: key names understood by the view state machine
- app: App-level bindings (APP_BINDINGS)
"""

from etcdview.keyboard.app import APP_BINDINGS
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

__all__ = [
    "APP_BINDINGS",
    "KEY_BACK",
    "KEY_CONFIG",
    "KEY_DESCRIBE",
    "KEY_INTERRUPT",
    "KEY_LOGS",
    "KEY_QUIT",
    "KEY_REFRESH",
    "KEY_SELECT",
]
