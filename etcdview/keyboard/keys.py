"""Key names understood by the view state machine.

Names follow Textual's key naming (``escape``, ``enter``, ``ctrl+c``).
"""

from typing import Final

KEY_INTERRUPT: Final = "ctrl+c"
KEY_QUIT: Final = "q"
KEY_REFRESH: Final = "r"
KEY_LOGS: Final = "l"
KEY_DESCRIBE: Final = "d"
KEY_CONFIG: Final = "y"
KEY_SELECT: Final = "enter"
KEY_BACK: Final = "escape"

__all__ = [
    "KEY_BACK",
    "KEY_CONFIG",
    "KEY_DESCRIBE",
    "KEY_INTERRUPT",
    "KEY_LOGS",
    "KEY_QUIT",
    "KEY_REFRESH",
    "KEY_SELECT",
]
