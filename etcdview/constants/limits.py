"""Limit constants for the TUI."""

from typing import Final

# ============================================================================
# Fetch limits
# ============================================================================

# Logs are always requested as a bounded tail to keep rendering bounded.
LOG_TAIL_LINES: Final = 100
LOG_TAIL_LINES_MIN: Final = 1
LOG_TAIL_LINES_MAX: Final = 10000

__all__ = [
    "LOG_TAIL_LINES",
    "LOG_TAIL_LINES_MAX",
    "LOG_TAIL_LINES_MIN",
]
