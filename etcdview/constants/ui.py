"""UI text constants: view headers, help lines, and widget ids."""

from typing import Final

APP_TITLE: Final = "Etcd Pod Viewer"

# ============================================================================
# Headers (formatted with str.format)
# ============================================================================

LISTING_HEADER: Final = "Etcd Pods ({namespace}/{name})"
SELECT_CONTAINER_HEADER: Final = "Select Container: {pod}"
LOG_HEADER: Final = "Logs: {pod} [{container}]"
DESCRIBE_HEADER: Final = "Describe: {pod}"
CONFIG_HEADER: Final = "YAML Config: {pod}"

# ============================================================================
# Help lines
# ============================================================================

LISTING_HELP: Final = "• l: logs • d: describe • y: yaml • r: refresh • q: quit"
SELECT_CONTAINER_HELP: Final = "• enter: select • r: refresh • esc: back • q: quit"
LOG_HELP: Final = "• r: refresh • esc: containers • q: pods • ↑/↓: scroll"
TEXT_VIEW_HELP: Final = "• r: refresh • esc: back • q: quit • ↑/↓: scroll"

ERROR_TEMPLATE: Final = "Error: {error}\nPress 'q' to quit."

# ============================================================================
# Widget ids
# ============================================================================

HEADER_ID: Final = "view-header"
HELP_ID: Final = "view-help"
SWITCHER_ID: Final = "view-switcher"
MEMBER_LIST_ID: Final = "member-list"
CONTAINER_LIST_ID: Final = "container-list"
CONTENT_VIEW_ID: Final = "content-view"
ERROR_PANEL_ID: Final = "error-panel"

__all__ = [
    "APP_TITLE",
    "CONFIG_HEADER",
    "CONTAINER_LIST_ID",
    "CONTENT_VIEW_ID",
    "DESCRIBE_HEADER",
    "ERROR_PANEL_ID",
    "ERROR_TEMPLATE",
    "HEADER_ID",
    "HELP_ID",
    "LISTING_HEADER",
    "LISTING_HELP",
    "LOG_HEADER",
    "LOG_HELP",
    "MEMBER_LIST_ID",
    "SELECT_CONTAINER_HEADER",
    "SELECT_CONTAINER_HELP",
    "SWITCHER_ID",
    "TEXT_VIEW_HELP",
]
