"""Constants module for the etcd pod viewer.

Centralized constants organized by domain:
- enums.py: Enum class definitions
- timeouts.py: Timeout values
- limits.py: Limit values
- defaults.py: Default values for settings
- ui.py: View headers, help lines and widget ids

Note: Keyboard bindings are defined in the etcdview.keyboard module.
"""

from etcdview.constants.defaults import (
    MEMBER_LABEL_SELECTOR_DEFAULT,
    OWNER_RESOURCE_DEFAULT,
    SETTINGS_ENV_VAR,
    SETTINGS_PATH_DEFAULT,
    VERIFY_OWNER_DEFAULT,
)
from etcdview.constants.enums import FetchKind, ViewKind
from etcdview.constants.limits import (
    LOG_TAIL_LINES,
    LOG_TAIL_LINES_MAX,
    LOG_TAIL_LINES_MIN,
)
from etcdview.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from etcdview.constants.ui import APP_TITLE

__all__ = [
    "APP_TITLE",
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "LOG_TAIL_LINES",
    "LOG_TAIL_LINES_MAX",
    "LOG_TAIL_LINES_MIN",
    "MEMBER_LABEL_SELECTOR_DEFAULT",
    "OWNER_RESOURCE_DEFAULT",
    "SETTINGS_ENV_VAR",
    "SETTINGS_PATH_DEFAULT",
    "VERIFY_OWNER_DEFAULT",
    "FetchKind",
    "ViewKind",
]
