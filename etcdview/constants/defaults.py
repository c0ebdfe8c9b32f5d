"""Default values for settings.

All default values used in the AppSettings model.
"""

from pathlib import Path
from typing import Final

# ============================================================================
# Resource discovery defaults
# ============================================================================

# etcd-druid creates a StatefulSet named after the Etcd resource and labels
# its pods with the resource name.
OWNER_RESOURCE_DEFAULT: Final = "etcds.druid.gardener.cloud"
MEMBER_LABEL_SELECTOR_DEFAULT: Final = "app.kubernetes.io/name={name}"
VERIFY_OWNER_DEFAULT: Final = False

# ============================================================================
# Settings file
# ============================================================================

SETTINGS_ENV_VAR: Final = "ETCDVIEW_CONFIG"
SETTINGS_PATH_DEFAULT: Final = Path.home() / ".config" / "etcd-pod-viewer" / "settings.json"

__all__ = [
    "MEMBER_LABEL_SELECTOR_DEFAULT",
    "OWNER_RESOURCE_DEFAULT",
    "SETTINGS_ENV_VAR",
    "SETTINGS_PATH_DEFAULT",
    "VERIFY_OWNER_DEFAULT",
]
