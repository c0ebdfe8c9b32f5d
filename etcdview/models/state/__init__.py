"""State models: view variants, session aggregate, settings."""

from etcdview.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)
from etcdview.models.state.session import Session
from etcdview.models.state.view_state import (
    Listing,
    SelectingSubProcess,
    ViewingConfig,
    ViewingDescription,
    ViewingLog,
    ViewState,
)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "Listing",
    "SelectingSubProcess",
    "Session",
    "ViewState",
    "ViewingConfig",
    "ViewingDescription",
    "ViewingLog",
]
