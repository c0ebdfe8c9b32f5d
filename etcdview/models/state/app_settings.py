"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from etcdview.constants.defaults import (
    MEMBER_LABEL_SELECTOR_DEFAULT,
    OWNER_RESOURCE_DEFAULT,
    VERIFY_OWNER_DEFAULT,
)
from etcdview.constants.limits import (
    LOG_TAIL_LINES,
    LOG_TAIL_LINES_MAX,
    LOG_TAIL_LINES_MIN,
)
from etcdview.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Cluster access
    context: str | None = None
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT
    command_timeout: int = Field(default=KUBECTL_COMMAND_TIMEOUT, gt=0)

    # Member discovery
    owner_resource: str = OWNER_RESOURCE_DEFAULT
    member_label_selector: str = MEMBER_LABEL_SELECTOR_DEFAULT
    verify_owner: bool = VERIFY_OWNER_DEFAULT

    # Log tail
    log_tail_lines: int = Field(
        default=LOG_TAIL_LINES, ge=LOG_TAIL_LINES_MIN, le=LOG_TAIL_LINES_MAX
    )


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
