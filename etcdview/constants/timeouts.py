"""Timeouts applied to every kubectl invocation."""

from typing import Final

# ============================================================================
# kubectl timeouts
# ============================================================================

# Passed as --request-timeout; bounds the API server round trip.
CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Seconds before the kubectl process itself is killed; exceeds the request timeout.
KUBECTL_COMMAND_TIMEOUT: Final = 45

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
]
