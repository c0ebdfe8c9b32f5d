"""Exception taxonomy for the etcd pod viewer.

Resource provider failures are raised as ``ResourceError`` subclasses that
also derive from the matching builtin exception, so callers may catch either
``ResourceLookupError`` or plain ``LookupError``.
"""

from __future__ import annotations


class ResourceError(Exception):
    """Base exception for resource provider failures."""


class ResourceLookupError(ResourceError, LookupError):
    """A named entity is absent or a list enumeration failed."""


class LogStreamError(ResourceError, OSError):
    """Streaming a container's output failed mid-transfer."""


class SerializationError(ResourceError):
    """Formatting a resource as a configuration dump failed."""


class UsageError(Exception):
    """Fatal command-line usage error raised before the UI starts."""


__all__ = [
    "LogStreamError",
    "ResourceError",
    "ResourceLookupError",
    "SerializationError",
    "UsageError",
]
