"""Controllers module for the etcd pod viewer.

Controllers implement the read-only resource provider operations the view
state machine dispatches.
"""

from __future__ import annotations

from etcdview.controllers.base import BaseController
from etcdview.controllers.pods.controller import PodController

__all__ = [
    "BaseController",
    "PodController",
]
