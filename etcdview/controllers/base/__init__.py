"""Base controller classes."""

from etcdview.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
