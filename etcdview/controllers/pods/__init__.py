"""Pod domain: kubectl-backed resource provider."""

from etcdview.controllers.pods.controller import PodController

__all__ = ["PodController"]
