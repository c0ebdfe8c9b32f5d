"""Parsers for pod payloads."""

from etcdview.controllers.pods.parsers.pod_parser import PodParser

__all__ = ["PodParser"]
