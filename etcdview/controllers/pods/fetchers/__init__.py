"""Fetchers for pod data."""

from etcdview.controllers.pods.fetchers.pod_fetcher import PodFetcher

__all__ = ["PodFetcher"]
