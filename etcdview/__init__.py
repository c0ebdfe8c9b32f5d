"""etcd-pod-viewer: terminal inspector for the pods backing an etcd resource."""

__version__ = "0.1.0"
