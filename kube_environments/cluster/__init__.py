"""Cluster access — ConfigMap model, client protocol, kubernetes and in-memory clients."""
from .client import (
    ClusterClient, ConfigMap, InMemoryClusterClient, KubernetesClusterClient,
    SERVICE_ACCOUNT_NAMESPACE_FILE,
)

__all__ = [
    "ClusterClient", "ConfigMap", "InMemoryClusterClient", "KubernetesClusterClient",
    "SERVICE_ACCOUNT_NAMESPACE_FILE",
]
