"""kube-environments — load Dev/Test/Staging/Production environments from a Kubernetes ConfigMap."""
from .cluster import ClusterClient, ConfigMap, InMemoryClusterClient, KubernetesClusterClient
from .environments import (
    ENVIRONMENTS_CONFIG_MAP, Environment, EnvironmentDecodeError, Environments,
    parse_environment, resolve_namespace,
)

__version__ = "0.1.0"

__all__ = [
    "ClusterClient", "ConfigMap", "InMemoryClusterClient", "KubernetesClusterClient",
    "ENVIRONMENTS_CONFIG_MAP", "Environment", "EnvironmentDecodeError", "Environments",
    "parse_environment", "resolve_namespace",
]
