"""
Cluster Client — the small slice of the Kubernetes API the environments
registry needs: the caller's default namespace and reading one ConfigMap.

KubernetesClusterClient wraps the official kubernetes client.
InMemoryClusterClient serves ConfigMaps from a dict for tests and offline use.
"""

import logging
import os
from typing import Optional, Dict, List, Tuple, Protocol, runtime_checkable
from pydantic import BaseModel

from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.exceptions import ApiException

from kube_environments.config.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

SERVICE_ACCOUNT_NAMESPACE_FILE = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"


class ConfigMap(BaseModel):
    """A ConfigMap as seen by this package: identity plus its string data."""
    name: str
    namespace: str = ""
    data: Optional[Dict[str, str]] = None


@runtime_checkable
class ClusterClient(Protocol):
    """Capability the registry consumes from a cluster API client."""

    def get_namespace(self) -> Optional[str]:
        ...

    def get_config_map(self, name: str, namespace: str) -> Optional[ConfigMap]:
        ...


# ══════════════════════════════════════════════════════════════════════════════
# Kubernetes
# ══════════════════════════════════════════════════════════════════════════════

class KubernetesClusterClient:
    """
    ClusterClient backed by the kubernetes CoreV1Api.
    A 404 on read is reported as an absent ConfigMap; every other
    ApiException propagates to the caller.
    """

    def __init__(
        self,
        api: Optional[k8s_client.CoreV1Api] = None,
        namespace: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or default_settings
        self._namespace = namespace
        if api is None:
            self._load_config()
            api = k8s_client.CoreV1Api()
        self._api = api

    def _load_config(self):
        if self._settings.in_cluster:
            logger.debug("Loading in-cluster kubernetes config")
            k8s_config.load_incluster_config()
        else:
            logger.debug("Loading kubeconfig (file=%s, context=%s)",
                         self._settings.kubeconfig, self._settings.kube_context)
            k8s_config.load_kube_config(
                config_file=self._settings.kubeconfig,
                context=self._settings.kube_context,
            )

    # ── Namespace ─────────────────────────────────────────────────

    def get_namespace(self) -> Optional[str]:
        """Namespace the client is configured for, or None if it has none."""
        if self._namespace:
            return self._namespace
        if self._settings.in_cluster:
            return self._read_service_account_namespace()
        return self._kubeconfig_namespace()

    def _read_service_account_namespace(self) -> Optional[str]:
        if not os.path.exists(SERVICE_ACCOUNT_NAMESPACE_FILE):
            return None
        with open(SERVICE_ACCOUNT_NAMESPACE_FILE, "r", encoding="utf-8") as f:
            return f.read().strip() or None

    def _kubeconfig_namespace(self) -> Optional[str]:
        try:
            contexts, active = k8s_config.list_kube_config_contexts(config_file=self._settings.kubeconfig)
        except k8s_config.ConfigException as e:
            logger.debug("No kubeconfig contexts available: %s", e)
            return None
        if self._settings.kube_context:
            active = next((c for c in contexts or [] if c.get("name") == self._settings.kube_context), None)
        if not active:
            return None
        return (active.get("context") or {}).get("namespace")

    # ── ConfigMaps ────────────────────────────────────────────────

    def get_config_map(self, name: str, namespace: str) -> Optional[ConfigMap]:
        """Read a ConfigMap; None when it does not exist."""
        try:
            cm = self._api.read_namespaced_config_map(
                name, namespace, _request_timeout=self._settings.request_timeout_seconds,
            )
        except ApiException as e:
            if e.status == 404:
                logger.debug("ConfigMap %s/%s not found", namespace, name)
                return None
            raise
        metadata = cm.metadata
        return ConfigMap(
            name=(metadata.name if metadata and metadata.name else name),
            namespace=(metadata.namespace if metadata and metadata.namespace else namespace),
            data=dict(cm.data) if cm.data is not None else None,
        )


# ══════════════════════════════════════════════════════════════════════════════
# In-memory
# ══════════════════════════════════════════════════════════════════════════════

class InMemoryClusterClient:
    """
    ClusterClient serving ConfigMaps held in a dict keyed by (namespace, name).
    `requests` is an unbounded call log of every (namespace, name) read;
    `clear_requests()` resets it.
    """

    def __init__(
        self,
        config_maps: Optional[Dict[Tuple[str, str], ConfigMap]] = None,
        namespace: Optional[str] = None,
    ):
        self._config_maps: Dict[Tuple[str, str], ConfigMap] = dict(config_maps or {})
        self._namespace = namespace
        self.requests: List[Tuple[str, str]] = []

    def get_namespace(self) -> Optional[str]:
        return self._namespace

    def get_config_map(self, name: str, namespace: str) -> Optional[ConfigMap]:
        self.requests.append((namespace, name))
        return self._config_maps.get((namespace, name))

    def put_config_map(self, config_map: ConfigMap) -> ConfigMap:
        self._config_maps[(config_map.namespace, config_map.name)] = config_map
        return config_map

    def clear_requests(self):
        self.requests.clear()
