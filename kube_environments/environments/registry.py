"""
Environments Registry — loads the environments (Dev, Test, Staging, Production)
defined in the fabric8-environments ConfigMap of a namespace and serves
read-only lookups over them.
Entries that fail to decode are logged and skipped; they never abort a load.
"""

import logging
from types import MappingProxyType
from typing import Optional, Dict, List, Iterator, Mapping

from kube_environments.cluster.client import ClusterClient, ConfigMap
from kube_environments.config.settings import settings
from .environment import Environment, EnvironmentDecodeError, parse_environment

logger = logging.getLogger(__name__)

ENVIRONMENTS_CONFIG_MAP = "fabric8-environments"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def resolve_namespace(client: ClusterClient, namespace: Optional[str] = None,
                      default: Optional[str] = None) -> str:
    """
    Namespace to load from: the given one, else the client's configured
    namespace, else the process default.
    """
    if not _is_blank(namespace):
        return namespace
    namespace = client.get_namespace()
    if not _is_blank(namespace):
        return namespace
    return default or settings.default_namespace


class Environments:
    """Immutable snapshot of environment key -> Environment."""

    def __init__(self, environments: Optional[Dict[str, Environment]] = None):
        self._environments: Dict[str, Environment] = dict(environments or {})

    # ── Loading ───────────────────────────────────────────────────

    @classmethod
    def load(cls, client: ClusterClient, namespace: Optional[str] = None,
             log: Optional[logging.Logger] = None,
             config_map_name: Optional[str] = None) -> "Environments":
        """Load the environments ConfigMap from a namespace. A missing ConfigMap yields no environments."""
        log = log or logger
        namespace = resolve_namespace(client, namespace)
        name = config_map_name or ENVIRONMENTS_CONFIG_MAP
        log.debug("Loading environments from namespace: %s", namespace)
        config_map = client.get_config_map(name, namespace)
        return cls.from_config_map(config_map, log=log)

    @classmethod
    def from_config_map(cls, config_map: Optional[ConfigMap],
                        log: Optional[logging.Logger] = None) -> "Environments":
        log = log or logger
        environments: Dict[str, Environment] = {}
        if config_map is not None and config_map.data:
            for key, text in config_map.data.items():
                try:
                    environments[key] = parse_environment(key, text)
                except EnvironmentDecodeError as e:
                    log.warning("Failed to parse environment YAML for %s. Reason: %s. YAML: %s",
                                key, e, text, exc_info=True)
        log.debug("Loaded %d environment(s)", len(environments))
        return cls(environments)

    @classmethod
    def namespace_for_environment(cls, client: ClusterClient, environment_key: str,
                                  namespace: Optional[str] = None,
                                  log: Optional[logging.Logger] = None) -> Optional[str]:
        """Returns the namespace for the given environment key, or None if it is not defined."""
        environment = cls.load(client, namespace, log=log).get_environment(environment_key)
        if environment is None:
            return None
        return environment.namespace

    # ── Lookups ───────────────────────────────────────────────────

    def get_environment(self, environment_key: str) -> Optional[Environment]:
        return self._environments.get(environment_key)

    def get_environments(self) -> Mapping[str, Environment]:
        return MappingProxyType(self._environments)

    def get_environment_set(self) -> List[Environment]:
        """All environments sorted by (order, key)."""
        return sorted(self._environments.values())

    def __len__(self) -> int:
        return len(self._environments)

    def __contains__(self, environment_key: object) -> bool:
        return environment_key in self._environments

    def __iter__(self) -> Iterator[Environment]:
        return iter(self.get_environment_set())

    def __repr__(self) -> str:
        return f"Environments({sorted(self._environments)})"
