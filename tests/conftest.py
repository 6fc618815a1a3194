"""
Shared fixtures for the kube-environments test suite.
"""
import sys
import os
import pytest

# Ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Settings are read at import time; keep the developer's shell out of the tests
os.environ["KUBERNETES_NAMESPACE"] = "default"
os.environ.pop("KUBE_CONTEXT", None)
os.environ.pop("KUBERNETES_IN_CLUSTER", None)


DEV_YAML = """\
name: Development
namespace: ns-dev
order: 0
"""

STAGING_YAML = """\
name: Staging
namespace: ns-staging
order: 2
clusterAPIServer: https://staging.example.com:6443
"""

PROD_YAML = """\
key: prod
name: Production
namespace: ns-prod
order: 3
"""


@pytest.fixture
def environments_data():
    """ConfigMap data with three well-formed environments."""
    return {"dev": DEV_YAML, "staging": STAGING_YAML, "prod": PROD_YAML}


@pytest.fixture
def config_map(environments_data):
    from kube_environments.cluster.client import ConfigMap
    return ConfigMap(name="fabric8-environments", namespace="teamA", data=environments_data)


@pytest.fixture
def cluster_client(config_map):
    """Fresh InMemoryClusterClient holding the environments ConfigMap in teamA."""
    from kube_environments.cluster.client import InMemoryClusterClient
    client = InMemoryClusterClient(namespace="teamA")
    client.put_config_map(config_map)
    return client


@pytest.fixture
def empty_client():
    """Fresh InMemoryClusterClient with no ConfigMaps and no configured namespace."""
    from kube_environments.cluster.client import InMemoryClusterClient
    return InMemoryClusterClient()
