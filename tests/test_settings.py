"""
Tests for Settings — environment variable mapping and validation.
Run: pytest tests/test_settings.py -v
"""
import pytest
from pydantic import ValidationError
from kube_environments.config.settings import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("KUBERNETES_NAMESPACE", "KUBECONFIG",
                    "KUBE_CONTEXT", "KUBERNETES_IN_CLUSTER", "KUBERNETES_REQUEST_TIMEOUT"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.default_namespace == "default"
        assert s.kubeconfig is None
        assert s.in_cluster is False
        assert s.request_timeout_seconds == 30.0

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("KUBERNETES_NAMESPACE", "platform")
        monkeypatch.setenv("KUBERNETES_IN_CLUSTER", "true")
        monkeypatch.setenv("KUBERNETES_REQUEST_TIMEOUT", "2.5")
        s = Settings(_env_file=None)
        assert s.default_namespace == "platform"
        assert s.in_cluster is True
        assert s.request_timeout_seconds == 2.5

    def test_blank_default_namespace_falls_back(self, monkeypatch):
        monkeypatch.setenv("KUBERNETES_NAMESPACE", "  ")
        assert Settings(_env_file=None).default_namespace == "default"

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, KUBERNETES_REQUEST_TIMEOUT=0)
