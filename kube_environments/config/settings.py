"""
kube-environments - Configuration Settings
Cluster connection, namespace defaults and the environments ConfigMap name.
"""

import logging
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"


class Settings(BaseSettings):
    """kube-environments settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Namespaces ────────────────────────────────────────────────────
    default_namespace: str = Field(default=DEFAULT_NAMESPACE, alias="KUBERNETES_NAMESPACE")

    # ── Cluster Connection ────────────────────────────────────────────
    kubeconfig: Optional[str] = Field(default=None, alias="KUBECONFIG")
    kube_context: Optional[str] = Field(default=None, alias="KUBE_CONTEXT")
    in_cluster: bool = Field(default=False, alias="KUBERNETES_IN_CLUSTER")
    request_timeout_seconds: float = Field(default=30.0, alias="KUBERNETES_REQUEST_TIMEOUT")

    @field_validator("default_namespace")
    @classmethod
    def validate_default_namespace(cls, v: str) -> str:
        if not v or not v.strip():
            logger.warning("Blank default namespace configured, using '%s'", DEFAULT_NAMESPACE)
            return DEFAULT_NAMESPACE
        return v.strip()

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("request timeout must be positive")
        return v


settings = Settings()
