"""Environments — Dev/Test/Staging/Production records loaded from the fabric8-environments ConfigMap."""
from .environment import Environment, EnvironmentDecodeError, parse_environment
from .registry import ENVIRONMENTS_CONFIG_MAP, Environments, resolve_namespace

__all__ = [
    "Environment", "EnvironmentDecodeError", "parse_environment",
    "ENVIRONMENTS_CONFIG_MAP", "Environments", "resolve_namespace",
]
