"""Configuration package — process-wide settings read from the environment."""
from .settings import Settings, settings

__all__ = ["Settings", "settings"]
