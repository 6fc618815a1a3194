"""
Environment record and its YAML decoder.
Each value of the environments ConfigMap is a small YAML document, e.g.

    name: Staging
    namespace: myproject-staging
    order: 2
"""

import functools
from typing import Optional, Any
import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator


class EnvironmentDecodeError(ValueError):
    """Raised when one ConfigMap entry cannot be decoded into an Environment."""

    def __init__(self, key: str, message: str, raw: Optional[str] = None):
        self.key = key
        self.raw = raw
        super().__init__(f"{key}: {message}")


@functools.total_ordering
class Environment(BaseModel):
    """
    A deployment target. Sorted by (order, key) so a sorted set of
    environments reads in promotion order; the remaining fields break ties.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    key: str
    name: str = ""
    namespace: str
    order: int = 0
    cluster_api_server: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("cluster_api_server", "clusterAPIServer"),
    )

    @model_validator(mode="before")
    @classmethod
    def default_name_to_key(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name") and data.get("key"):
            data = {**data, "name": data["key"]}
        return data

    def sort_key(self):
        # every field, so records that tie are also equal
        return (self.order, self.key, self.name, self.namespace, self.cluster_api_server or "")

    def __lt__(self, other):
        if not isinstance(other, Environment):
            return NotImplemented
        return self.sort_key() < other.sort_key()


def parse_environment(key: str, text: Optional[str]) -> Environment:
    """Decode one ConfigMap value. The entry key fills in a missing `key` field."""
    try:
        data = yaml.safe_load(text) if text is not None else None
    except yaml.YAMLError as e:
        raise EnvironmentDecodeError(key, f"invalid YAML: {e}", raw=text) from e
    if not isinstance(data, dict):
        raise EnvironmentDecodeError(
            key, f"expected a mapping, got {type(data).__name__}", raw=text,
        )
    data.setdefault("key", key)
    try:
        return Environment.model_validate(data)
    except ValidationError as e:
        raise EnvironmentDecodeError(key, str(e), raw=text) from e
