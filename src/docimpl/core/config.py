"""Configuration models used by the implementors registry.

RegistryConfig

`pending_policy` (`"slot" | "queue"`)
: How deliveries are held before the viewer installs its callback. `slot`
  keeps only the most recent mapping (earlier ones are discarded); `queue`
  keeps every mapping and drains them in arrival order on install.

`warn_on_overwrite` (`bool`)
: Emit a warning diagnostic when a pending mapping is replaced under the
  `slot` policy. When `False` the replacement is only reported as an event.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
import yaml

from docimpl.core.exceptions import ConfigError


class PendingPolicy(str, Enum):
    """Holding strategy used while the registry is uninitialised."""

    SLOT = "slot"
    QUEUE = "queue"


class RegistryConfig(BaseModel):
    """Settings controlling the registry hand-off."""

    model_config = ConfigDict(extra="forbid")

    pending_policy: PendingPolicy = PendingPolicy.SLOT
    warn_on_overwrite: bool = True


def load_config(path: Path | str) -> RegistryConfig:
    """Load a `RegistryConfig` from a YAML document.

    The settings may sit at the top level or under a `registry` key.
    """
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration '{config_path}': {exc}") from exc

    try:
        data: Any = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in '{config_path}': {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration '{config_path}' must be a mapping.")
    if "registry" in data:
        data = data["registry"] or {}

    try:
        return RegistryConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid registry configuration in '{config_path}': {exc}") from exc


__all__ = ["PendingPolicy", "RegistryConfig", "load_config"]
