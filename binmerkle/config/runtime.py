"""
Runtime Configuration

Central configuration for tree construction diagnostics.

Logging itself is configured by the application (see binmerkle_cli);
the library only emits records through module loggers.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from typing import Any, Optional
from pathlib import Path

from dotenv import load_dotenv

from binmerkle.schemas.errors import ConfigException

load_dotenv()


ENV_PREFIX = "BINMERKLE_"


def env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean environment variable ("1", "true" or "yes", any case)."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class TreeConfig:
    """Configuration for the tree engine."""
    # Emit a DEBUG record for every node created by the builder
    trace_construction: bool = False
    # Re-check the rebuilt path after every update
    check_integrity_on_update: bool = False


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for binmerkle.

    Can be loaded from:
    - Environment variables (and a .env file)
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - BINMERKLE_TRACE_CONSTRUCTION: Log every created node (true/false)
        - BINMERKLE_CHECK_INTEGRITY: Re-check hashes after update (true/false)
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}TRACE_CONSTRUCTION"):
            overrides.setdefault("tree", {})["trace_construction"] = env_flag(
                f"{ENV_PREFIX}TRACE_CONSTRUCTION"
            )
        if os.getenv(f"{ENV_PREFIX}CHECK_INTEGRITY"):
            overrides.setdefault("tree", {})["check_integrity_on_update"] = env_flag(
                f"{ENV_PREFIX}CHECK_INTEGRITY"
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigException(
                f"Config file must contain a mapping, got {type(data).__name__}",
                details={"path": str(path)},
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {})

        try:
            tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
        except TypeError as e:
            raise ConfigException(f"Invalid configuration: {e}") from e

        return cls(
            tree=tree,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        for key, value in overrides.get("tree", {}).items():
            setattr(new_config.tree, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "trace_construction": self.tree.trace_construction,
                "check_integrity_on_update": self.tree.check_integrity_on_update,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env defaults)."""
    global _default_config
    _default_config = config
