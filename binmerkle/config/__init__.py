"""
Runtime Configuration Module

Provides configuration loading and management for binmerkle.
"""

from .runtime import (
    RuntimeConfig,
    TreeConfig,
    env_flag,
    get_default_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "TreeConfig",
    "env_flag",
    "get_default_config",
    "set_default_config",
]
