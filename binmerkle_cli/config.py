"""
CLI Configuration

Configuration management for the binmerkle CLI.
Supports environment variables and configuration files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from binmerkle.config.runtime import env_flag


# Environment variable prefix
ENV_PREFIX = "BINMERKLE_"

OUTPUT_FORMATS = ("human", "json")


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # Tree diagnostics
    trace_construction: bool = False

    # Output
    default_output_format: str = "human"  # "human" or "json"


def load_config_from_env() -> CLIConfig:
    """Load configuration from environment variables."""
    config = CLIConfig()

    config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", config.log_level)
    config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if os.getenv(f"{ENV_PREFIX}TRACE_CONSTRUCTION"):
        config.trace_construction = env_flag(f"{ENV_PREFIX}TRACE_CONSTRUCTION")
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "human")

    return config


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    config = CLIConfig()
    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)
    config.trace_construction = data.get("trace_construction", config.trace_construction)
    config.default_output_format = data.get(
        "default_output_format", config.default_output_format
    )

    if config.default_output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"default_output_format must be one of {OUTPUT_FORMATS}, "
            f"got {config.default_output_format!r}"
        )
    return config


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        default_paths = [
            Path.cwd() / "binmerkle.json",
            Path.home() / ".config" / "binmerkle" / "config.json",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    env_config = load_config_from_env()

    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = env_config.log_level
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = env_config.log_file
    if os.getenv(f"{ENV_PREFIX}TRACE_CONSTRUCTION"):
        config.trace_construction = env_config.trace_construction
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = env_config.default_output_format

    return config


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """{
  "log_level": "WARNING",
  "log_file": null,
  "trace_construction": false,
  "default_output_format": "human"
}
"""
