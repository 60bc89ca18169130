"""
Engine configuration.

Settings are read from the optional ``engine`` section of a YAML file:

    engine:
      max_variables: 12
      strict_parentheses: true
      score_precision: 1
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError


DEFAULT_CONFIG_FILE = "mathlogic.yaml"


class EngineConfig(BaseModel):
    """Tunable limits and parsing policy for the engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_variables: int = Field(
        default=20,
        ge=1,
        le=30,
        description="Largest variable count a truth table may enumerate",
    )
    strict_parentheses: bool = Field(
        default=True,
        description="Reject unmatched parentheses instead of ignoring them",
    )
    score_precision: int = Field(
        default=1,
        ge=0,
        le=4,
        description="Decimal places kept in the score percentage",
    )

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "EngineConfig":
        """Load configuration from YAML content."""
        try:
            data = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"YAML parse error: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        section = data.get("engine", {}) or {}
        if not isinstance(section, dict):
            raise ConfigError("'engine' section must be a mapping")

        try:
            return cls(**section)
        except ValidationError as e:
            raise ConfigError(f"Invalid engine configuration: {e}") from e

    @classmethod
    def from_file(cls, path: Path) -> "EngineConfig":
        """Load configuration from a file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_yaml(f.read())


def load_config(path: Optional[Path] = None) -> EngineConfig:
    """
    Load engine configuration.

    Args:
        path: Config file. Defaults to ``mathlogic.yaml`` in the working
            directory; a missing file yields the defaults.

    Returns:
        The loaded EngineConfig.
    """
    path = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    if not path.exists():
        return EngineConfig()
    return EngineConfig.from_file(path)
