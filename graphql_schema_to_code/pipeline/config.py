"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DEPRECATION_REASON = "No reason specified."


class ConfigError(Exception):
    """Raised for unreadable or malformed configuration files."""

    pass


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Type definitions to skip during generation
    ignore_types: list[str] = field(default_factory=list)

    # Convert field and argument names to snake_case
    convert_field_names: bool = True

    # Reason used when @deprecated carries no reason argument
    default_deprecation_reason: str = DEFAULT_DEPRECATION_REASON

    # Prepend `from graphene import ...` for the names the code uses
    add_imports: bool = False

    # Add generation comment at top of file (only when a header is rendered)
    add_generation_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_file(path: str | Path) -> CodeGeneratorConfig:
        """Load a config from a JSON file."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")
        return CodeGeneratorConfig.from_dict(data)

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ignore_types": self.ignore_types,
            "convert_field_names": self.convert_field_names,
            "default_deprecation_reason": self.default_deprecation_reason,
            "add_imports": self.add_imports,
            "add_generation_comment": self.add_generation_comment,
        }
