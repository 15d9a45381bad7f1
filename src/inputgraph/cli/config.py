"""
Configuration loading and validation for inputgraph projects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import ConfigError
from ..core.options import GeneratorOptions


DEFAULT_CONFIG_PATH = "inputgraph.yaml"


@dataclass
class ProjectConfig:
    """Main inputgraph configuration."""
    version: int = 1
    schema: str = "schema.yaml"
    output: str = "generated"
    workers: int = 1
    generator: GeneratorOptions = field(default_factory=GeneratorOptions)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectConfig":
        """Create config from dictionary."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        workers = data.get("workers", 1)
        if not isinstance(workers, int) or workers < 1:
            raise ConfigError(f"Invalid workers '{workers}', must be a positive integer")

        return cls(
            version=data.get("version", 1),
            schema=data.get("schema", "schema.yaml"),
            output=data.get("output", "generated"),
            workers=workers,
            generator=GeneratorOptions.from_dict(data.get("generator")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return {
            "version": self.version,
            "schema": self.schema,
            "output": self.output,
            "workers": self.workers,
            "generator": {
                "optional_null_union": self.generator.optional_null_union,
                "raw_foreign_key_inputs": sorted(
                    kind.value for kind in self.generator.raw_foreign_key_inputs
                ),
                "file_naming": self.generator.file_naming,
                "decorator": self.generator.decorator,
                **self.generator.extra,
            },
        }

    def save(self, path: Path | str = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        content = yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        path.write_text(content)


def load_config(path: Path | str = DEFAULT_CONFIG_PATH) -> ProjectConfig | None:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        return None

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {path}: {e}") from e
    return ProjectConfig.from_dict(data or {})
