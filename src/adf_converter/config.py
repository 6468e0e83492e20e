"""YAML-backed configuration for the ADF converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from adf_converter.exceptions import ConfigError


@dataclass
class ParserConfig:
    """Parser selection and options."""

    engine: str = "markdown"  # "markdown" or "plain"
    unescape: bool = False  # strip backslash escapes before parsing


@dataclass
class JiraConfig:
    """Defaults for ticket and comment payloads."""

    project_key: str = "PROJ"
    issue_type: str = "Task"
    labels: list[str] = field(default_factory=lambda: ["from-slack", "incoming-ticket"])
    summary_max_length: int = 255


@dataclass
class DedupConfig:
    """Seen-event cache settings."""

    capacity: int = 1000


@dataclass
class OutputConfig:
    """ADF JSON output settings."""

    indent: Optional[int] = 2


@dataclass
class Config:
    """Top-level converter configuration."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    jira: JiraConfig = field(default_factory=JiraConfig)
    dedup: DedupConfig = field(default_factory=DedupConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    verbose: bool = False

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        """Load configuration from a YAML file."""
        try:
            text = path.read_text(encoding="utf-8")
            data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}")
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}")

        return cls._from_dict(data)

    @classmethod
    def from_yaml_string(cls, text: str) -> Config:
        """Load configuration from a YAML string."""
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML: {exc}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> Config:
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        parser_data = _section(data, "parser")
        jira_data = _section(data, "jira")
        dedup_data = _section(data, "dedup")
        output_data = _section(data, "output")

        config = cls(
            parser=ParserConfig(**{k: v for k, v in parser_data.items() if k in ParserConfig.__dataclass_fields__}),
            jira=JiraConfig(**{k: v for k, v in jira_data.items() if k in JiraConfig.__dataclass_fields__}),
            dedup=DedupConfig(**{k: v for k, v in dedup_data.items() if k in DedupConfig.__dataclass_fields__}),
            output=OutputConfig(**{k: v for k, v in output_data.items() if k in OutputConfig.__dataclass_fields__}),
            verbose=data.get("verbose", False),
        )

        if isinstance(config.jira.labels, str):
            config.jira.labels = [label.strip() for label in config.jira.labels.split(",") if label.strip()]
        capacity = config.dedup.capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ConfigError(f"dedup.capacity must be an integer, got {capacity!r}")
        if capacity < 1:
            raise ConfigError(f"dedup.capacity must be positive, got {capacity}")
        return config

    @classmethod
    def default(cls) -> Config:
        """Return the default configuration."""
        return cls()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Config:
        """Load config from path, or return defaults if path is None."""
        if path is None:
            return cls.default()
        return cls.from_yaml(path)


def _section(data: dict, name: str) -> dict:
    """Return a config section, treating an empty key as no overrides."""
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
    return section
