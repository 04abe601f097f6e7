"""Observer configuration stored as YAML.

The file lives at ``$CONFIG_DIR/gh-observer.yaml`` (``~/.config`` when
CONFIG_DIR is unset) and is created with defaults on first use.
"""

import io
import os
from datetime import datetime
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .monitor.validator import is_valid_repository

CONFIG_FILENAME = "gh-observer.yaml"


class ConfigError(Exception):
    """Configuration file could not be read, parsed or validated."""


class ObserverConfig(BaseModel):
    """Settings for the observer loop."""

    interval: float = Field(60.0, gt=0, description="Seconds between poll cycles")
    targets: list[str] = Field(
        default_factory=list, description="Repositories to watch (owner/name)"
    )
    source: Literal["api", "gh"] = Field(
        "api", description="Issue source: GitHub REST API or the gh CLI"
    )
    issue_limit: int = Field(100, ge=1, description="Maximum issues per fetch")
    command_timeout: float = Field(
        60.0, gt=0, description="Timeout in seconds for each gh CLI call"
    )
    log_level: str = Field("INFO", description="Logging level name")
    created_at: datetime | None = Field(
        None, description="When the configuration file was first written"
    )

    @field_validator("targets")
    @classmethod
    def validate_targets(cls, targets: list[str]) -> list[str]:
        invalid = [target for target in targets if not is_valid_repository(target)]
        if invalid:
            raise ValueError(f"Invalid repository identifiers: {', '.join(invalid)}")
        # Keep first occurrence order, drop duplicates
        return list(dict.fromkeys(targets))


def default_config_dir() -> Path:
    """Directory holding the config file, honouring CONFIG_DIR."""
    configured = os.getenv("CONFIG_DIR")
    if configured:
        return Path(configured)
    return Path.home() / ".config"


def _yaml() -> YAML:
    yaml = YAML(typ="safe")
    yaml.default_flow_style = False
    yaml.allow_duplicate_keys = False
    return yaml


class ConfigStore:
    """Loads and saves ObserverConfig as a YAML file."""

    def __init__(self, config_dir: str | Path | None = None):
        """Initialize config store.

        Args:
            config_dir: Directory of the config file (defaults to CONFIG_DIR
                or ~/.config)
        """
        self.config_dir = Path(config_dir) if config_dir else default_config_dir()
        self.path = self.config_dir / CONFIG_FILENAME

    def ensure(self) -> ObserverConfig:
        """Return the stored config, writing a default file if none exists."""
        if self.path.exists():
            return self.load()

        config = ObserverConfig(created_at=datetime.now().replace(microsecond=0))
        self.save(config)
        return config

    def load(self) -> ObserverConfig:
        """Read and validate the config file.

        Raises:
            ConfigError: If the file is unreadable, not YAML or invalid
        """
        try:
            loaded = _yaml().load(self.path.read_text(encoding="utf-8"))
        except (OSError, YAMLError) as e:
            raise ConfigError(f"Failed to read {self.path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{self.path} must contain a mapping")

        try:
            return ObserverConfig.model_validate(loaded)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.path}: {e}") from e

    def save(self, config: ObserverConfig) -> Path:
        """Write ``config`` to the config file, creating its directory."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        stream = io.StringIO()
        _yaml().dump(config.model_dump(mode="json", exclude_none=True), stream)
        self.path.write_text(stream.getvalue(), encoding="utf-8")
        return self.path

    def add_targets(self, repo_ids: list[str]) -> ObserverConfig:
        """Append repositories to the target list and persist it."""
        config = self.ensure()
        try:
            updated = ObserverConfig.model_validate(
                {**config.model_dump(), "targets": config.targets + list(repo_ids)}
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid targets: {e}") from e
        self.save(updated)
        return updated

    def remove_targets(self, repo_ids: list[str]) -> ObserverConfig:
        """Remove repositories from the target list and persist it."""
        config = self.ensure()
        remaining = [target for target in config.targets if target not in repo_ids]
        updated = config.model_copy(update={"targets": remaining})
        self.save(updated)
        return updated
